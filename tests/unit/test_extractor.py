"""Tests for term extraction."""

import pytest
from rdflib import BNode, Graph, Literal, Namespace, OWL, RDF, RDFS, URIRef

from onto_triggers.errors import ExtractionError, MalformedIri, StoreQueryError
from onto_triggers.ontology import OntologyTerm, SubjectKind, TripleStore, extract_terms

OBO = Namespace("http://purl.obolibrary.org/obo/")


class TestSubjectKind:
    """Test subject kind metadata."""

    def test_type_iris(self):
        assert SubjectKind.CLASS.type_iri == str(OWL.Class)
        assert SubjectKind.OBJECT_PROPERTY.type_iri == str(OWL.ObjectProperty)

    def test_display_names(self):
        assert SubjectKind.CLASS.display_name == "Class"
        assert SubjectKind.OBJECT_PROPERTY.display_name == "ObjectProperty"


class TestOntologyTerm:
    """Test the intermediate term record."""

    def test_local_name(self):
        term = OntologyTerm("bfo:BFO_0000030", "object aggregate")
        assert term.local_name == "BFO_0000030"

    def test_local_name_without_prefix(self):
        assert OntologyTerm("BFO").local_name == "BFO"

    def test_empty_qualified_name_rejected(self):
        with pytest.raises(ValueError):
            OntologyTerm("")

    def test_immutable(self):
        term = OntologyTerm("bfo:BFO_0000030")
        with pytest.raises(AttributeError):
            term.english_label = "changed"


class TestExtractTerms:
    """Test extraction of classes and object properties."""

    def test_classes_sorted_by_iri(self, core_store, qualifier):
        """Classes come back in IRI order with resolved labels."""
        terms = extract_terms(core_store, qualifier, SubjectKind.CLASS)
        assert [t.qualified_name for t in terms] == [
            "bfo:BFO_0000030",
            "bfo:BFO_0000040",
            "Core:BusinessProcess",
            "Core:Unlabeled",
        ]
        assert [t.english_label for t in terms] == [
            "object aggregate",
            "material entity",
            "business process",
            None,
        ]

    def test_blank_nodes_skipped(self, core_store, qualifier):
        """The anonymous class never appears in the output."""
        terms = extract_terms(core_store, qualifier, SubjectKind.CLASS)
        assert all(not t.iri.startswith("_:") for t in terms)
        assert "anonymous" not in [t.english_label for t in terms]

    def test_object_properties(self, core_store, qualifier):
        """Untagged labels do not count as English."""
        terms = extract_terms(core_store, qualifier, SubjectKind.OBJECT_PROPERTY)
        assert [(t.qualified_name, t.english_label) for t in terms] == [
            ("bfo:BFO_0000050", "part of"),
            ("Core:hasAgent", None),
        ]

    def test_iri_recorded(self, core_store, qualifier):
        terms = extract_terms(core_store, qualifier, SubjectKind.OBJECT_PROPERTY)
        assert terms[0].iri == str(OBO.BFO_0000050)

    def test_empty_graph(self, qualifier):
        assert extract_terms(TripleStore(Graph()), qualifier, SubjectKind.CLASS) == []

    def test_only_blank_nodes(self, qualifier):
        g = Graph()
        g.add((BNode(), RDF.type, OWL.Class))
        assert extract_terms(TripleStore(g), qualifier, SubjectKind.CLASS) == []

    def test_non_literal_label_hides_english_label(self, qualifier):
        """A resource-valued label sorting first suppresses the English literal."""
        g = Graph()
        g.add((OBO.BFO_0000030, RDF.type, OWL.Class))
        g.add((OBO.BFO_0000030, RDFS.label, URIRef("http://example.org/label")))
        g.add((OBO.BFO_0000030, RDFS.label, Literal("object aggregate", lang="en")))
        terms = extract_terms(TripleStore(g), qualifier, SubjectKind.CLASS)
        assert terms[0].english_label is None

    def test_custom_label_predicate(self, qualifier):
        g = Graph()
        skos_pref = URIRef("http://www.w3.org/2004/02/skos/core#prefLabel")
        g.add((OBO.BFO_0000030, RDF.type, OWL.Class))
        g.add((OBO.BFO_0000030, skos_pref, Literal("object aggregate", lang="en")))
        terms = extract_terms(TripleStore(g), qualifier, SubjectKind.CLASS, label_predicate=str(skos_pref))
        assert terms[0].english_label == "object aggregate"

    def test_malformed_label_predicate(self, core_store, qualifier):
        with pytest.raises(MalformedIri):
            extract_terms(core_store, qualifier, SubjectKind.CLASS, label_predicate="label")

    def test_store_failure_aborts_extraction(self, qualifier):
        """Lookup failures surface as ExtractionError with no partial result."""

        class BrokenGraph:
            def subjects(self, predicate, obj):
                return iter([OBO.BFO_0000030])

            def objects(self, subject, predicate):
                raise RuntimeError("index corrupted")

        with pytest.raises(StoreQueryError) as exc_info:
            extract_terms(TripleStore(BrokenGraph()), qualifier, SubjectKind.CLASS)
        assert isinstance(exc_info.value, ExtractionError)
