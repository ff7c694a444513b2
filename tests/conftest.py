"""Shared test fixtures for the onto-triggers test suite."""

import pytest
from rdflib import BNode, Graph, Literal, Namespace, OWL, RDF, RDFS, URIRef

from onto_triggers.config import ExpanderConfig
from onto_triggers.ontology import NameQualifier, TripleStore

OBO = Namespace("http://purl.obolibrary.org/obo/")
CORE = Namespace("https://spec.industrialontologies.org/ontology/core/Core/")


# ============================================================================
# Graph Fixtures
# ============================================================================

@pytest.fixture
def core_graph():
    """Mixed ontology: BFO numeric IDs, Core names, an unlabeled class and a blank node."""
    g = Graph()
    ontology = URIRef("https://spec.industrialontologies.org/ontology/core/Core")
    g.add((ontology, RDF.type, OWL.Ontology))
    g.add((ontology, OWL.imports, URIRef("http://purl.obolibrary.org/obo/bfo.owl")))

    # Classes
    g.add((OBO.BFO_0000030, RDF.type, OWL.Class))
    g.add((OBO.BFO_0000030, RDFS.label, Literal("object aggregate", lang="en")))
    g.add((OBO.BFO_0000030, RDFS.label, Literal("agrégat d'objets", lang="fr")))

    g.add((OBO.BFO_0000040, RDF.type, OWL.Class))
    g.add((OBO.BFO_0000040, RDFS.label, Literal("material entity", lang="en")))

    g.add((CORE.BusinessProcess, RDF.type, OWL.Class))
    g.add((CORE.BusinessProcess, RDFS.label, Literal("business process", lang="en")))

    g.add((CORE.Unlabeled, RDF.type, OWL.Class))

    restriction = BNode()
    g.add((restriction, RDF.type, OWL.Class))
    g.add((restriction, RDFS.label, Literal("anonymous", lang="en")))

    # Object properties
    g.add((OBO.BFO_0000050, RDF.type, OWL.ObjectProperty))
    g.add((OBO.BFO_0000050, RDFS.label, Literal("part of", lang="en")))

    g.add((CORE.hasAgent, RDF.type, OWL.ObjectProperty))
    g.add((CORE.hasAgent, RDFS.label, Literal("has agent")))

    return g


@pytest.fixture
def bfo_graph():
    """BFO-style ontology where every term has a numeric ID and English label."""
    g = Graph()
    g.add((OBO.BFO_0000030, RDF.type, OWL.Class))
    g.add((OBO.BFO_0000030, RDFS.label, Literal("object aggregate", lang="en")))
    g.add((OBO.BFO_0000040, RDF.type, OWL.Class))
    g.add((OBO.BFO_0000040, RDFS.label, Literal("material entity", lang="en")))
    g.add((OBO.BFO_0000050, RDF.type, OWL.ObjectProperty))
    g.add((OBO.BFO_0000050, RDFS.label, Literal("part of", lang="en")))
    return g


@pytest.fixture
def core_store(core_graph):
    return TripleStore(core_graph)


@pytest.fixture
def qualifier():
    """Qualifier over the default prefix table."""
    return NameQualifier(ExpanderConfig().prefixes)


# ============================================================================
# File Fixtures
# ============================================================================

@pytest.fixture
def core_rdf_file(tmp_path, core_graph):
    """core_graph serialized as RDF/XML."""
    path = tmp_path / "core.rdf"
    core_graph.serialize(destination=str(path), format="xml")
    return path


@pytest.fixture
def bfo_rdf_file(tmp_path, bfo_graph):
    """bfo_graph serialized as RDF/XML."""
    path = tmp_path / "bfo.owl"
    bfo_graph.serialize(destination=str(path), format="xml")
    return path
