"""Term extraction: typed subjects with qualified names and English labels."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rdflib import OWL, RDF, RDFS, URIRef

from .labels import label_sort_key, resolve_english_label
from .qualifier import NameQualifier, named_node
from .store import TripleStore

logger = logging.getLogger(__name__)


class SubjectKind(Enum):
    """Kinds of ontology subjects that receive triggers."""

    CLASS = (str(OWL.Class), "Class")
    OBJECT_PROPERTY = (str(OWL.ObjectProperty), "ObjectProperty")

    def __init__(self, type_iri: str, display_name: str):
        self.type_iri = type_iri
        self.display_name = display_name


# Extraction order of the pipeline
EXTRACTION_ORDER = (SubjectKind.CLASS, SubjectKind.OBJECT_PROPERTY)


@dataclass(frozen=True)
class OntologyTerm:
    """One named ontology subject.

    Attributes:
        qualified_name: ``prefix:local`` rendering of the subject IRI
        english_label: English rdfs:label text, if any
        iri: Full subject IRI
    """

    qualified_name: str
    english_label: Optional[str] = None
    iri: str = ""

    def __post_init__(self):
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")

    @property
    def local_name(self) -> str:
        """Part of the qualified name after the prefix separator."""
        _, sep, local = self.qualified_name.partition(":")
        return local if sep else self.qualified_name


def extract_terms(
    store: TripleStore,
    qualifier: NameQualifier,
    kind: SubjectKind,
    label_predicate: str = str(RDFS.label),
) -> list[OntologyTerm]:
    """Extract every named subject of the given kind.

    Blank-node subjects are skipped. Subjects are processed in IRI order so
    the result does not depend on the store's enumeration order.

    Args:
        store: Triple store to read
        qualifier: Prefix table used to shorten subject IRIs
        kind: Which ``rdf:type`` object to select
        label_predicate: Predicate holding labels (default rdfs:label)

    Returns:
        Terms sorted by subject IRI

    Raises:
        ExtractionError: MalformedIri, StoreQueryError (no partial results)
    """
    type_predicate = named_node(str(RDF.type))
    type_object = named_node(kind.type_iri)
    label_pred = named_node(label_predicate)

    subjects = store.subjects_with(type_predicate, type_object)
    named = sorted((s for s in subjects if isinstance(s, URIRef)), key=str)
    skipped = len(subjects) - len(named)
    if skipped:
        logger.debug("Skipped %d unnamed %s subjects", skipped, kind.display_name)

    terms = []
    for subject in named:
        labels = sorted(store.objects_of(subject, label_pred), key=label_sort_key)
        terms.append(OntologyTerm(
            qualified_name=qualifier.qualify(subject),
            english_label=resolve_english_label(labels),
            iri=str(subject),
        ))

    logger.info("Extracted %d %s terms", len(terms), kind.display_name)
    return terms
