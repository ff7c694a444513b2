"""Ontology reading: graph loading, labels, name qualification, term extraction."""

from .labels import resolve_english_label
from .qualifier import NameQualifier, named_node
from .store import TripleStore, load_store
from .extractor import (
    EXTRACTION_ORDER,
    OntologyTerm,
    SubjectKind,
    extract_terms,
)

__all__ = [
    'resolve_english_label',
    'NameQualifier',
    'named_node',
    'TripleStore',
    'load_store',
    'EXTRACTION_ORDER',
    'OntologyTerm',
    'SubjectKind',
    'extract_terms',
]
