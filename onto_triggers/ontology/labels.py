"""English label resolution for ontology subjects."""

from __future__ import annotations

from typing import Iterable, Optional

from rdflib import Literal
from rdflib.term import Node


def resolve_english_label(labels: Iterable[Node]) -> Optional[str]:
    """Return the lexical value of the first ``@en`` literal in ``labels``.

    Values are scanned in the order given. Scanning stops at the first
    value that is not a literal, in which case no label is returned even
    if an English literal follows it.

    Args:
        labels: rdfs:label values attached to one subject

    Returns:
        Label text without language tag, or None
    """
    for value in labels:
        if not isinstance(value, Literal):
            return None
        if value.language == "en":
            return str(value)
    return None


def label_sort_key(value: Node) -> tuple[str, str]:
    """Stable ordering for label values: lexical value, then language tag."""
    return str(value), getattr(value, "language", None) or ""
