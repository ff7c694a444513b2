"""Trigger synthesis strategies.

Two strategies exist and are not meant to be mixed in one run:

- ``LabelStrategy`` (default): one record per term, keyed on the hyphenated
  English label, falling back to the qualified name when no label exists.
- ``NumericStrategy``: four records per term for BFO-style numeric IDs,
  keyed on the numeric suffix and on the label's initials. Terms without an
  English label or with a non-numeric local name abort the run.
"""

from __future__ import annotations

import re
from typing import Protocol, Sequence, runtime_checkable

from ..config import ExpanderConfig
from ..errors import ConfigError, MalformedLocalName, MissingLabel
from ..ontology.extractor import OntologyTerm, SubjectKind
from .records import MatchRecord

_NUMERIC_LOCAL_RE = re.compile(r"[A-Za-z]+_([0-9]+)")


def hyphenate(label: str) -> str:
    """Replace whitespace runs in ``label`` with single hyphens."""
    return "-".join(label.split())


def shortname(label: str) -> str:
    """First character of each whitespace-separated word, case preserved."""
    return "".join(word[0] for word in label.split())


def has_label(term: OntologyTerm) -> bool:
    """True if the term carries an English label with visible text."""
    return bool(term.english_label and term.english_label.strip())


def numeric_suffix(local_name: str) -> str:
    """Digits of a ``<LETTERS>_<DIGITS>`` local name without leading zeros.

    Raises:
        ValueError: If ``local_name`` does not have that shape
    """
    match = _NUMERIC_LOCAL_RE.fullmatch(local_name)
    if match is None:
        raise ValueError(f"Not a numeric local name: {local_name!r}")
    return str(int(match.group(1)))


@runtime_checkable
class TriggerStrategy(Protocol):
    """Protocol for trigger synthesis strategies."""

    name: str

    def records_for(self, term: OntologyTerm, kind: SubjectKind) -> list[MatchRecord]:
        """Match records for one term.

        Raises:
            SynthesisError: If the term cannot be expanded by this strategy
        """
        ...


class LabelStrategy:
    """One record per term: label trigger when available, else qualified name."""

    name = "label"

    def __init__(self, marker: str = ":", prefer_labels: bool = True):
        self.marker = marker
        self.prefer_labels = prefer_labels

    def records_for(self, term: OntologyTerm, kind: SubjectKind) -> list[MatchRecord]:
        qname = term.qualified_name
        if self.prefer_labels and has_label(term):
            label = term.english_label
            return [MatchRecord(
                trigger=f"{self.marker}{hyphenate(label)}",
                replace=f"{label} ({qname})",
                label=f"{label} ({kind.display_name})",
                rule="label",
            )]
        return [MatchRecord(
            trigger=f"{self.marker}{qname}",
            replace=qname,
            label=f"{qname} ({kind.display_name})",
            rule="qname",
        )]


class NumericStrategy:
    """Numeric-ID and shortname triggers for BFO-style vocabularies."""

    name = "numeric"

    def __init__(self, vocab_prefix: str = "bfo", marker: str = ":"):
        self.vocab_prefix = vocab_prefix
        self.marker = marker

    def records_for(self, term: OntologyTerm, kind: SubjectKind) -> list[MatchRecord]:
        if not has_label(term):
            raise MissingLabel(term.qualified_name)
        try:
            number = numeric_suffix(term.local_name)
        except ValueError:
            raise MalformedLocalName(term.qualified_name) from None

        qname = term.qualified_name
        prefixed_label = f"{self.vocab_prefix}:{hyphenate(term.english_label)}"
        annotation = f"{prefixed_label} ({kind.display_name}; {qname})"
        numeric_trigger = f"{self.marker}{self.vocab_prefix}-{number}"
        short_trigger = f"{self.marker}{self.vocab_prefix}-{shortname(term.english_label)}"

        return [
            MatchRecord(numeric_trigger, qname, annotation, "numeric-iri"),
            MatchRecord(numeric_trigger, prefixed_label, annotation, "numeric-label"),
            MatchRecord(short_trigger, qname, annotation, "short-iri"),
            MatchRecord(short_trigger, prefixed_label, annotation, "short-label"),
        ]


def get_strategy(config: ExpanderConfig) -> TriggerStrategy:
    """Build the strategy selected by ``config.strategy``.

    Raises:
        ConfigError: If the strategy name is unknown
    """
    if config.strategy == "label":
        return LabelStrategy(marker=config.marker, prefer_labels=config.prefer_labels)
    if config.strategy == "numeric":
        return NumericStrategy(vocab_prefix=config.vocab_prefix, marker=config.marker)
    raise ConfigError(f"Unknown strategy: {config.strategy!r}")


def synthesize(
    terms: Sequence[OntologyTerm],
    kind: SubjectKind,
    strategy: TriggerStrategy,
) -> list[MatchRecord]:
    """Expand a batch of terms of one kind, preserving term order.

    Raises:
        SynthesisError: On the first term the strategy rejects; no records
            are returned for the batch
    """
    records: list[MatchRecord] = []
    for term in terms:
        records.extend(strategy.records_for(term, kind))
    return records
