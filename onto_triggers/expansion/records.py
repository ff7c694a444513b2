"""Match records and the ordered collection serialized to packages.yml."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchRecord:
    """A single text-expansion entry.

    Attributes:
        trigger: Abbreviation key, starting with the marker character
        replace: Text inserted when the trigger matches
        label: Human-readable description of the term and its kind
        rule: Name of the synthesis rule that produced the record
    """

    trigger: str
    replace: str
    label: str
    rule: str

    def to_dict(self, include_label: bool = True) -> dict:
        """Serializable form: ``{trigger, replace[, label]}``."""
        data = {'trigger': self.trigger, 'replace': self.replace}
        if include_label:
            data['label'] = self.label
        return data


class MatchCollection:
    """Ordered, deduplicated sequence of MatchRecords.

    Records keep insertion order. A record repeating an existing
    (trigger, replace) pair is dropped. Within one rule a trigger maps to a
    single replacement: a later record from the same rule that reuses a
    trigger for a different replacement is dropped with a warning. The same
    trigger produced by different rules is kept.
    """

    def __init__(self, records: Iterable[MatchRecord] = ()):
        self._records: list[MatchRecord] = []
        self._pairs: set[tuple[str, str]] = set()
        self._by_rule: dict[tuple[str, str], MatchRecord] = {}
        self.dropped: list[MatchRecord] = []
        self.extend(records)

    def add(self, record: MatchRecord) -> bool:
        """Append ``record`` unless it violates the collection invariants.

        Returns:
            True if the record was kept
        """
        pair = (record.trigger, record.replace)
        if pair in self._pairs:
            logger.debug("Dropping duplicate match %s -> %s", record.trigger, record.replace)
            self.dropped.append(record)
            return False

        key = (record.rule, record.trigger)
        existing = self._by_rule.get(key)
        if existing is not None:
            logger.warning(
                "Trigger %s (rule %s) already expands to %r; dropping %r",
                record.trigger, record.rule, existing.replace, record.replace,
            )
            self.dropped.append(record)
            return False

        self._pairs.add(pair)
        self._by_rule[key] = record
        self._records.append(record)
        return True

    def extend(self, records: Iterable[MatchRecord]) -> None:
        for record in records:
            self.add(record)

    def __iter__(self) -> Iterator[MatchRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> MatchRecord:
        return self._records[index]

    def triggers(self) -> list[str]:
        return [r.trigger for r in self._records]

    def to_dict(self, include_labels: bool = True) -> dict:
        """Root document: ``{'matches': [...]}``."""
        return {'matches': [r.to_dict(include_label=include_labels) for r in self._records]}
