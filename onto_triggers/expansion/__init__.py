"""Trigger synthesis and match record collections."""

from .records import MatchRecord, MatchCollection
from .strategies import (
    TriggerStrategy,
    LabelStrategy,
    NumericStrategy,
    get_strategy,
    synthesize,
    hyphenate,
    shortname,
    numeric_suffix,
)

__all__ = [
    "MatchRecord",
    "MatchCollection",
    "TriggerStrategy",
    "LabelStrategy",
    "NumericStrategy",
    "get_strategy",
    "synthesize",
    "hyphenate",
    "shortname",
    "numeric_suffix",
]
