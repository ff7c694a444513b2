"""Run configuration for the trigger pipeline.

A single ``ExpanderConfig`` is built at startup (from defaults, a preset,
a YAML file and CLI flags) and passed explicitly to every stage.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError

DEFAULT_PREFIXES = {
    "owl": "http://www.w3.org/2002/07/owl#",
    "bfo": "http://purl.obolibrary.org/obo/",
    "Core": "https://spec.industrialontologies.org/ontology/core/Core/",
}

STRATEGIES = ("label", "numeric")


@dataclass
class ExpanderConfig:
    """Configuration for one pipeline run."""

    # Name qualification
    prefixes: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PREFIXES))

    # Trigger synthesis
    strategy: str = "label"  # 'label' | 'numeric'
    marker: str = ":"
    vocab_prefix: str = "bfo"  # Used by the numeric strategy only
    prefer_labels: bool = True

    # Output
    include_labels: bool = True  # Emit the 'label' field of each match
    output: Path = Path("packages.yml")

    # Input parsing
    rdf_format: str = "xml"
    lax: bool = True

    def __post_init__(self):
        self._check_types()
        self.output = Path(self.output)
        self.validate()

    def _check_types(self) -> None:
        for name in ("strategy", "marker", "vocab_prefix", "rdf_format"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {type(value).__name__}")
        for name in ("prefer_labels", "include_labels", "lax"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(f"{name} must be true or false, got {value!r}")
        if not isinstance(self.output, (str, os.PathLike)):
            raise ConfigError(f"output must be a file path, got {self.output!r}")
        if not isinstance(self.prefixes, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in self.prefixes.items()
        ):
            raise ConfigError("prefixes must be a mapping of prefix -> namespace IRI")

    def validate(self) -> None:
        """Check field values that later stages rely on.

        Raises:
            ConfigError: If a value has the wrong type or is out of range
        """
        self._check_types()
        if self.strategy not in STRATEGIES:
            raise ConfigError(
                f"Unknown strategy {self.strategy!r} (expected one of {', '.join(STRATEGIES)})"
            )
        if len(self.marker) != 1 or self.marker.isspace():
            raise ConfigError(f"Trigger marker must be a single visible character, got {self.marker!r}")
        if not self.vocab_prefix:
            raise ConfigError("vocab_prefix must not be empty")

    def with_overrides(self, **overrides: Any) -> 'ExpanderConfig':
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_preset(cls, preset_name: str) -> 'ExpanderConfig':
        """Create config from preset name.

        Available presets:
        - qname: qualified-name triggers, no annotation labels
        - label: English-label triggers with annotation labels (default)
        - bfo: numeric and shortname triggers for BFO-style IDs

        Raises:
            ConfigError: If preset name not recognized
        """
        presets = {
            'qname': cls(strategy='label', prefer_labels=False, include_labels=False),
            'label': cls(strategy='label'),
            'bfo': cls(strategy='numeric', vocab_prefix='bfo'),
        }
        if preset_name not in presets:
            raise ConfigError(
                f"Unknown preset: {preset_name}. Available: {', '.join(presets.keys())}"
            )
        return presets[preset_name]

    @classmethod
    def from_yaml(cls, path: Path | str, base: Optional['ExpanderConfig'] = None) -> 'ExpanderConfig':
        """Load configuration values from a YAML mapping.

        Keys mirror the dataclass fields. A ``prefixes`` mapping replaces the
        default prefix table entirely.

        Args:
            path: YAML file to read
            base: Config to apply the file on top of (defaults to ``cls()``)

        Raises:
            ConfigError: If the file is unreadable, not a mapping, or has unknown keys
        """
        path = Path(path)
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config {path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config {path} must contain a mapping, got {type(raw).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

        base = base if base is not None else cls()
        return replace(base, **raw)
