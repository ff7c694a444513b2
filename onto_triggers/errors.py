"""Exception taxonomy for the trigger pipeline.

Every error names the pipeline stage it belongs to so the CLI can report
where a run failed.
"""

from __future__ import annotations


class OntoTriggersError(Exception):
    """Base class for all pipeline failures."""

    stage = "pipeline"


class ConfigError(OntoTriggersError):
    """Invalid configuration or command-line arguments."""

    stage = "argument parsing"


class GraphLoadError(OntoTriggersError):
    """The ontology document could not be read or parsed."""

    stage = "graph load"


class ExtractionError(OntoTriggersError):
    """Term extraction failed; no partial results are returned."""

    stage = "extraction"


class MalformedIri(ExtractionError):
    """A well-known or configured IRI is not an absolute IRI."""


class PrefixTableError(ExtractionError):
    """The namespace prefix table has an invalid entry."""


class StoreQueryError(ExtractionError):
    """A lookup against the triple store raised."""


class SynthesisError(OntoTriggersError):
    """Trigger synthesis failed for a term; the whole batch is aborted."""

    stage = "synthesis"


class MissingLabel(SynthesisError):
    """A term required by the numeric strategy has no English label."""

    def __init__(self, qualified_name: str):
        self.qualified_name = qualified_name
        super().__init__(f"{qualified_name} has no English rdfs:label")


class MalformedLocalName(SynthesisError):
    """A local name does not have the ``<LETTERS>_<DIGITS>`` shape."""

    def __init__(self, qualified_name: str):
        self.qualified_name = qualified_name
        super().__init__(
            f"{qualified_name}: local name does not match <LETTERS>_<DIGITS>"
        )


class ReportWriteError(OntoTriggersError):
    """The output file could not be written."""

    stage = "write"
