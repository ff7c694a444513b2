"""Pipeline driver: load -> extract -> synthesize -> report.

Each run is fail-fast: any extraction or synthesis error propagates before
the report is written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import ExpanderConfig
from .expansion import MatchCollection, get_strategy, synthesize
from .ontology import (
    EXTRACTION_ORDER,
    NameQualifier,
    TripleStore,
    extract_terms,
    load_store,
)
from .report import write_matches

logger = logging.getLogger(__name__)


def build_matches(store: TripleStore, config: Optional[ExpanderConfig] = None) -> MatchCollection:
    """Build the match collection for an already loaded store.

    Classes are expanded before object properties.

    Raises:
        ExtractionError: PrefixTableError, MalformedIri, StoreQueryError
        SynthesisError: MissingLabel, MalformedLocalName (numeric strategy)
    """
    config = config if config is not None else ExpanderConfig()
    qualifier = NameQualifier(config.prefixes)
    strategy = get_strategy(config)

    collection = MatchCollection()
    for kind in EXTRACTION_ORDER:
        terms = extract_terms(store, qualifier, kind)
        records = synthesize(terms, kind, strategy)
        collection.extend(records)
        logger.info("%s: %d terms -> %d records", kind.display_name, len(terms), len(records))

    if collection.dropped:
        logger.info("Dropped %d duplicate records", len(collection.dropped))
    logger.debug("Triggers: %s", ", ".join(collection.triggers()))
    return collection


def run_pipeline(path: Path | str, config: Optional[ExpanderConfig] = None) -> MatchCollection:
    """Load the ontology at ``path`` and build its match collection.

    Raises:
        GraphLoadError: If the document cannot be parsed
        ExtractionError, SynthesisError: See ``build_matches``
    """
    config = config if config is not None else ExpanderConfig()
    store = load_store(path, rdf_format=config.rdf_format, lax=config.lax)

    imports = store.imports()
    if imports:
        logger.info("Imports: %s", ", ".join(imports))

    return build_matches(store, config)


def write_pipeline(path: Path | str, config: Optional[ExpanderConfig] = None) -> tuple[Path, MatchCollection]:
    """Run the pipeline and write the report to ``config.output``.

    Returns:
        Tuple of (output_path, collection)
    """
    config = config if config is not None else ExpanderConfig()
    collection = run_pipeline(path, config)
    out = write_matches(collection, config.output, include_labels=config.include_labels)
    return out, collection
