"""Read-only triple store adapter over an rdflib Graph."""

from __future__ import annotations

import logging
from pathlib import Path

from rdflib import Graph, OWL
from rdflib.term import Node
from rdflib.util import guess_format

from ..errors import GraphLoadError, StoreQueryError

logger = logging.getLogger(__name__)


class TripleStore:
    """Lookup operations used by term extraction.

    The graph is loaded once and only read afterwards.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    def __len__(self) -> int:
        return len(self.graph)

    def subjects_with(self, predicate: Node, obj: Node) -> set[Node]:
        """Subjects ``s`` such that ``(s, predicate, obj)`` is in the graph.

        Raises:
            StoreQueryError: If the underlying lookup fails
        """
        try:
            return set(self.graph.subjects(predicate, obj))
        except Exception as e:
            raise StoreQueryError(f"Lookup of subjects for ({predicate}, {obj}) failed: {e}") from e

    def objects_of(self, subject: Node, predicate: Node) -> set[Node]:
        """Objects ``o`` such that ``(subject, predicate, o)`` is in the graph.

        Raises:
            StoreQueryError: If the underlying lookup fails
        """
        try:
            return set(self.graph.objects(subject, predicate))
        except Exception as e:
            raise StoreQueryError(f"Lookup of objects for ({subject}, {predicate}) failed: {e}") from e

    def imports(self) -> list[str]:
        """IRIs named by ``owl:imports`` anywhere in the graph, sorted."""
        return sorted(str(o) for o in self.objects_of(None, OWL.imports))


def load_store(path: Path | str, rdf_format: str = "xml", lax: bool = True) -> TripleStore:
    """Parse an ontology document into a TripleStore.

    In lax mode a failed parse is retried once with the format guessed from
    the file suffix, so slightly mislabelled documents still load.

    Args:
        path: Ontology document
        rdf_format: rdflib parser name (default RDF/XML)
        lax: Retry with a guessed format when the first parse fails

    Returns:
        TripleStore over the parsed graph

    Raises:
        GraphLoadError: If the file is missing or cannot be parsed
    """
    path = Path(path)
    if not path.is_file():
        raise GraphLoadError(f"Ontology file not found: {path}")

    graph = Graph()
    try:
        graph.parse(path, format=rdf_format)
    except Exception as first_error:
        fallback = guess_format(str(path))
        if not lax or fallback is None or fallback == rdf_format:
            raise GraphLoadError(f"Could not parse {path} as {rdf_format}: {first_error}") from first_error

        logger.warning("Parsing %s as %s failed (%s); retrying as %s", path, rdf_format, first_error, fallback)
        graph = Graph()
        try:
            graph.parse(path, format=fallback)
        except Exception as e:
            raise GraphLoadError(f"Could not parse {path} as {rdf_format} or {fallback}: {e}") from e

    logger.info("Loaded %d triples from %s", len(graph), path)
    return TripleStore(graph)
