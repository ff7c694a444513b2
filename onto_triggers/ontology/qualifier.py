"""Qualification of full IRIs to ``prefix:local`` names."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlparse

from rdflib import Graph, URIRef
from rdflib.namespace import NamespaceManager, is_ncname

from ..errors import MalformedIri, PrefixTableError


def named_node(iri: str) -> URIRef:
    """Build a URIRef for a well-known or configured IRI.

    Raises:
        MalformedIri: If ``iri`` is not an absolute IRI
    """
    text = str(iri)
    parsed = urlparse(text)
    if not parsed.scheme or any(c in text for c in ' <>"{}|\\^`'):
        raise MalformedIri(f"Not an absolute IRI: {text!r}")
    return URIRef(text)


class NameQualifier:
    """Maps full IRIs to short names using a fixed prefix table.

    The table is bound into an rdflib NamespaceManager that starts with no
    bindings, so only configured prefixes are ever used. IRIs outside every
    namespace are rendered as ``<iri>``.

    Example:
        qualifier = NameQualifier({"bfo": "http://purl.obolibrary.org/obo/"})
        qualifier.qualify("http://purl.obolibrary.org/obo/BFO_0000030")
        # 'bfo:BFO_0000030'
    """

    def __init__(self, prefixes: Mapping[str, str]):
        self.prefixes = self._validate(prefixes)
        self.namespace_manager = NamespaceManager(
            Graph(bind_namespaces="none"), bind_namespaces="none"
        )
        for prefix, namespace in self.prefixes.items():
            try:
                self.namespace_manager.bind(prefix, URIRef(namespace), override=True, replace=True)
            except ValueError as e:
                raise PrefixTableError(f"Could not bind {prefix!r} to {namespace}: {e}") from e
        self._namespaces = set(self.prefixes.values())

    @staticmethod
    def _validate(prefixes: Mapping[str, str]) -> dict[str, str]:
        if not prefixes:
            raise PrefixTableError("Prefix table is empty")

        table: dict[str, str] = {}
        seen_namespaces: dict[str, str] = {}
        for prefix, namespace in prefixes.items():
            if not isinstance(prefix, str) or not is_ncname(prefix):
                raise PrefixTableError(f"Invalid prefix: {prefix!r}")
            try:
                named_node(namespace)
            except MalformedIri as e:
                raise PrefixTableError(f"Invalid namespace for prefix {prefix!r}: {e}") from e
            namespace = str(namespace)
            if namespace in seen_namespaces:
                raise PrefixTableError(
                    f"Namespace {namespace} bound to both "
                    f"{seen_namespaces[namespace]!r} and {prefix!r}"
                )
            seen_namespaces[namespace] = prefix
            table[prefix] = namespace
        return table

    def qualify(self, iri: str) -> str:
        """Return ``prefix:local`` for ``iri``, or ``<iri>`` if no prefix matches."""
        text = str(iri)
        if text in self._namespaces:
            return f"<{text}>"
        try:
            curie = self.namespace_manager.curie(text, generate=False)
        except (KeyError, ValueError):
            return f"<{text}>"
        _, _, local = curie.partition(":")
        return curie if local else f"<{text}>"
