"""A directed graph stored as a map from each node to its successors."""

from __future__ import annotations


class Graph:
    """A directed graph of string-labelled nodes."""

    def __init__(self) -> None:
        self._edges: dict[str, set[str]] = {}

    def add_edge(self, from_: str, to: str) -> None:
        """Add an edge from ``from_`` to ``to``."""
        self._edges.setdefault(from_, set()).add(to)

    def has_edge(self, from_: str, to: str) -> bool:
        """Report whether there is an edge from ``from_`` to ``to``."""
        return to in self._edges.get(from_, ())