"""An undirected graph stored as an adjacency list."""

from __future__ import annotations

from collections.abc import Hashable


class Graph:
    """Undirected graph mapping each vertex to the set of its neighbours."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, set[Hashable]] = {}

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph({self._adjacency!r})"

    def neighbours(self, vertex: Hashable) -> frozenset[Hashable]:
        """Return the neighbours of ``vertex``; raise KeyError if it is absent."""
        return frozenset(self._adjacency[vertex])

    def add_vertex(self, vertex: Hashable) -> bool:
        """Add ``vertex``; return False if it was already present."""
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = set()
        return True

    def add_edge(self, vertex1: Hashable, vertex2: Hashable) -> bool:
        """Connect two existing vertices; return False if either is missing."""
        if vertex1 not in self._adjacency or vertex2 not in self._adjacency:
            return False
        self._adjacency[vertex1].add(vertex2)
        self._adjacency[vertex2].add(vertex1)
        return True

    def remove_edge(self, vertex1: Hashable, vertex2: Hashable) -> bool:
        """Disconnect two existing vertices; return False if either is missing."""
        if vertex1 not in self._adjacency or vertex2 not in self._adjacency:
            return False
        self._adjacency[vertex1].discard(vertex2)
        self._adjacency[vertex2].discard(vertex1)
        return True

    def remove_vertex(self, vertex: Hashable) -> bool:
        """Remove ``vertex`` and all its edges; return False if it is missing."""
        if vertex not in self._adjacency:
            return False
        for other in self._adjacency.pop(vertex):
            if other in self._adjacency:
                self._adjacency[other].discard(vertex)
        return True

    def format_graph(self) -> str:
        """Return one line per vertex listing its neighbours in sorted order."""
        lines = []
        for vertex, edges in self._adjacency.items():
            listed = "".join(f"{edge} " for edge in sorted(edges, key=str))
            lines.append(f"{vertex}: [ {listed}]")
        return "\n".join(lines)