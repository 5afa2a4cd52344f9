"""A directed, weighted graph stored as an adjacency matrix."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

from cityroutes.errors import Overflow

V = TypeVar("V", bound=Hashable)

NULL_EDGE = 0
"""Weight stored where no edge exists; a zero-weight edge is no edge."""

MAX_VERTICES = 50
"""The largest number of vertices a graph can be built to hold."""


class Graph(Generic[V]):
    """Directed graph with integer edge weights and a mark per vertex."""

    def __init__(self, max_vertices: int = MAX_VERTICES) -> None:
        if not 0 <= max_vertices <= MAX_VERTICES:
            raise ValueError(f"max_vertices must be between 0 and {MAX_VERTICES}")
        self._max_vertices = max_vertices
        self._vertices: list[V] = []
        self._edges: list[list[int]] = []
        self._marks: list[bool] = []

    @property
    def max_vertices(self) -> int:
        return self._max_vertices

    @property
    def vertices(self) -> list[V]:
        """The vertices in the order they were added."""
        return list(self._vertices)

    def is_empty(self) -> bool:
        return not self._vertices

    def is_full(self) -> bool:
        return len(self._vertices) == self._max_vertices

    def make_empty(self) -> None:
        """Remove every vertex and edge."""
        self._vertices.clear()
        self._edges.clear()
        self._marks.clear()

    def add_vertex(self, vertex: V) -> None:
        """Add ``vertex`` with no edges; raise Overflow if the graph is full."""
        if self.is_full():
            raise Overflow("graph is full")
        for row in self._edges:
            row.append(NULL_EDGE)
        self._vertices.append(vertex)
        self._edges.append([NULL_EDGE] * len(self._vertices))
        self._marks.append(False)

    def _index_of(self, vertex: V) -> int:
        try:
            return self._vertices.index(vertex)
        except ValueError:
            raise KeyError(vertex) from None

    def add_edge(self, from_vertex: V, to_vertex: V, weight: int) -> None:
        """Store the edge from ``from_vertex`` to ``to_vertex`` with ``weight``."""
        self._edges[self._index_of(from_vertex)][self._index_of(to_vertex)] = weight

    def weight_is(self, from_vertex: V, to_vertex: V) -> int:
        """Return the weight of the edge, or NULL_EDGE if there is none."""
        return self._edges[self._index_of(from_vertex)][self._index_of(to_vertex)]

    def get_to_vertices(self, vertex: V) -> list[V]:
        """Return the vertices ``vertex`` has an edge to, in insertion order."""
        row = self._edges[self._index_of(vertex)]
        return [
            target
            for target, weight in zip(self._vertices, row)
            if weight != NULL_EDGE
        ]

    def clear_marks(self) -> None:
        self._marks = [False] * len(self._vertices)

    def mark_vertex(self, vertex: V) -> None:
        """Mark ``vertex``; an unknown vertex is ignored."""
        if vertex in self._vertices:
            self._marks[self._vertices.index(vertex)] = True

    def is_marked(self, vertex: V) -> bool:
        """Return whether ``vertex`` is marked; False for an unknown vertex."""
        if vertex in self._vertices:
            return self._marks[self._vertices.index(vertex)]
        return False

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices

    def __repr__(self) -> str:
        return f"Graph({self._vertices!r}, max_vertices={self._max_vertices})"