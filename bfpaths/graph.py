"""Adjacency-list graph over dense integer vertex ids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from .exceptions import GraphFormatError, InputError

Vertex = int
Weight = int
Edge = Tuple[Vertex, Vertex, Weight]

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


@dataclass
class Graph:
    """Directed graph with signed integer edge weights.

    Negative weights are allowed. Self-loops and parallel edges are stored as
    independent entries and are never deduplicated.

    Attributes:
        n: Number of vertices in the range ``0`` .. ``n-1``.
        adj: Outgoing adjacency lists of ``(v, w)`` pairs in insertion order.
    """

    n: int

    def __post_init__(self) -> None:
        """Validate vertex count and pre-size the adjacency lists."""
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n <= 0:
            raise InputError("Graph.n must be a positive integer.")
        self.adj: List[List[Tuple[Vertex, Weight]]] = [[] for _ in range(self.n)]

    def add_edge(self, u: Vertex, v: Vertex, w: Weight) -> None:
        """Append a directed edge from ``u`` to ``v``.

        Args:
            u: Tail vertex.
            v: Head vertex.
            w: Signed edge weight within the int64 range.

        Raises:
            InputError: If ``u`` or ``v`` are out of range.
            GraphFormatError: If ``w`` is not an integer or overflows int64.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(0, 1, -3)
            >>> g.adj
            [[(1, -3)], []]
            ```
        """
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise InputError("u and v must be vertex ids in [0, n).")
        if isinstance(w, bool) or not isinstance(w, (int, np.integer)):
            raise GraphFormatError(f"non-integer weight {w!r} on edge ({u}, {v})")
        w = int(w)
        if not (INT64_MIN <= w <= INT64_MAX):
            raise GraphFormatError(f"weight {w} on edge ({u}, {v}) overflows int64")
        self.adj[u].append((int(v), w))

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge]) -> "Graph":
        """Create a graph from an iterable of ``(u, v, w)`` edges."""
        g = cls(n)
        for u, v, w in edges:
            g.add_edge(int(u), int(v), w)
        return g

    def out_degree(self, u: Vertex) -> int:
        """Return the out-degree of vertex ``u``."""
        return len(self.adj[u])

    def edge_count(self) -> int:
        """Return the total number of stored edges."""
        return sum(len(lst) for lst in self.adj)

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges in vertex id order, then insertion order."""
        for u in range(self.n):
            for v, w in self.adj[u]:
                yield u, v, w


def build(
    vertex_count: int, edge_lists: Sequence[Iterable[Tuple[Vertex, Weight]]]
) -> Graph:
    """Build a graph from per-vertex out-edge sequences.

    Args:
        vertex_count: Number of vertices.
        edge_lists: ``edge_lists[u]`` holds the ordered ``(v, w)`` out-edges of
            ``u``. It may be shorter than ``vertex_count``; missing entries are
            vertices without out-edges.

    Returns:
        The populated graph.

    Raises:
        InputError: If more edge lists than vertices are supplied.
    """
    g = Graph(vertex_count)
    if len(edge_lists) > vertex_count:
        raise InputError("more edge lists than declared vertices.")
    for u, out in enumerate(edge_lists):
        for v, w in out:
            g.add_edge(u, int(v), w)
    return g


__all__ = ["Edge", "Graph", "INT64_MAX", "INT64_MIN", "Vertex", "Weight", "build"]
