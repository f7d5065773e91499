"""Utilities for working with the solver's path table."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .graph import Graph, Vertex
from .symbols import SymbolTable


def full_path(paths: Sequence[Optional[List[Vertex]]], target: Vertex) -> List[Vertex]:
    """Return the path from the source to ``target`` (inclusive).

    Args:
        paths: Path table as produced by the solver; ``paths[v]`` holds the
            vertices leading up to ``v`` or ``None`` if ``v`` was never reached.
        target: Vertex identifier.

    Returns:
        Vertices from source to target. Returns an empty list if ``target`` has
        no path entry.
    """
    prefix = paths[target]
    if prefix is None:
        return []
    return list(prefix) + [target]


def path_weight(G: Graph, prefix: Sequence[Vertex], target: Vertex) -> Optional[int]:
    """Return the total weight of ``prefix`` followed by the hop into ``target``.

    For parallel edges the cheapest one is used for each hop.

    Args:
        G: Graph the path lives in.
        prefix: Vertices leading up to ``target`` (source first).
        target: Final vertex.

    Returns:
        Summed weight, ``0`` for an empty prefix, or ``None`` if some hop has
        no edge in ``G``.
    """
    hops = list(prefix) + [target]
    total = 0
    for u, v in zip(hops, hops[1:]):
        weights = [w for vv, w in G.adj[u] if vv == v]
        if not weights:
            return None
        total += min(weights)
    return total


def render_path(symbols: SymbolTable, ids: Sequence[Vertex]) -> List[str]:
    """Map vertex ids to their labels."""
    return [symbols.resolve(v) for v in ids]


__all__ = ["full_path", "path_weight", "render_path"]
