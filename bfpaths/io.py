"""Graph input/output helpers.

The input format is a whitespace-delimited adjacency list::

    <num_vertices>
    <label> <num_edges> <dest> <weight> <dest> <weight> ...
    ...

with exactly ``num_vertices`` vertex records. The label of the first record
becomes vertex 0, the source.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List, Set, Tuple

from .exceptions import GraphFormatError, InputError
from .graph import Graph, Vertex, Weight, build
from .logger import Logger, NoopLogger
from .solver import INF, SSSPResult
from .symbols import SymbolTable

INF_TOKEN = "INF"

_INT_RE = re.compile(r"-?[0-9]+")


class _Tokens:
    """Sequential reader over whitespace-separated tokens."""

    def __init__(self, text: str) -> None:
        self._items = text.split()
        self._pos = 0

    def next(self, what: str) -> str:
        if self._pos >= len(self._items):
            raise GraphFormatError(f"unexpected end of input while reading {what}")
        tok = self._items[self._pos]
        self._pos += 1
        return tok

    def next_int(self, what: str) -> int:
        tok = self.next(what)
        if not _INT_RE.fullmatch(tok):
            raise GraphFormatError(f"expected integer {what}, got {tok!r}")
        return int(tok)

    def remaining(self) -> int:
        return len(self._items) - self._pos


def parse_graph(text: str, logger: Logger | None = None) -> Tuple[Graph, SymbolTable]:
    """Parse adjacency-list text into a graph and its symbol table.

    Args:
        text: Input in the adjacency-list format.
        logger: Optional event logger; trailing tokens are reported as a
            warning.

    Returns:
        A ``(graph, symbols)`` pair. Labels are interned in first-seen order.

    Raises:
        GraphFormatError: If the vertex count is not a positive integer, a
            record is truncated or malformed, a label has two records, or a
            destination label has no record of its own.
    """
    log = logger or NoopLogger()
    toks = _Tokens(text)
    n = toks.next_int("vertex count")
    if n <= 0:
        raise GraphFormatError(f"vertex count must be positive, got {n}")

    symbols = SymbolTable(capacity=n)
    edge_lists: List[List[Tuple[Vertex, Weight]]] = [[] for _ in range(n)]
    declared: Set[str] = set()
    for _ in range(n):
        label = toks.next("vertex label")
        if label in declared:
            raise GraphFormatError(f"vertex {label!r} has more than one record")
        declared.add(label)
        num_edges = toks.next_int(f"edge count of {label!r}")
        if num_edges < 0:
            raise GraphFormatError(f"negative edge count {num_edges} for {label!r}")
        u = symbols.intern(label)
        for _ in range(num_edges):
            dest = toks.next(f"edge destination of {label!r}")
            w = toks.next_int(f"edge weight {label!r}->{dest!r}")
            edge_lists[u].append((symbols.intern(dest), w))

    if toks.remaining():
        log.warning("trailing_tokens", count=toks.remaining())

    G = build(n, edge_lists)
    log.debug("parsed", n=n, m=G.edge_count())
    return G, symbols


def read_graph(path: str, logger: Logger | None = None) -> Tuple[Graph, SymbolTable]:
    """Read a graph file in the adjacency-list format.

    Raises:
        InputError: If the file cannot be opened.
        GraphFormatError: If its contents are malformed.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputError(f"cannot open graph file: {path}") from exc
    return parse_graph(text, logger=logger)


def write_graph(G: Graph, symbols: SymbolTable, path: str) -> None:
    """Write ``G`` back out in the adjacency-list format, one record per line."""
    with Path(path).open("w", encoding="utf-8") as fh:
        fh.write(f"{G.n}\n")
        for u in range(G.n):
            parts = [symbols.resolve(u), str(G.out_degree(u))]
            for v, w in G.adj[u]:
                parts.append(symbols.resolve(v))
                parts.append(str(w))
            fh.write(" ".join(parts) + "\n")


def format_distances(result: SSSPResult, symbols: SymbolTable) -> Iterator[str]:
    """Yield ``label:distance`` lines in vertex id order."""
    for vid, d in enumerate(result.distances):
        shown = INF_TOKEN if d == INF else str(d)
        yield f"{symbols.resolve(vid)}:{shown}"


def format_paths(result: SSSPResult, symbols: SymbolTable) -> Iterator[str]:
    """Yield ``label:a,b,c`` lines for every vertex with a path entry.

    The source yields ``label:`` with an empty list.
    """
    for vid, prefix in enumerate(result.paths):
        if prefix is None:
            continue
        hops = ",".join(symbols.resolve(p) for p in prefix)
        yield f"{symbols.resolve(vid)}:{hops}"


def _write_lines(path: str, lines: Iterator[str]) -> None:
    with Path(path).open("w", encoding="utf-8") as fh:
        for line in lines:
            fh.write(line + "\n")


def write_distances(path: str, result: SSSPResult, symbols: SymbolTable) -> None:
    """Write the distance table, unreachable vertices as ``INF``."""
    _write_lines(path, format_distances(result, symbols))


def write_paths(path: str, result: SSSPResult, symbols: SymbolTable) -> None:
    """Write the path table, one line per vertex with an entry."""
    _write_lines(path, format_paths(result, symbols))


def format_adjacency(G: Graph, symbols: SymbolTable) -> str:
    """Return a human readable dump of the adjacency lists.

    Each vertex becomes one line of the form ``A->B:4,C:1,``.
    """
    lines: List[str] = []
    for u in range(G.n):
        out = "".join(f"{symbols.resolve(v)}:{w}," for v, w in G.adj[u])
        lines.append(f"{symbols.resolve(u)}->{out}")
    return "\n".join(lines)


__all__ = [
    "INF_TOKEN",
    "format_adjacency",
    "format_distances",
    "format_paths",
    "parse_graph",
    "read_graph",
    "write_distances",
    "write_graph",
    "write_paths",
]
