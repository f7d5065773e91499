"""Bellman-Ford shortest paths with early termination and path tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .exceptions import AlgorithmError, ConfigError
from .graph import INT64_MAX, INT64_MIN, Graph, Vertex
from .logger import Logger, NoopLogger
from .path import full_path

Distance = int

# Never added to: vertices at INF are skipped during relaxation.
INF: Distance = INT64_MAX

SOURCE: Vertex = 0


@dataclass(frozen=True)
class SSSPResult:
    """Distances and best known paths produced by the solver.

    Attributes:
        distances: Distance from the source to each vertex, ``INF`` when
            unreachable.
        paths: For each vertex, the vertices leading up to (not including) it,
            or ``None`` if the vertex is neither the source nor ever improved.
        rounds: Number of relaxation rounds executed.
        converged: ``True`` if some round produced no improvement.
        history: Distance snapshots taken after each round, when recorded.
    """

    distances: List[Distance]
    paths: List[Optional[List[Vertex]]]
    rounds: int
    converged: bool
    history: Tuple[Tuple[Distance, ...], ...] = ()

    def is_reachable(self, v: Vertex) -> bool:
        """Return ``True`` if ``v`` has a finite distance."""
        return self.distances[v] != INF

    def has_path(self, v: Vertex) -> bool:
        """Return ``True`` if ``v`` has a path-table entry."""
        return self.paths[v] is not None


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    n: int
    m: int
    rounds: int
    converged: bool
    counters: Dict[str, int]
    wall_ms: float
    peak_mib: float | None = None


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solver.

    Attributes:
        max_rounds: Optional cap on relaxation rounds. The effective limit is
            ``min(max_rounds, n - 1)``; ``n - 1`` is never exceeded.
        early_exit: Stop as soon as a round produces no improvement.
        record_history: Keep a snapshot of the distance table after each
            round in :attr:`SSSPResult.history`.
    """

    max_rounds: Optional[int] = None
    early_exit: bool = True
    record_history: bool = False


def _saturating_add(d: Distance, w: int) -> Distance:
    """Return ``d + w``, saturated to ``INF`` at the top of the int64 range.

    A saturated sum never improves on anything, so an oversized positive
    weight simply leaves its head vertex where it was.

    Raises:
        AlgorithmError: If the sum falls below the int64 minimum.
    """
    total = d + w
    if total >= INF:
        return INF
    if total < INT64_MIN:
        raise AlgorithmError(f"distance {d} + weight {w} underflows int64")
    return total


class BellmanFordSolver:
    """Single-source shortest paths from vertex 0 with negative weights.

    Relaxation runs for at most ``n - 1`` rounds and stops early once a full
    round leaves the distance table untouched. Negative cycles are not
    detected; distances downstream of one are unspecified after the bounded
    run.
    """

    def __init__(
        self,
        G: Graph,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            G: Input graph; vertex 0 is the source.
            config: Optional solver configuration.
            logger: Optional event logger.

        Raises:
            ConfigError: If ``config.max_rounds`` is negative or not an int.
        """
        self.G = G
        self.cfg = config or SolverConfig()
        mr = self.cfg.max_rounds
        if mr is not None and (isinstance(mr, bool) or not isinstance(mr, int) or mr < 0):
            raise ConfigError("max_rounds must be a non-negative integer or None.")
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {
            "edges_relaxed": 0,
            "improvements": 0,
            "rounds": 0,
        }
        self._result: Optional[SSSPResult] = None

    def _round_limit(self) -> int:
        limit = self.G.n - 1
        if self.cfg.max_rounds is not None:
            limit = min(limit, self.cfg.max_rounds)
        return limit

    def _relax_round(
        self, dist: List[Distance], paths: List[Optional[List[Vertex]]]
    ) -> int:
        """Scan every reachable vertex once and return the improvement count."""
        improved = 0
        adj = self.G.adj
        for u in range(self.G.n):
            du = dist[u]
            if du == INF:
                continue
            for v, w in adj[u]:
                self.counters["edges_relaxed"] += 1
                nd = _saturating_add(du, w)
                if nd < dist[v]:
                    prefix = paths[u]
                    if prefix is None:
                        raise AlgorithmError(f"vertex {u} has a distance but no path entry")
                    dist[v] = nd
                    paths[v] = prefix + [u]
                    improved += 1
                    if v == u:  # negative self-loop
                        du = nd
        return improved

    def solve(self) -> SSSPResult:
        """Run Bellman-Ford from vertex 0 and return distances and paths.

        Tables and counters are reinitialized on every call, so repeated calls
        on the same graph return identical results.
        """
        n = self.G.n
        for key in self.counters:
            self.counters[key] = 0
        dist: List[Distance] = [INF] * n
        paths: List[Optional[List[Vertex]]] = [None] * n
        dist[SOURCE] = 0
        paths[SOURCE] = []

        history: List[Tuple[Distance, ...]] = []
        converged = False
        rounds = 0
        for rnd in range(self._round_limit()):
            improved = self._relax_round(dist, paths)
            rounds += 1
            self.counters["improvements"] += improved
            if self.cfg.record_history:
                history.append(tuple(dist))
            self.logger.debug("round", round=rnd + 1, improvements=improved)
            if improved == 0:
                converged = True
                if self.cfg.early_exit:
                    break
        self.counters["rounds"] = rounds

        self.logger.info(
            "solve",
            n=n,
            m=self.G.edge_count(),
            rounds=rounds,
            converged=converged,
            reachable=sum(1 for d in dist if d != INF),
        )
        self._result = SSSPResult(
            distances=dist,
            paths=paths,
            rounds=rounds,
            converged=converged,
            history=tuple(history),
        )
        return self._result

    def path(self, target: Vertex) -> List[Vertex]:
        """Return the vertices from the source to ``target`` inclusive.

        Returns an empty list if ``target`` has no path-table entry.

        Raises:
            AlgorithmError: If called before :meth:`solve` or with an
                out-of-range ``target``.
        """
        if self._result is None:
            raise AlgorithmError("Call solve() before requesting paths.")
        if not (0 <= target < self.G.n):
            raise AlgorithmError("target out of range.")
        return full_path(self._result.paths, target)

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)

    def metrics(self, wall_ms: float, peak_mib: float | None = None) -> SolverMetrics:
        """Return performance metrics for the most recent run.

        Args:
            wall_ms: Wall-clock time spent in :meth:`solve` in milliseconds.
            peak_mib: Optional peak memory usage in MiB.
        """
        if self._result is None:
            raise AlgorithmError("Call solve() before requesting metrics.")
        return SolverMetrics(
            n=self.G.n,
            m=self.G.edge_count(),
            rounds=self._result.rounds,
            converged=self._result.converged,
            counters=self.summary(),
            wall_ms=wall_ms,
            peak_mib=peak_mib,
        )


__all__ = [
    "BellmanFordSolver",
    "Distance",
    "INF",
    "SOURCE",
    "SSSPResult",
    "SolverConfig",
    "SolverMetrics",
]
