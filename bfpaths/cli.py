"""Command-line interface for running the solver."""

from __future__ import annotations

import argparse
import sys
import traceback
from typing import List, Optional

from .exceptions import BFPathsError, ConfigError, GraphFormatError, InputError
from .io import format_adjacency, read_graph, write_distances, write_paths
from .logger import StdLogger
from .profiling import ProfileSession, StageTimer
from .solver import BellmanFordSolver, SolverConfig

EXAMPLE_GRAPH = """3
A 2 B 4 C 1
B 1 C -2
C 0
"""

STAGE_MESSAGES = {
    "load": "loading graph took {ms:.3f}ms",
    "compute": "bellman-ford took {ms:.3f}ms",
    "write": "writing paths/costs took {ms:.3f}ms",
}


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``bfpaths`` command-line tool."""
    examples = (
        "Examples:\n"
        "  bfpaths graph.txt\n"
        "  bfpaths graph.txt --distances-out d.txt --paths-out p.txt\n"
        "  bfpaths graph.txt --profile --log-level info\n"
        "\n"
        "Input format (first vertex is the source):\n" + EXAMPLE_GRAPH
    )
    p = argparse.ArgumentParser(
        prog="bfpaths",
        description="Bellman-Ford shortest distances and paths from the first vertex",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("input", help="Path to the adjacency-list graph file")
    p.add_argument("--distances-out", default="output.txt", help="Distances output file")
    p.add_argument("--paths-out", default="paths.txt", help="Paths output file")
    p.add_argument(
        "--max-rounds",
        type=int,
        default=None,
        help="Cap on relaxation rounds (never above n-1)",
    )
    p.add_argument("--show-graph", action="store_true", help="Print the parsed adjacency lists")
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    p.add_argument("--profile", action="store_true", help="Enable cProfile around the solver")
    p.add_argument("--profile-out", type=str, default=None, help="Dump .prof file to this path")

    args = p.parse_args(argv)
    logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=sys.stderr).bind(
        input=args.input
    )
    timer = StageTimer()

    try:
        with timer.stage("load"):
            G, symbols = read_graph(args.input, logger=logger)
        print(STAGE_MESSAGES["load"].format(ms=timer.elapsed_ms["load"]))

        if args.show_graph:
            print(format_adjacency(G, symbols))

        cfg = SolverConfig(max_rounds=args.max_rounds)
        solver = BellmanFordSolver(G, config=cfg, logger=logger)

        if args.profile:
            with timer.stage("compute"), ProfileSession(dump_path=args.profile_out) as prof:
                res = solver.solve()
            sys.stderr.write(prof.report().to_text(lines=40))
        else:
            with timer.stage("compute"):
                res = solver.solve()
        print(STAGE_MESSAGES["compute"].format(ms=timer.elapsed_ms["compute"]))

        with timer.stage("write"):
            write_distances(args.distances_out, res, symbols)
            write_paths(args.paths_out, res, symbols)
        print(STAGE_MESSAGES["write"].format(ms=timer.elapsed_ms["write"]))

        metrics = solver.metrics(wall_ms=timer.elapsed_ms["compute"])
        logger.info(
            "run",
            n=metrics.n,
            m=metrics.m,
            converged=metrics.converged,
            wall_ms=round(metrics.wall_ms, 3),
            **metrics.counters,
        )
        return 0

    except (InputError, ConfigError, GraphFormatError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 64
    except BFPathsError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70
    except Exception as exc:  # pragma: no cover - unexpected
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70


if __name__ == "__main__":
    sys.exit(main())
