"""Public package exports for :mod:`bfpaths`."""

from __future__ import annotations

from .exceptions import (
    AlgorithmError,
    BFPathsError,
    ConfigError,
    GraphFormatError,
    InputError,
)
from .graph import Graph, build
from .io import (
    format_adjacency,
    format_distances,
    format_paths,
    parse_graph,
    read_graph,
    write_distances,
    write_graph,
    write_paths,
)
from .logger import Logger, NoopLogger, StdLogger
from .path import full_path, path_weight, render_path
from .solver import (
    INF,
    SOURCE,
    BellmanFordSolver,
    SolverConfig,
    SolverMetrics,
    SSSPResult,
)
from .symbols import SymbolTable

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "build",
    "SymbolTable",
    "BellmanFordSolver",
    "SSSPResult",
    "SolverConfig",
    "SolverMetrics",
    "INF",
    "SOURCE",
    "full_path",
    "path_weight",
    "render_path",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "parse_graph",
    "read_graph",
    "write_graph",
    "write_distances",
    "write_paths",
    "format_distances",
    "format_paths",
    "format_adjacency",
    "BFPathsError",
    "AlgorithmError",
    "InputError",
    "ConfigError",
    "GraphFormatError",
]
