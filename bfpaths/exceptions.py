"""Custom exception types used across :mod:`bfpaths`."""

from __future__ import annotations


class BFPathsError(Exception):
    """Base class for all package-specific errors."""


class InputError(BFPathsError, ValueError):
    """Raised for invalid user input such as an unreadable graph file."""


class GraphFormatError(InputError):
    """Raised when parsing a graph file fails."""


class ConfigError(BFPathsError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(BFPathsError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
    "BFPathsError",
    "InputError",
    "GraphFormatError",
    "ConfigError",
    "AlgorithmError",
]
