"""Stage timing and optional cProfile integration for the command-line tool."""

from __future__ import annotations

import cProfile
import pstats
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from io import StringIO
from types import TracebackType
from typing import Dict, Iterator, Optional


class StageTimer:
    """Records wall-clock milliseconds for named pipeline stages.

    Examples:
        ```python
        >>> timer = StageTimer()
        >>> with timer.stage("load"):
        ...     pass
        >>> list(timer.elapsed_ms)
        ['load']
        ```
    """

    def __init__(self) -> None:
        self.elapsed_ms: Dict[str, float] = {}

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.elapsed_ms[name] = (time.perf_counter() - t0) * 1000.0


@dataclass
class ProfileReport:
    """Summary of profiling statistics."""

    profile: cProfile.Profile
    sort_key: str = field(default="cumulative")

    def to_text(self, lines: int = 20) -> str:
        """Return the top ``lines`` rows of the profile as text."""
        buffer = StringIO()
        stats = pstats.Stats(self.profile, stream=buffer)
        stats.strip_dirs().sort_stats(self.sort_key).print_stats(lines)
        return buffer.getvalue()


class ProfileSession:
    """Context manager that profiles the enclosed block.

    Args:
        dump_path: Optional path where raw stats are dumped on exit.
    """

    def __init__(self, dump_path: Optional[str] = None) -> None:
        self.dump_path = dump_path
        self._prof = cProfile.Profile()
        self._done = False

    def __enter__(self) -> "ProfileSession":
        self._prof.enable()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self._prof.disable()
        if self.dump_path:
            self._prof.dump_stats(self.dump_path)
        self._done = True

    def report(self) -> ProfileReport:
        """Return profiling statistics for the finished session."""
        if not self._done:
            raise RuntimeError("profiling session not finished")
        return ProfileReport(self._prof)


__all__: list[str] = ["ProfileReport", "ProfileSession", "StageTimer"]
