"""Lightweight logging helpers for optional structured output."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional, Protocol


class Logger(Protocol):
    """Protocol for minimal logger implementations."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def bind(self, **fields: Any) -> "NoopLogger":
        return self


class StdLogger:
    """Minimal logger writing ``level event k=v`` lines or JSON objects.

    Args:
        level: Lowest level that is emitted (``debug``, ``info``, ``warning``).
        json_fmt: Emit one JSON object per event instead of plain text.
        stream: Output stream, ``sys.stderr`` by default.
        context: Fields attached to every event; see :meth:`bind`.
    """

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Any | None = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        if level not in self._levels:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr
        self.context: Dict[str, Any] = dict(context or {})

    def bind(self, **fields: Any) -> "StdLogger":
        """Return a logger sharing this one's settings with extra context."""
        merged = dict(self.context)
        merged.update(fields)
        return StdLogger(self.level, self.json_fmt, self.stream, merged)

    def _enabled(self, level: str) -> bool:
        return self._levels[level] >= self._levels[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit a log ``event`` at ``level`` with additional ``fields``."""
        if not self._enabled(level):
            return
        data = dict(self.context)
        data.update(fields)
        if self.json_fmt:
            obj = {"level": level, "event": event}
            obj.update(data)
            self.stream.write(json.dumps(obj) + "\n")
        else:
            kv = " ".join(f"{k}={v}" for k, v in data.items())
            self.stream.write(f"{level} {event} {kv}".rstrip() + "\n")

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
