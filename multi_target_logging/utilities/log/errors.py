"""Error types raised when routed sinks fail to emit."""

from __future__ import annotations

from typing import Any


class SinkEmitError(Exception):
    """A single sink failed to emit a record."""

    def __init__(self, sink: Any, error: BaseException) -> None:
        super().__init__(f"{type(sink).__name__} failed to emit: {error!r}")
        self.sink = sink
        self.error = error


class AggregateEmitError(ExceptionGroup):
    """All sink failures collected from one ``handle`` call, in sink order."""

    def derive(self, excs):  # type: ignore[override]
        return AggregateEmitError(self.message, excs)
