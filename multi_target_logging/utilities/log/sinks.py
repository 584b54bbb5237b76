"""Sink capability contract shared by routers and concrete destinations."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

Attributes = Sequence[tuple[str, Any]]


@runtime_checkable
class Sink(Protocol):
    """Destination for log records.

    Implementations must treat themselves as immutable values: the
    ``with_*`` methods return a new sink and never change the receiver.
    ``handle`` raises when the record could not be delivered.
    """

    def enabled(self, level: int) -> bool:
        """Return True when a record at ``level`` would be accepted."""
        ...

    def handle(self, record: logging.LogRecord) -> None:
        """Emit ``record``; raise on failure."""
        ...

    def with_attributes(self, attrs: Attributes) -> Sink:
        """Return a sink that attaches ``attrs`` to every future record."""
        ...

    def with_scope(self, name: str) -> Sink:
        """Return a sink whose future records are nested under ``name``."""
        ...


def normalize_attributes(attrs: Attributes | Mapping[str, Any] | None) -> tuple[tuple[str, Any], ...]:
    """Return a fresh tuple of ``(key, value)`` pairs."""
    if attrs is None:
        return ()
    if isinstance(attrs, Mapping):
        return tuple((str(key), value) for key, value in attrs.items())
    return tuple((str(key), value) for key, value in attrs)


def clone_record(record: logging.LogRecord) -> logging.LogRecord:
    """Copy ``record`` so one sink's changes never leak into another's."""
    clone = copy.copy(record)
    extra = getattr(record, "extra", None)
    if isinstance(extra, dict):
        clone.extra = dict(extra)  # type: ignore[attr-defined]
    return clone
