"""Severity-based fan-out of log records to two groups of sinks."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from multi_target_logging.utilities.log.errors import AggregateEmitError, SinkEmitError
from multi_target_logging.utilities.log.logger import RoutedLogger
from multi_target_logging.utilities.log.sinks import Attributes, Sink, clone_record, normalize_attributes

logger = logging.getLogger(__name__)

ERROR_THRESHOLD = logging.ERROR


def is_error_class(level: int) -> bool:
    """Return True when ``level`` belongs to the error group."""
    return level >= ERROR_THRESHOLD


class MultiTargetRouter:
    def __init__(self, standard_sinks: Iterable[Sink] | None = None,
                 error_sinks: Iterable[Sink] | None = None):
        """
        :param standard_sinks:
                sinks receiving records below ERROR, in call order
        :param error_sinks:
                sinks receiving records at ERROR and above, in call order.
                A sink may appear in both groups; it then receives each
                record once, through whichever group the level selects.
        """
        self._standard_sinks: tuple[Sink, ...] = tuple(standard_sinks or ())
        self._error_sinks: tuple[Sink, ...] = tuple(error_sinks or ())

    @property
    def standard_sinks(self) -> tuple[Sink, ...]:
        return self._standard_sinks

    @property
    def error_sinks(self) -> tuple[Sink, ...]:
        return self._error_sinks

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(standard_sinks={list(self._standard_sinks)!r}, "
                f"error_sinks={list(self._error_sinks)!r})")

    def _group(self, level: int) -> tuple[Sink, ...]:
        return self._error_sinks if is_error_class(level) else self._standard_sinks

    def enabled(self, level: int) -> bool:
        """Return True when at least one sink of the matching group accepts ``level``."""
        return any(sink.enabled(level) for sink in self._group(level))

    def handle(self, record: logging.LogRecord) -> None:
        """Send ``record`` to every enabled sink of its group.

        Every sink is attempted even when an earlier one fails. Failures are
        raised together as one :class:`AggregateEmitError`.
        """
        errors: list[SinkEmitError] = []
        for sink in self._group(record.levelno):
            if not sink.enabled(record.levelno):
                continue
            try:
                # Run sink.handle on a private copy
                sink.handle(clone_record(record))
            except SinkEmitError as exc:
                errors.append(exc)
            except Exception as exc:
                err = SinkEmitError(sink, exc)
                err.__cause__ = exc
                errors.append(err)

        if errors:
            # Only the level is read here; formatting the record could raise again
            logger.debug("%d sink(s) failed for %s record", len(errors), record.levelname)
            raise AggregateEmitError(f"{len(errors)} sink(s) failed to emit {record.levelname} record", errors)

    def _map_sinks(self, derive: Callable[[Sink], Sink]) -> MultiTargetRouter:
        return type(self)(
            [derive(sink) for sink in self._standard_sinks],
            [derive(sink) for sink in self._error_sinks],
        )

    def with_attributes(self, attrs: Attributes | Mapping[str, Any]) -> MultiTargetRouter:
        """Return a router whose sinks all carry ``attrs``."""
        pairs = list(normalize_attributes(attrs))
        # Each sink gets its own copy of the pairs
        return self._map_sinks(lambda sink: sink.with_attributes(tuple(pairs)))

    def with_scope(self, name: str) -> MultiTargetRouter:
        """Return a router whose sinks nest future records under ``name``."""
        if name == "":
            return self
        return self._map_sinks(lambda sink: sink.with_scope(name))

    def with_output_sinks(self, *sinks: Sink) -> MultiTargetRouter:
        """Return a router with ``sinks`` appended to the standard group."""
        return type(self)(self._standard_sinks + sinks, self._error_sinks)

    def with_error_output_sinks(self, *sinks: Sink) -> MultiTargetRouter:
        """Return a router with ``sinks`` appended to the error group."""
        return type(self)(self._standard_sinks, self._error_sinks + sinks)

    def logger(self, name: str = "root", swallow_errors: bool = True) -> RoutedLogger:
        return RoutedLogger(self, name=name, swallow_errors=swallow_errors)


def new_router(standard_sinks: Iterable[Sink] | None = None,
               error_sinks: Iterable[Sink] | None = None) -> MultiTargetRouter:
    """Build a router from the two sink groups."""
    return MultiTargetRouter(standard_sinks, error_sinks)
