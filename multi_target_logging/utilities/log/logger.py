"""Structured logger facade that builds records and hands them to a sink."""

from __future__ import annotations

import logging
import sys
import traceback
from typing import Any

from multi_target_logging.utilities.log.sinks import Sink


class RoutedLogger:
    """Build ``LogRecord`` objects and pass them to a sink (usually a router).

    Keyword arguments of the logging calls become the record's structured
    attributes (``record.extra``)::

        log = router.logger("billing").with_scope("invoice")
        log.info("sent", invoice_id=42)
    """

    def __init__(self, sink: Sink, name: str = "root", swallow_errors: bool = True) -> None:
        self.sink = sink
        self.name = name
        self.swallow_errors = swallow_errors

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, sink={self.sink!r})"

    def _derive(self, sink: Sink) -> RoutedLogger:
        return type(self)(sink, name=self.name, swallow_errors=self.swallow_errors)

    def with_attributes(self, **attrs: Any) -> RoutedLogger:
        return self._derive(self.sink.with_attributes(tuple(attrs.items())))

    def with_scope(self, name: str) -> RoutedLogger:
        if name == "":
            return self
        return self._derive(self.sink.with_scope(name))

    def enabled(self, level: int) -> bool:
        return self.sink.enabled(level)

    def _log(self, level: int, msg: str, args: tuple, attrs: dict[str, Any], exc_info: Any = None) -> None:
        if not self.sink.enabled(level):
            return

        try:
            # _log <- public method <- caller
            frame = sys._getframe(2)
            pathname, lineno, func = frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name
        except ValueError:
            pathname, lineno, func = "(unknown file)", 0, "(unknown function)"

        if exc_info is True:
            exc_info = sys.exc_info()
        record = logging.LogRecord(self.name, level, pathname, lineno, msg, args or None, exc_info, func=func)
        record.extra = dict(attrs)  # type: ignore[attr-defined]

        try:
            self.sink.handle(record)
        except Exception as exc:
            if not self.swallow_errors:
                raise
            if logging.raiseExceptions:
                traceback.print_exception(exc, file=sys.stderr)

    def log(self, level: int, msg: str, /, *args: Any, **attrs: Any) -> None:
        self._log(level, msg, args, attrs)

    def debug(self, msg: str, /, *args: Any, **attrs: Any) -> None:
        self._log(logging.DEBUG, msg, args, attrs)

    def info(self, msg: str, /, *args: Any, **attrs: Any) -> None:
        self._log(logging.INFO, msg, args, attrs)

    def warning(self, msg: str, /, *args: Any, **attrs: Any) -> None:
        self._log(logging.WARNING, msg, args, attrs)

    def error(self, msg: str, /, *args: Any, **attrs: Any) -> None:
        self._log(logging.ERROR, msg, args, attrs)

    def critical(self, msg: str, /, *args: Any, **attrs: Any) -> None:
        self._log(logging.CRITICAL, msg, args, attrs)

    def exception(self, msg: str, /, *args: Any, **attrs: Any) -> None:
        """Log at ERROR with the exception currently being handled."""
        self._log(logging.ERROR, msg, args, attrs, exc_info=True)
