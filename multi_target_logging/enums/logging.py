"""Logging-level enum bridge to stdlib logging constants."""

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels understood by routers and sinks.

    ``CRITICAL`` is the fatal level. Everything from ``ERROR`` upwards is
    routed to the error sinks of a ``MultiTargetRouter``.
    """

    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @property
    def is_error_class(self) -> bool:
        return self >= LogLevel.ERROR
