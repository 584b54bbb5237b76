"""Concrete sinks: JSON streams, in-memory capture, Splunk HEC, database, stdlib handlers."""

from __future__ import annotations

import copy
import json
import logging
import sys
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, TextIO

import requests  # type: ignore[import-untyped]
from sqlalchemy import insert
from sqlalchemy.engine import Engine

from multi_target_logging.tables.log import AppLog
from multi_target_logging.utilities.log.sinks import Attributes, clone_record, normalize_attributes

_exc_formatter = logging.Formatter()
_HEADER_KEYS = frozenset({"time", "level", "msg", "exc_info"})


def _insert(target: dict[str, Any], path: tuple[str, ...], key: str, value: Any) -> None:
    node = target
    for name in path:
        child = node.get(name)
        if not isinstance(child, dict):
            child = {}
            node[name] = child
        node = child
    node[key] = value


class BaseSink(ABC):
    """Level filter plus attribute/scope bookkeeping shared by all sinks.

    Attributes remember the scope path that was active when they were added,
    so ``with_attributes(a).with_scope("g")`` keeps ``a`` at the top level
    while the record's own attributes land under ``"g"``.
    """

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level
        self._scopes: tuple[str, ...] = ()
        self._attrs: tuple[tuple[tuple[str, ...], str, Any], ...] = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={logging.getLevelName(self.level)}, scopes={self._scopes!r})"

    @property
    def scopes(self) -> tuple[str, ...]:
        return self._scopes

    def _derive(self, **changes: Any) -> Any:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    def enabled(self, level: int) -> bool:
        return level >= self.level

    def with_attributes(self, attrs: Attributes) -> Any:
        pairs = normalize_attributes(attrs)
        if not pairs:
            return self
        bound = tuple((self._scopes, key, value) for key, value in pairs)
        return self._derive(_attrs=self._attrs + bound)

    def with_scope(self, name: str) -> Any:
        if name == "":
            return self
        return self._derive(_scopes=self._scopes + (name,))

    def build_attributes(self, record: logging.LogRecord) -> dict[str, Any]:
        """Merge bound attributes and the record's own attributes into one nested dict."""
        attrs: dict[str, Any] = {}
        for path, key, value in self._attrs:
            _insert(attrs, path, key, value)
        for key, value in (getattr(record, "extra", None) or {}).items():
            _insert(attrs, self._scopes, key, value)
        return attrs

    def build_payload(self, record: logging.LogRecord) -> dict[str, Any]:
        """Render ``record`` into a nested dict of time, level, msg and attributes.

        Top-level attributes named like a header key are kept as ``attrs.<key>``.
        """
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created).astimezone().isoformat(),
            "level": record.levelname,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = _exc_formatter.formatException(record.exc_info)
        for key, value in self.build_attributes(record).items():
            payload[f"attrs.{key}" if key in _HEADER_KEYS else key] = value
        return payload

    @abstractmethod
    def handle(self, record: logging.LogRecord) -> None:
        pass


class JSONStreamSink(BaseSink):
    """Write one JSON document per line to a text stream."""

    def __init__(self, stream: TextIO | None = None, level: int = logging.INFO) -> None:
        super().__init__(level)
        self.stream = stream if stream is not None else sys.stderr
        # Shared by derived sinks writing to the same stream
        self._lock = threading.Lock()

    def handle(self, record: logging.LogRecord) -> None:
        line = json.dumps(self.build_payload(record), default=str)
        with self._lock:
            self.stream.write(line + "\n")
            self.stream.flush()


class MemorySink(BaseSink):
    """Keep rendered payloads in memory; derived sinks share the same buffer."""

    def __init__(self, level: int = logging.DEBUG) -> None:
        super().__init__(level)
        self.payloads: list[dict[str, Any]] = []
        self.records: list[logging.LogRecord] = []
        self._lock = threading.Lock()

    def handle(self, record: logging.LogRecord) -> None:
        payload = self.build_payload(record)
        with self._lock:
            self.records.append(record)
            self.payloads.append(payload)

    @property
    def messages(self) -> list[str]:
        return [payload["msg"] for payload in self.payloads]


class SplunkHECSink(BaseSink):
    """Forward records to a Splunk HTTP Event Collector endpoint."""

    def __init__(self, hec_url: str, token: str, level: int = logging.ERROR, timeout: float = 2.5) -> None:
        super().__init__(level)
        self.url = hec_url.rstrip("/") + "/event"
        self.headers = {"Authorization": f"Splunk {token}"}
        self.timeout = timeout

    def handle(self, record: logging.LogRecord) -> None:
        """Post the event; HTTP and transport errors propagate to the router."""
        event = {
            "time": record.created,
            "source": record.name,
            "event": self.build_payload(record),
        }
        response = requests.post(self.url, headers=self.headers, json=event, timeout=self.timeout)
        response.raise_for_status()


class DatabaseSink(BaseSink):
    """Persist records into the ``app_logs`` table."""

    def __init__(self, engine: Engine, level: int = logging.WARNING) -> None:
        super().__init__(level)
        self.engine = engine

    def handle(self, record: logging.LogRecord) -> None:
        payload = self.build_payload(record)
        with self.engine.begin() as conn:
            conn.execute(
                insert(AppLog).values(
                    ts=record.created,
                    level=record.levelname,
                    logger=record.name,
                    message=payload["msg"],
                    extra_json=json.dumps(payload, default=str),
                )
            )


class HandlerSink(BaseSink):
    """Adapt a stdlib ``logging.Handler`` to the sink protocol.

    Bound attributes and scopes are merged into ``record.extra`` before the
    handler sees the record. Filtering uses the handler's own level and
    filters.
    """

    def __init__(self, handler: logging.Handler) -> None:
        super().__init__(handler.level)
        self.handler = handler

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.handler!r})"

    def enabled(self, level: int) -> bool:
        return level >= self.handler.level

    def handle(self, record: logging.LogRecord) -> None:
        record = clone_record(record)
        record.extra = self.build_attributes(record)  # type: ignore[attr-defined]
        self.handler.handle(record)
