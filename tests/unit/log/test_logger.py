"""Tests for the structured RoutedLogger facade."""

from __future__ import annotations

import logging

import pytest

from multi_target_logging.utilities.log.errors import AggregateEmitError
from multi_target_logging.utilities.log.handlers import MemorySink
from multi_target_logging.utilities.log.logger import RoutedLogger
from multi_target_logging.utilities.log.router import MultiTargetRouter


class _CountingSink(MemorySink):
    def __init__(self, level: int = logging.DEBUG) -> None:
        super().__init__(level)
        self.handle_calls = 0

    def handle(self, record: logging.LogRecord) -> None:
        self.handle_calls += 1
        super().handle(record)


class _FailingSink(MemorySink):
    def handle(self, record: logging.LogRecord) -> None:
        raise RuntimeError("broken sink")


def test_keyword_arguments_become_attributes() -> None:
    sink = MemorySink()
    RoutedLogger(sink, name="svc").info("hello %s", "world", user="ana")

    [record] = sink.records
    assert record.name == "svc"
    assert record.getMessage() == "hello world"
    assert sink.payloads[0]["user"] == "ana"


def test_caller_location_is_captured() -> None:
    sink = MemorySink()
    RoutedLogger(sink).warning("where")

    [record] = sink.records
    assert record.pathname == __file__
    assert record.funcName == "test_caller_location_is_captured"


def test_disabled_level_builds_no_record() -> None:
    sink = _CountingSink(level=logging.WARNING)
    RoutedLogger(sink).debug("skipped")

    assert sink.handle_calls == 0


@pytest.mark.parametrize("method,level", [
    ("debug", logging.DEBUG),
    ("info", logging.INFO),
    ("warning", logging.WARNING),
    ("error", logging.ERROR),
    ("critical", logging.CRITICAL),
])
def test_level_shortcuts(method: str, level: int) -> None:
    sink = MemorySink()
    getattr(RoutedLogger(sink), method)("msg")

    assert sink.records[0].levelno == level


def test_exception_attaches_exc_info() -> None:
    sink = MemorySink()
    try:
        raise KeyError("missing")
    except KeyError:
        RoutedLogger(sink).exception("lookup failed")

    assert sink.records[0].levelno == logging.ERROR
    assert "KeyError" in sink.payloads[0]["exc_info"]


def test_with_scope_and_attributes() -> None:
    sink = MemorySink()
    log = RoutedLogger(MultiTargetRouter([sink], [sink]))

    log.with_attributes(testattr="testvalue").with_scope("testgroup").info("grouped", keygrp="valuegrp")

    [payload] = sink.payloads
    assert payload["testattr"] == "testvalue"
    assert payload["testgroup"] == {"keygrp": "valuegrp"}


def test_with_empty_scope_returns_same_logger() -> None:
    log = RoutedLogger(MemorySink())

    assert log.with_scope("") is log


def test_failures_swallowed_and_reported(capsys: pytest.CaptureFixture[str]) -> None:
    healthy = MemorySink()
    log = RoutedLogger(MultiTargetRouter([_FailingSink(), healthy]))

    log.info("best effort")

    assert healthy.messages == ["best effort"]
    assert "broken sink" in capsys.readouterr().err


def test_failures_silent_when_raise_exceptions_disabled(monkeypatch: pytest.MonkeyPatch,
                                                        capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(logging, "raiseExceptions", False)
    RoutedLogger(MultiTargetRouter([_FailingSink()])).info("quiet")

    assert capsys.readouterr().err == ""


def test_failures_raise_when_not_swallowed() -> None:
    log = RoutedLogger(MultiTargetRouter([_FailingSink()]), swallow_errors=False)

    with pytest.raises(AggregateEmitError):
        log.info("loud")


def test_router_logger_factory() -> None:
    sink = MemorySink()
    log = MultiTargetRouter([sink]).logger("factory")

    log.info("made")

    assert isinstance(log, RoutedLogger)
    assert sink.records[0].name == "factory"


def test_header_named_attributes_are_accepted() -> None:
    sink = MemorySink()
    log = RoutedLogger(sink)

    log.info("real message", msg="attr msg")
    log.log(logging.WARNING, "second", level="attr level")

    first, second = sink.payloads
    assert first["msg"] == "real message"
    assert first["attrs.msg"] == "attr msg"
    assert second["level"] == "WARNING"
    assert second["attrs.level"] == "attr level"
