import logging
from enum import IntEnum

from multi_target_logging.enums import LogLevel


def test_log_level_is_int_enum() -> None:
    assert issubclass(LogLevel, IntEnum)


def test_log_level_matches_stdlib() -> None:
    assert LogLevel.DEBUG == logging.DEBUG
    assert LogLevel.INFO == logging.INFO
    assert LogLevel.WARNING == logging.WARNING
    assert LogLevel.ERROR == logging.ERROR
    assert LogLevel.CRITICAL == logging.CRITICAL


def test_log_level_ordering() -> None:
    assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARNING < LogLevel.ERROR < LogLevel.CRITICAL


def test_error_class_split() -> None:
    assert [level.name for level in LogLevel if level.is_error_class] == ["ERROR", "CRITICAL"]
