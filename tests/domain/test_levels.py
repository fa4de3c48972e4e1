from __future__ import annotations

import logging

import pytest

from serializable_log_record.domain.levels import LogLevel


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warning", LogLevel.WARNING),
        ("warn", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
        ("CRITICAL", LogLevel.CRITICAL),
        ("fatal", LogLevel.CRITICAL),
        ("  info  ", LogLevel.INFO),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


def test_parse_falls_back_to_warning_for_unknown_names() -> None:
    assert LogLevel.parse("trace") is LogLevel.WARNING
    assert LogLevel.parse("trace", default=LogLevel.DEBUG) is LogLevel.DEBUG
    assert LogLevel.parse("error") is LogLevel.ERROR


@pytest.mark.parametrize(
    "number, expected",
    [
        (10, LogLevel.DEBUG),
        (20, LogLevel.INFO),
        (30, LogLevel.WARNING),
        (40, LogLevel.ERROR),
        (50, LogLevel.CRITICAL),
    ],
)
def test_from_numeric_maps_standard_levels(number: int, expected: LogLevel) -> None:
    assert LogLevel.from_numeric(number) is expected


@pytest.mark.parametrize("number", [-5, 5, 15, 25, 35, 45, 55])
def test_from_numeric_rejects_non_standard_levels(number: int) -> None:
    with pytest.raises(ValueError, match="Unsupported log level numeric"):
        LogLevel.from_numeric(number)


@pytest.mark.parametrize(
    "number, expected",
    [
        (0, LogLevel.DEBUG),
        (5, LogLevel.DEBUG),
        (10, LogLevel.DEBUG),
        (25, LogLevel.INFO),
        (35, LogLevel.WARNING),
        (49, LogLevel.ERROR),
        (50, LogLevel.CRITICAL),
        (100, LogLevel.CRITICAL),
    ],
)
def test_nearest_collapses_custom_levels_downwards(number: int, expected: LogLevel) -> None:
    assert LogLevel.nearest(number) is expected


@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.DEBUG, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFO),
        (logging.WARNING, LogLevel.WARNING),
        (logging.ERROR, LogLevel.ERROR),
        (logging.CRITICAL, LogLevel.CRITICAL),
    ],
)
def test_from_numeric_accepts_logging_constants(level: int, expected: LogLevel) -> None:
    assert LogLevel.from_numeric(level) is expected


@pytest.mark.parametrize("level", LogLevel)
def test_to_python_level_returns_logging_constant(level: LogLevel) -> None:
    assert level.to_python_level() == getattr(logging, level.name)


def test_levels_are_ordered_by_severity() -> None:
    values = [level.value for level in LogLevel]
    assert values == sorted(values)


@pytest.mark.parametrize(
    "level, severity",
    [
        (LogLevel.DEBUG, "debug"),
        (LogLevel.INFO, "info"),
        (LogLevel.WARNING, "warning"),
        (LogLevel.ERROR, "error"),
        (LogLevel.CRITICAL, "critical"),
    ],
)
def test_severity_matches_lowercase_name(level: LogLevel, severity: str) -> None:
    assert level.severity == severity
