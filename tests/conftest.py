from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import pytest

from serializable_log_record.domain.levels import LogLevel
from serializable_log_record.domain.record import SerializableLogRecord


class RecordingSink:
    """Sink that formats records on arrival, the way stdlib handlers do."""

    def __init__(self) -> None:
        self.records: list[logging.LogRecord] = []
        self.messages: list[str] = []

    def handle(self, event: logging.LogRecord) -> None:
        self.records.append(event)
        self.messages.append(event.getMessage())


class ListHandler(logging.Handler):
    """Handler that stores formatted output and the records it saw."""

    def __init__(self) -> None:
        super().__init__(logging.DEBUG)
        self.records: list[logging.LogRecord] = []
        self.formatted: list[str] = []
        self.setFormatter(logging.Formatter("%(levelname)s|%(name)s|%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)
        self.formatted.append(self.format(record))


@pytest.fixture
def full_record() -> SerializableLogRecord:
    return SerializableLogRecord(
        level=LogLevel.WARNING,
        target="app.net",
        message="conn 7 failed: timeout",
        module_path="net",
        file="app/net.py",
        line=42,
    )


@pytest.fixture
def bare_record() -> SerializableLogRecord:
    return SerializableLogRecord(level=LogLevel.INFO, target="app", message="ready")


@pytest.fixture
def live_record_factory() -> Callable[..., logging.LogRecord]:
    def _factory(
        msg: Any = "conn %s failed: %s",
        args: tuple[Any, ...] = (7, "timeout"),
        *,
        name: str = "app.net",
        level: int = logging.WARNING,
        pathname: str | None = "app/net.py",
        lineno: int | None = 42,
    ) -> logging.LogRecord:
        return logging.LogRecord(name, level, pathname, lineno, msg, args, None)

    return _factory


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def list_handler() -> ListHandler:
    return ListHandler()


@pytest.fixture
def isolated_logger(list_handler: ListHandler):
    logger = logging.getLogger("tests.isolated")
    previous_level = logger.level
    previous_propagate = logger.propagate
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(list_handler)
    try:
        yield logger
    finally:
        logger.removeHandler(list_handler)
        logger.setLevel(previous_level)
        logger.propagate = previous_propagate
