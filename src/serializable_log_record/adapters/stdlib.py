"""Adapters binding the conversion layer to the stdlib :mod:`logging` package.

Purpose
-------
Let capture read :class:`logging.LogRecord` instances and let re-hydration
produce them, without the application layer importing :mod:`logging` types.

Contents
--------
* :class:`LogRecordView` - :class:`LiveEventPort` over a ``LogRecord``.
* :class:`LogRecordBuilder` - :class:`EventBuilderPort` producing ``LogRecord``.
* :class:`CaptureHandler` - ``logging.Handler`` that captures every record.
* :func:`capture_log_record` - capture shortcut for ``LogRecord`` inputs.

System Role
-----------
Edge of the system facing the logging frontend (inbound) and stdlib sinks such
as loggers and handlers (outbound).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from serializable_log_record.application.ports.events import EventBuilderPort, LiveEventPort
from serializable_log_record.application.use_cases.capture import capture
from serializable_log_record.domain.levels import LogLevel
from serializable_log_record.domain.record import SerializableLogRecord

RecordFactory = Callable[..., logging.LogRecord]

UNKNOWN_FILE = "(unknown file)"
UNKNOWN_LINE = 0
#: Markers ``logging`` itself uses when the caller location is unknown.

_UNKNOWN_MODULES = frozenset({"", "Unknown module", UNKNOWN_FILE})
_UNKNOWN_FILES = frozenset({"", UNKNOWN_FILE})


def _known(value: str | None, unknown: frozenset[str]) -> str | None:
    if value is None or value in unknown:
        return None
    return value


class LogRecordView(LiveEventPort):
    """Read a :class:`logging.LogRecord` through the live event port.

    The stdlib reports missing location data with sentinels rather than
    ``None``; those are normalised to ``None`` here so they are not captured
    as real values. Line ``0`` counts as unknown.

    Examples
    --------
    >>> record = logging.makeLogRecord({'name': 'app', 'levelno': 30, 'msg': 'x=%d', 'args': (3,)})
    >>> view = LogRecordView(record)
    >>> view.level.name, view.target, view.render()
    ('WARNING', 'app', 'x=3')
    >>> view.file is None and view.line is None
    True
    """

    __slots__ = ("_record",)

    def __init__(self, record: logging.LogRecord) -> None:
        self._record = record

    @property
    def level(self) -> LogLevel:
        levelno = self._record.levelno
        # ``makeLogRecord`` leaves ``levelno`` as ``None`` when no level is given.
        if isinstance(levelno, bool) or not isinstance(levelno, int):
            levelno = logging.NOTSET
        return LogLevel.nearest(levelno)

    @property
    def target(self) -> str:
        return self._record.name or ""

    @property
    def module_path(self) -> str | None:
        return _known(getattr(self._record, "module", None), _UNKNOWN_MODULES)

    @property
    def file(self) -> str | None:
        return _known(self._record.pathname, _UNKNOWN_FILES)

    @property
    def line(self) -> int | None:
        return self._record.lineno or None

    def render(self) -> str:
        return self._record.getMessage()


class LogRecordBuilder(EventBuilderPort[logging.LogRecord]):
    """Assemble a :class:`logging.LogRecord` field by field.

    Records are created through :func:`logging.getLogRecordFactory` unless a
    ``factory`` is injected, so host applications with custom record classes
    receive their own type back.

    An absent file or line is written as the markers ``logging`` itself uses
    for an unknown caller (:data:`UNKNOWN_FILE`, line ``0``), so formats such
    as ``%(filename)s:%(lineno)d`` keep working. :class:`LogRecordView` reads
    both markers back as ``None``. ``module`` is set to the stored value, which
    may be ``None``.

    Examples
    --------
    >>> record = (
    ...     LogRecordBuilder()
    ...     .level(LogLevel.ERROR)
    ...     .target('app.db')
    ...     .args('%s rows', 3)
    ...     .line(7)
    ...     .build()
    ... )
    >>> record.levelno, record.name, record.getMessage(), record.lineno
    (40, 'app.db', '3 rows', 7)
    >>> record.module is None, record.pathname
    (True, '(unknown file)')
    >>> LogRecordView(record).file is None
    True
    """

    def __init__(self, *, factory: RecordFactory | None = None) -> None:
        self._factory = factory
        self._level = LogLevel.INFO
        self._target = ""
        self._template = ""
        self._arguments: tuple[Any, ...] = ()
        self._module_path: str | None = None
        self._file: str | None = None
        self._line: int | None = None

    def level(self, level: LogLevel) -> "LogRecordBuilder":
        self._level = level
        return self

    def target(self, target: str) -> "LogRecordBuilder":
        self._target = target
        return self

    def args(self, template: str, *arguments: Any) -> "LogRecordBuilder":
        self._template = template
        self._arguments = arguments
        return self

    def module_path(self, module_path: str | None) -> "LogRecordBuilder":
        self._module_path = module_path
        return self

    def file(self, file: str | None) -> "LogRecordBuilder":
        self._file = file
        return self

    def line(self, line: int | None) -> "LogRecordBuilder":
        self._line = line
        return self

    def build(self) -> logging.LogRecord:
        """Create the record from the accumulated fields."""
        factory = self._factory or logging.getLogRecordFactory()
        record = factory(
            self._target,
            self._level.to_python_level(),
            self._file if self._file is not None else UNKNOWN_FILE,
            self._line if self._line is not None else UNKNOWN_LINE,
            self._template,
            self._arguments,
            None,
        )
        # LogRecord derives ``module`` from the path; keep the stored value instead.
        record.module = self._module_path
        return record


class CaptureHandler(logging.Handler):
    """Logging handler that captures each record and passes it on.

    Parameters
    ----------
    callback:
        Receives the :class:`SerializableLogRecord` for every handled record.
    level:
        Minimum level handled, as for any :class:`logging.Handler`.

    Examples
    --------
    >>> captured = []
    >>> handler = CaptureHandler(captured.append)
    >>> _ = handler.handle(logging.makeLogRecord({'name': 'app', 'levelno': 20, 'msg': 'hi %s', 'args': ('there',)}))
    >>> captured[0].message
    'hi there'
    """

    def __init__(self, callback: Callable[[SerializableLogRecord], Any], level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._callback(capture_log_record(record))
        except RecursionError:  # See issue 36272 in CPython
            raise
        except Exception:
            self.handleError(record)


def capture_log_record(record: logging.LogRecord) -> SerializableLogRecord:
    """Capture a stdlib record."""

    return capture(LogRecordView(record))


__all__ = ["UNKNOWN_FILE", "UNKNOWN_LINE", "CaptureHandler", "LogRecordBuilder", "LogRecordView", "capture_log_record"]
