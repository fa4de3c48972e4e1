"""Public façade wiring the stdlib adapter, use cases, and codecs together.

Purpose
-------
Expose the handful of calls host applications need: capture a
:class:`logging.LogRecord`, encode or decode it, and replay it into a sink
inside a bounded scope.

Contents
--------
* :func:`from_log_record` - capture.
* :func:`into_log_record`, :func:`rehydrated`, :func:`emit` - re-hydration.
* :func:`encode`, :func:`decode` - codec shortcuts honouring configuration.
* :func:`summary_info` - metadata banner for the CLI.

System Role
-----------
Composition point: the only module that chooses concrete adapters
(:class:`LogRecordBuilder`, the codec registry) on the caller's behalf.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from .adapters.codecs import get_codec
from .adapters.stdlib import LogRecordBuilder, LogRecordView
from .application.ports.codec import RecordCodecPort
from .application.ports.events import EventBuilderPort, EventSinkPort, LiveEventPort
from .application.use_cases.capture import capture
from .application.use_cases.rehydrate import dispatch, rehydrate
from .application.use_cases.rehydrate import rehydrated as _rehydrated
from .config import default_codec
from .domain.record import SerializableLogRecord

T = TypeVar("T")


def from_log_record(record: logging.LogRecord | LiveEventPort) -> SerializableLogRecord:
    """Capture ``record`` into an owned, serialisable record.

    Call this while the logging call that produced ``record`` is still in
    progress (for example from a handler's ``emit``); the message is rendered
    now and the arguments are dropped.

    Examples
    --------
    >>> live = logging.LogRecord('app.net', logging.WARNING, 'net.py', 42, 'conn %s failed: %s', (7, 'timeout'), None)
    >>> captured = from_log_record(live)
    >>> captured.level.name, captured.message, captured.module_path, captured.file, captured.line
    ('WARNING', 'conn 7 failed: timeout', 'net', 'net.py', 42)
    """

    if isinstance(record, logging.LogRecord):
        return capture(LogRecordView(record))
    return capture(record)


def into_log_record(
    record: SerializableLogRecord,
    consume: Callable[[logging.LogRecord], T],
    *,
    builder: EventBuilderPort[logging.LogRecord] | None = None,
) -> T:
    """Re-hydrate ``record`` and return ``consume(log_record)``.

    The :class:`logging.LogRecord` handed to ``consume`` is only valid during
    the call; format or forward it there.

    Examples
    --------
    >>> stored = SerializableLogRecord.from_dict({'level': 'error', 'target': 'db', 'message': '50% full'})
    >>> into_log_record(stored, lambda live: (live.levelno, live.name, live.getMessage()))
    (40, 'db', '50% full')
    """

    return rehydrate(record, builder or LogRecordBuilder(), consume)


@contextmanager
def rehydrated(
    record: SerializableLogRecord,
    *,
    builder: EventBuilderPort[logging.LogRecord] | None = None,
) -> Iterator[logging.LogRecord]:
    """Context-manager form of :func:`into_log_record`.

    Examples
    --------
    >>> stored = SerializableLogRecord.from_dict({'level': 'info', 'target': 'app', 'message': 'ready'})
    >>> with rehydrated(stored) as live:
    ...     live.getMessage()
    'ready'
    """

    with _rehydrated(record, builder or LogRecordBuilder()) as event:
        yield event


def emit(
    record: SerializableLogRecord,
    sink: EventSinkPort[logging.LogRecord],
    *,
    builder: EventBuilderPort[logging.LogRecord] | None = None,
) -> None:
    """Re-hydrate ``record`` and pass it to ``sink.handle``.

    ``sink`` is typically a :class:`logging.Logger` (which applies its filters
    and then calls handlers whose level admits the record) or a
    :class:`logging.Handler`. A logger's own level is not consulted here.
    Handlers that defer formatting to another thread must not be used here.
    """

    dispatch(record, builder or LogRecordBuilder(), sink)


def _resolve_codec(codec: str | RecordCodecPort | None) -> RecordCodecPort:
    if codec is None:
        return get_codec(default_codec())
    if isinstance(codec, str):
        return get_codec(codec)
    return codec


def encode(record: SerializableLogRecord, codec: str | RecordCodecPort | None = None) -> bytes:
    """Encode ``record`` with ``codec`` (name, instance, or configured default)."""

    return _resolve_codec(codec).encode(record)


def decode(data: bytes, codec: str | RecordCodecPort | None = None) -> SerializableLogRecord:
    """Decode ``data`` with ``codec`` (name, instance, or configured default)."""

    return _resolve_codec(codec).decode(data)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "decode",
    "emit",
    "encode",
    "from_log_record",
    "into_log_record",
    "rehydrated",
    "summary_info",
]
