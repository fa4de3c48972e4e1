"""Serialisable stand-in for :class:`logging.LogRecord`.

A live ``LogRecord`` carries its message as a template plus references to the
caller's arguments, which cannot be stored or sent anywhere safely. Capture
renders the message once and keeps the metadata in an immutable
:class:`SerializableLogRecord`; re-hydration builds a fresh ``LogRecord`` that
reproduces the rendered text and is valid only inside a scoped callback or
``with`` block.

Examples
--------
>>> import logging
>>> live = logging.LogRecord('app', logging.INFO, 'app.py', 3, 'hello %s', ('world',), None)
>>> stored = from_log_record(live)
>>> decode(encode(stored, 'json'), 'json') == stored
True
>>> into_log_record(stored, lambda record: record.getMessage())
'hello world'
"""

from __future__ import annotations

from .adapters.codecs import available_codecs, get_codec
from .adapters.stdlib import CaptureHandler, LogRecordBuilder, LogRecordView
from .application.use_cases.rehydrate import ScopeExpiredError
from .domain import LogLevel, SerializableLogRecord
from .serializable_log_record import (
    decode,
    emit,
    encode,
    from_log_record,
    into_log_record,
    rehydrated,
    summary_info,
)

__all__ = [
    "CaptureHandler",
    "LogLevel",
    "LogRecordBuilder",
    "LogRecordView",
    "ScopeExpiredError",
    "SerializableLogRecord",
    "available_codecs",
    "decode",
    "emit",
    "encode",
    "from_log_record",
    "get_codec",
    "into_log_record",
    "rehydrated",
    "summary_info",
]
