"""Adapter implementations for stdlib logging, codecs, and console output."""

from __future__ import annotations

from .codecs import JsonCodec, MsgpackCodec, OrjsonCodec, available_codecs, get_codec
from .console import RichConsoleSink
from .stdlib import CaptureHandler, LogRecordBuilder, LogRecordView, capture_log_record

__all__ = [
    "CaptureHandler",
    "JsonCodec",
    "LogRecordBuilder",
    "LogRecordView",
    "MsgpackCodec",
    "OrjsonCodec",
    "RichConsoleSink",
    "available_codecs",
    "capture_log_record",
    "get_codec",
]
