"""Domain value objects: severities and the owned record."""

from __future__ import annotations

from .levels import LogLevel
from .record import FIELD_NAMES, SerializableLogRecord

__all__ = [
    "FIELD_NAMES",
    "LogLevel",
    "SerializableLogRecord",
]
