"""Protocols the application layer depends on."""

from __future__ import annotations

from .codec import RecordCodecPort
from .events import EventBuilderPort, EventSinkPort, LiveEventPort

__all__ = [
    "EventBuilderPort",
    "EventSinkPort",
    "LiveEventPort",
    "RecordCodecPort",
]
