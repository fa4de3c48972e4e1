"""Application use cases: capture and re-hydration."""

from __future__ import annotations

from .capture import capture
from .rehydrate import (
    VERBATIM_TEMPLATE,
    ScopedMessage,
    ScopeExpiredError,
    dispatch,
    rehydrate,
    rehydrated,
)

__all__ = [
    "ScopeExpiredError",
    "ScopedMessage",
    "VERBATIM_TEMPLATE",
    "capture",
    "dispatch",
    "rehydrate",
    "rehydrated",
]
