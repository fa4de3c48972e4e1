"""Owned, serialisable representation of a single log record.

Purpose
-------
Hold everything worth keeping from a live :class:`logging.LogRecord` once its
formatting payload has been rendered, without any reference back to the
caller that produced it.

Contents
--------
* :class:`SerializableLogRecord` dataclass with mapping helpers.

System Role
-----------
Sits in the domain layer. Capture creates it, codec adapters read it and
re-hydration turns it back into a scoped live record. It is never mutated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping

from .levels import LogLevel

logger = logging.getLogger(__name__)

FIELD_NAMES = ("level", "target", "message", "module_path", "file", "line")
#: Field order used by :meth:`SerializableLogRecord.to_dict` and every codec.


@dataclass(slots=True, frozen=True)
class SerializableLogRecord:
    """Immutable snapshot of a log record with its message already rendered.

    Attributes
    ----------
    level:
        :class:`LogLevel` severity of the record.
    target:
        Logical origin of the record (the logger name for stdlib records).
    message:
        Fully rendered message text; never a template.
    module_path:
        Originating module, if the producer supplied one.
    file:
        Originating source file, if the producer supplied one.
    line:
        Originating source line, if the producer supplied one.

    Examples
    --------
    >>> record = SerializableLogRecord(LogLevel.INFO, 'app', 'ready')
    >>> record.module_path is None and record.line is None
    True
    >>> record.to_dict()['level']
    'info'
    """

    level: LogLevel
    target: str
    message: str
    module_path: str | None = None
    file: str | None = None
    line: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.level, str):
            object.__setattr__(self, "level", LogLevel.from_name(self.level))
        elif isinstance(self.level, int) and not isinstance(self.level, bool):
            object.__setattr__(self, "level", LogLevel.from_numeric(self.level))
        elif not isinstance(self.level, LogLevel):
            raise ValueError(f"level must be a LogLevel, name or number, got {self.level!r}")
        if self.line is not None and (isinstance(self.line, bool) or not isinstance(self.line, int) or self.line < 0):
            raise ValueError(f"line must be a non-negative integer or None, got {self.line!r}")

    def to_dict(self) -> dict[str, Any]:
        """Return the six fields in declaration order; absent optionals stay ``None``."""

        return {
            "level": self.level.severity,
            "target": self.target,
            "message": self.message,
            "module_path": self.module_path,
            "file": self.file,
            "line": self.line,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SerializableLogRecord":
        """Reconstruct a record from :meth:`to_dict` output.

        Required keys that are missing raise :class:`KeyError`; a payload that
        is not a mapping raises :class:`TypeError`. Unknown level names decode
        as ``WARNING``.

        Examples
        --------
        >>> SerializableLogRecord.from_dict([1, 2])
        Traceback (most recent call last):
        ...
        TypeError: serialised record must be a mapping, got list
        """

        if not isinstance(payload, Mapping):
            raise TypeError(f"serialised record must be a mapping, got {type(payload).__name__}")
        raw_level = str(payload["level"])
        level = LogLevel.parse(raw_level)
        if level is LogLevel.WARNING and raw_level.strip().upper() not in {"WARNING", "WARN"}:
            logger.warning("Unknown level %r in serialised record; using WARNING", raw_level)
        return cls(
            level=level,
            target=payload["target"],
            message=payload["message"],
            module_path=payload.get("module_path"),
            file=payload.get("file"),
            line=payload.get("line"),
        )

    def replace(self, **changes: Any) -> "SerializableLogRecord":
        """Return a copied record with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["FIELD_NAMES", "SerializableLogRecord"]
