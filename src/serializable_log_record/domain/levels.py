"""Log level abstraction shared by captured and re-hydrated records.

Purpose
-------
Give records a severity that survives serialisation independently of the
numeric levels a host application may have registered with :mod:`logging`.

Contents
--------
* :class:`LogLevel` enum with strict and lenient conversion helpers.
* ``_ALIASES`` constant mapping alternative spellings to canonical names.

System Role
-----------
Used by the domain record for storage, by the stdlib adapter when reading live
records, and by the builder when turning a stored severity back into a
:mod:`logging` constant.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels, ordered by increasing severity."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name used on the wire."""

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Return the level for a case-insensitive name.

        Examples
        --------
        >>> LogLevel.from_name(' warn ') is LogLevel.WARNING
        True
        >>> LogLevel.from_name('verbose')
        Traceback (most recent call last):
        ...
        ValueError: Unknown log level: 'verbose'
        """
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def parse(cls, name: str, default: "LogLevel | None" = None) -> "LogLevel":
        """Return the level for ``name`` or ``default`` (``WARNING``) when unknown.

        Examples
        --------
        >>> LogLevel.parse('trace') is LogLevel.WARNING
        True
        >>> LogLevel.parse('info') is LogLevel.INFO
        True
        """
        try:
            return cls.from_name(name)
        except ValueError:
            return default if default is not None else cls.WARNING

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` corresponding to ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def nearest(cls, level: int) -> "LogLevel":
        """Return the highest standard level not above ``level``.

        Custom numeric levels registered via :func:`logging.addLevelName`
        collapse onto the standard level below them; anything under ``DEBUG``
        is treated as ``DEBUG``.

        Examples
        --------
        >>> LogLevel.nearest(25) is LogLevel.INFO
        True
        >>> LogLevel.nearest(5) is LogLevel.DEBUG
        True
        >>> LogLevel.nearest(99) is LogLevel.CRITICAL
        True
        """
        chosen = cls.DEBUG
        for member in cls:
            if member.value <= level:
                chosen = member
        return chosen


_ALIASES = {
    "WARN": "WARNING",
    "FATAL": "CRITICAL",
}
# Alternative spellings accepted by ``from_name``; stdlib knows both.


__all__ = ["LogLevel"]
