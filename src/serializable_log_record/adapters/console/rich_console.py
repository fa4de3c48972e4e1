"""Rich-powered sink printing re-hydrated stdlib records.

Purpose
-------
Give the CLI ``replay`` command a human-facing destination for re-hydrated
records without configuring the host's :mod:`logging` tree.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleSink` - :class:`EventSinkPort` over ``LogRecord``.

System Role
-----------
Outbound adapter. It renders each record immediately inside ``handle``, so it
is safe to use with the scoped records produced by re-hydration.
"""

from __future__ import annotations

import logging
from typing import Mapping, MutableMapping

from rich.console import Console
from rich.text import Text

from serializable_log_record.adapters.stdlib import LogRecordView
from serializable_log_record.application.ports.events import EventSinkPort
from serializable_log_record.domain.levels import LogLevel


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


class RichConsoleSink(EventSinkPort[logging.LogRecord]):
    """Print log records using Rich with per-level styles."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure the sink with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=True if force_color else None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    def handle(self, event: logging.LogRecord) -> None:
        """Print ``event`` on a single line.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=200)
        >>> sink = RichConsoleSink(console=console)
        >>> sink.handle(logging.makeLogRecord({'name': 'app', 'levelno': 20, 'msg': 'ready'}))
        >>> console.export_text().strip()
        'INFO     app ready'
        """
        level = LogRecordView(event).level
        style = "" if self._no_color else self._style_map.get(level, "")
        self._console.print(Text(self._format_line(event, level), style=style), highlight=False)

    @staticmethod
    def _format_line(event: logging.LogRecord, level: LogLevel) -> str:
        """Return ``LEVEL target message`` plus the location when known.

        Examples
        --------
        >>> record = logging.makeLogRecord({'name': 'app', 'levelno': 40, 'msg': 'boom', 'pathname': 'app.py', 'lineno': 3})
        >>> RichConsoleSink._format_line(record, LogLevel.ERROR)
        'ERROR    app boom (app.py:3)'
        """
        line = f"{level.name:<8} {event.name} {event.getMessage()}"
        view = LogRecordView(event)
        if view.file is not None:
            location = view.file if view.line is None else f"{view.file}:{view.line}"
            line = f"{line} ({location})"
        return line


__all__ = ["RichConsoleSink"]
