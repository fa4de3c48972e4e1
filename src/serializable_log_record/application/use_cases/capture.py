"""Use case turning a live, call-scoped event into an owned record.

Purpose
-------
Render the formatting payload of a live event while it is still valid and copy
its metadata, producing a :class:`SerializableLogRecord` that can be stored,
shared across threads, or encoded.

System Role
-----------
Forward half of the conversion layer. Depends only on
:class:`LiveEventPort`; the stdlib adapter wraps :class:`logging.LogRecord`.

Notes
-----
Rendering happens exactly once, synchronously, inside this call. Format
specifiers are resolved here and only the rendered text survives; the original
template and arguments are not recoverable afterwards.
"""

from __future__ import annotations

import logging

from serializable_log_record.application.ports.events import LiveEventPort
from serializable_log_record.domain.record import SerializableLogRecord

logger = logging.getLogger(__name__)

_OWN_NAMESPACE = __name__.split(".", 1)[0]


def capture(event: LiveEventPort) -> SerializableLogRecord:
    """Return an owned record holding ``event``'s metadata and rendered message.

    Errors raised by ``event.render()`` propagate unchanged.

    Examples
    --------
    >>> from serializable_log_record.domain.levels import LogLevel
    >>> class Event:
    ...     level = LogLevel.WARNING
    ...     target = 'app.net'
    ...     module_path = 'net'
    ...     file = 'net.py'
    ...     line = 42
    ...     def render(self):
    ...         return 'conn %s failed: %s' % (7, 'timeout')
    >>> capture(Event()).message
    'conn 7 failed: timeout'
    """

    message = event.render()
    record = SerializableLogRecord(
        level=event.level,
        target=event.target,
        message=message,
        module_path=event.module_path,
        file=event.file,
        line=event.line,
    )
    if logger.isEnabledFor(logging.DEBUG) and not _is_own_target(record.target):
        logger.debug("captured %s record from %r (%d chars)", record.level.severity, record.target, len(message))
    return record


def _is_own_target(target: str) -> bool:
    # Records emitted by this package must not trigger further diagnostics.
    return target == _OWN_NAMESPACE or target.startswith(_OWN_NAMESPACE + ".")


__all__ = ["capture"]
