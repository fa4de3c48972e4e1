"""Use case rebuilding a scoped live event from an owned record.

Purpose
-------
Turn a :class:`SerializableLogRecord` back into something a logging sink can
consume. The rendered message is wrapped in a fresh formatting payload, a
single ``%s`` template with one argument, so rendering the rebuilt event
reproduces the stored text verbatim.

Contents
--------
* :data:`VERBATIM_TEMPLATE` - the single-placeholder template.
* :class:`ScopedMessage` - payload argument that only renders inside its scope.
* :class:`ScopeExpiredError` - raised when a rebuilt event outlives its scope.
* :func:`rehydrated` - context manager yielding the rebuilt event.
* :func:`rehydrate` - scoped-callback form returning the callback's result.
* :func:`dispatch` - hand the rebuilt event straight to a sink.

System Role
-----------
Reverse half of the conversion layer. The original template and arguments were
resolved and discarded during capture, so only the rendered output comes back.

Scope rule
----------
The event produced here is valid only while the ``with`` block (or the
callback) runs. Pass it to a sink inside that scope; do not return it, store it,
or queue it for later formatting. Rendering it afterwards raises
:class:`ScopeExpiredError`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from serializable_log_record.application.ports.events import EventBuilderPort, EventSinkPort
from serializable_log_record.domain.record import SerializableLogRecord

E = TypeVar("E")
T = TypeVar("T")

VERBATIM_TEMPLATE = "%s"


class ScopeExpiredError(RuntimeError):
    """A re-hydrated event was rendered after its scope had ended."""


class ScopedMessage:
    """Formatting argument that renders the stored text only while alive.

    Examples
    --------
    >>> payload = ScopedMessage('100% done')
    >>> VERBATIM_TEMPLATE % (payload,)
    '100% done'
    >>> payload.expire()
    >>> str(payload)  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    ScopeExpiredError: re-hydrated log message rendered outside its scope
    """

    __slots__ = ("_text", "_alive")

    def __init__(self, text: str) -> None:
        self._text = text
        self._alive = True

    @property
    def alive(self) -> bool:
        return self._alive

    def expire(self) -> None:
        """Close the scope; later rendering raises :class:`ScopeExpiredError`."""
        self._alive = False

    def __str__(self) -> str:
        if not self._alive:
            raise ScopeExpiredError("re-hydrated log message rendered outside its scope")
        return self._text

    def __repr__(self) -> str:
        state = "alive" if self._alive else "expired"
        return f"<ScopedMessage {state} len={len(self._text)}>"


@contextmanager
def rehydrated(record: SerializableLogRecord, builder: EventBuilderPort[E]) -> Iterator[E]:
    """Populate ``builder`` from ``record`` and yield the finished event.

    The yielded event must be consumed before the ``with`` block ends.
    Optional fields that are ``None`` on ``record`` are passed through as
    ``None``; nothing is invented.
    """

    payload = ScopedMessage(record.message)
    event = (
        builder.level(record.level)
        .target(record.target)
        .args(VERBATIM_TEMPLATE, payload)
        .module_path(record.module_path)
        .file(record.file)
        .line(record.line)
        .build()
    )
    try:
        yield event
    finally:
        payload.expire()


def rehydrate(
    record: SerializableLogRecord,
    builder: EventBuilderPort[E],
    consume: Callable[[E], T],
) -> T:
    """Rebuild ``record`` with ``builder`` and return ``consume(event)``.

    ``consume`` receives the event while it is valid; its return value must
    not be the event itself or anything that renders it later.
    """

    with rehydrated(record, builder) as event:
        return consume(event)


def dispatch(record: SerializableLogRecord, builder: EventBuilderPort[E], sink: EventSinkPort[E]) -> None:
    """Rebuild ``record`` and pass the event to ``sink.handle`` within scope.

    Whatever ``sink.handle`` returns is discarded; stdlib handlers may hand
    the record itself back, which must not escape the scope.
    """

    with rehydrated(record, builder) as event:
        sink.handle(event)


__all__ = [
    "ScopeExpiredError",
    "ScopedMessage",
    "VERBATIM_TEMPLATE",
    "dispatch",
    "rehydrate",
    "rehydrated",
]
