"""Ports describing live events, event builders, and sinks.

Purpose
-------
Keep capture and re-hydration independent of any concrete logging frontend.
The stdlib :mod:`logging` adapter is one implementation; tests supply fakes.

Contents
--------
* :class:`LiveEventPort` - read access to a call-scoped event.
* :class:`EventBuilderPort` - fluent accumulator that finalises into an event.
* :class:`EventSinkPort` - single ``handle`` operation consuming an event.

System Role
-----------
Inbound and outbound boundaries of the application layer. ``logging.Logger``
and ``logging.Handler`` already satisfy :class:`EventSinkPort`.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from serializable_log_record.domain.levels import LogLevel

E = TypeVar("E")
E_co = TypeVar("E_co", covariant=True)
E_contra = TypeVar("E_contra", contravariant=True)


@runtime_checkable
class LiveEventPort(Protocol):
    """Event whose formatting payload is only valid during the current call."""

    @property
    def level(self) -> LogLevel: ...

    @property
    def target(self) -> str: ...

    @property
    def module_path(self) -> str | None: ...

    @property
    def file(self) -> str | None: ...

    @property
    def line(self) -> int | None: ...

    def render(self) -> str:
        """Render the formatting payload to text."""


@runtime_checkable
class EventBuilderPort(Protocol[E_co]):
    """Accumulate event fields and finalise them into a usable event.

    Every setter returns the builder so calls can be chained.
    """

    def level(self, level: LogLevel) -> "EventBuilderPort[E_co]": ...

    def target(self, target: str) -> "EventBuilderPort[E_co]": ...

    def args(self, template: str, *arguments: Any) -> "EventBuilderPort[E_co]": ...

    def module_path(self, module_path: str | None) -> "EventBuilderPort[E_co]": ...

    def file(self, file: str | None) -> "EventBuilderPort[E_co]": ...

    def line(self, line: int | None) -> "EventBuilderPort[E_co]": ...

    def build(self) -> E_co:
        """Return the event assembled from the fields set so far."""


@runtime_checkable
class EventSinkPort(Protocol[E_contra]):
    """Consume a finished event."""

    def handle(self, event: E_contra) -> Any:
        """Accept ``event``; the return value is sink specific."""


__all__ = ["E", "EventBuilderPort", "EventSinkPort", "LiveEventPort"]
