"""Port describing wire codecs for :class:`SerializableLogRecord`."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from serializable_log_record.domain.record import SerializableLogRecord


@runtime_checkable
class RecordCodecPort(Protocol):
    """Map records to bytes and back, field for field.

    Errors are whatever the underlying codec raises; implementations must not
    wrap or reinterpret them.
    """

    name: str

    def encode(self, record: SerializableLogRecord) -> bytes:
        """Return the encoded form of ``record``."""

    def decode(self, data: bytes) -> SerializableLogRecord:
        """Return the record encoded in ``data``."""


__all__ = ["RecordCodecPort"]
