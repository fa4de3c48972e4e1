"""Compact binary codec backed by :mod:`msgpack` (``msgpack`` extra).

A record is packed as a six-element array in :data:`FIELD_NAMES` order, with
absent optionals as ``nil``. Field names are not repeated on the wire, so both
sides must agree on the field order. Strings are packed with the
``surrogatepass`` error handler so lone surrogates round-trip like they do in
:class:`JsonCodec`.
"""

from __future__ import annotations

from serializable_log_record.application.ports.codec import RecordCodecPort
from serializable_log_record.domain.record import FIELD_NAMES, SerializableLogRecord

try:  # pragma: no cover - optional dependency
    import msgpack
except ImportError:  # pragma: no cover - optional dependency
    msgpack = None  # type: ignore[assignment]

_UNICODE_ERRORS = "surrogatepass"


def is_available() -> bool:
    """Return ``True`` when the ``msgpack`` backend can be imported."""

    return msgpack is not None


class MsgpackCodec(RecordCodecPort):
    """Encode records as positional msgpack arrays.

    Decoding a payload that is not a six-element array raises
    :class:`ValueError`; errors raised by :func:`msgpack.unpackb` propagate
    unchanged.
    """

    name = "msgpack"
    binary = True

    def __init__(self) -> None:
        if msgpack is None:
            raise RuntimeError("msgpack is not installed; install serializable_log_record[msgpack]")

    def encode(self, record: SerializableLogRecord) -> bytes:
        fields = record.to_dict()
        return msgpack.packb([fields[name] for name in FIELD_NAMES], use_bin_type=True, unicode_errors=_UNICODE_ERRORS)

    def decode(self, data: bytes) -> SerializableLogRecord:
        items = msgpack.unpackb(data, raw=False, unicode_errors=_UNICODE_ERRORS)
        if not isinstance(items, list) or len(items) != len(FIELD_NAMES):
            raise ValueError(f"expected an array of {len(FIELD_NAMES)} record fields, got {items!r}")
        return SerializableLogRecord.from_dict(dict(zip(FIELD_NAMES, items)))


__all__ = ["MsgpackCodec", "is_available"]
