"""JSON codec backed by :mod:`orjson` (``orjson`` extra).

Produces the same document shape as :class:`JsonCodec`, written as UTF-8.
``orjson`` only accepts valid UTF-8, so a record holding lone surrogates raises
:class:`orjson.JSONEncodeError`; use ``json`` or ``msgpack`` for such records.
``orjson`` errors, such as :class:`orjson.JSONDecodeError`, propagate unchanged.
"""

from __future__ import annotations

from serializable_log_record.application.ports.codec import RecordCodecPort
from serializable_log_record.domain.record import SerializableLogRecord

try:  # pragma: no cover - optional dependency
    import orjson
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]


def is_available() -> bool:
    """Return ``True`` when the ``orjson`` backend can be imported."""

    return orjson is not None


class OrjsonCodec(RecordCodecPort):
    """Encode records with :func:`orjson.dumps`."""

    name = "orjson"
    binary = False

    def __init__(self) -> None:
        if orjson is None:
            raise RuntimeError("orjson is not installed; install serializable_log_record[orjson]")

    def encode(self, record: SerializableLogRecord) -> bytes:
        return orjson.dumps(record.to_dict())

    def decode(self, data: bytes | str) -> SerializableLogRecord:
        return SerializableLogRecord.from_dict(orjson.loads(data))


__all__ = ["OrjsonCodec", "is_available"]
