"""JSON codec backed by the standard library.

Encodes the six record fields as a compact JSON object in declaration order.
Non-ASCII text is written as ``\\u`` escapes, so every string, including lone
surrogates from ``surrogateescape``-decoded paths, survives the round-trip and
the output is always valid UTF-8. Decoding errors
(:class:`json.JSONDecodeError`, :class:`UnicodeDecodeError`, missing keys)
propagate unchanged.
"""

from __future__ import annotations

import json

from serializable_log_record.application.ports.codec import RecordCodecPort
from serializable_log_record.domain.record import SerializableLogRecord


class JsonCodec(RecordCodecPort):
    """Encode records as ASCII-safe JSON objects.

    Examples
    --------
    >>> from serializable_log_record.domain.levels import LogLevel
    >>> codec = JsonCodec()
    >>> codec.encode(SerializableLogRecord(LogLevel.INFO, 'app', 'ready'))
    b'{"level":"info","target":"app","message":"ready","module_path":null,"file":null,"line":null}'
    """

    name = "json"
    binary = False

    def encode(self, record: SerializableLogRecord) -> bytes:
        return json.dumps(record.to_dict(), separators=(",", ":")).encode("ascii")

    def decode(self, data: bytes | str) -> SerializableLogRecord:
        return SerializableLogRecord.from_dict(json.loads(data))


__all__ = ["JsonCodec"]
