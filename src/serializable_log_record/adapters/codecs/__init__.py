"""Codec registry.

Each codec is an optional capability: ``json`` is always present, ``orjson``
and ``msgpack`` only when their extras are installed. :func:`available_codecs`
reports what the current environment offers; :func:`get_codec` resolves a
name.
"""

from __future__ import annotations

from collections.abc import Callable

from serializable_log_record.application.ports.codec import RecordCodecPort

from . import msgpack_codec, orjson_codec
from .json_codec import JsonCodec
from .msgpack_codec import MsgpackCodec
from .orjson_codec import OrjsonCodec

_REGISTRY: dict[str, tuple[Callable[[], RecordCodecPort], Callable[[], bool]]] = {
    JsonCodec.name: (JsonCodec, lambda: True),
    OrjsonCodec.name: (OrjsonCodec, orjson_codec.is_available),
    MsgpackCodec.name: (MsgpackCodec, msgpack_codec.is_available),
}


def available_codecs() -> tuple[str, ...]:
    """Return the names of codecs whose backend is importable.

    Examples
    --------
    >>> 'json' in available_codecs()
    True
    """

    return tuple(name for name, (_, available) in _REGISTRY.items() if available())


def get_codec(name: str) -> RecordCodecPort:
    """Return a codec instance for ``name`` (case-insensitive).

    Raises
    ------
    ValueError
        If ``name`` is not a known codec.
    RuntimeError
        If the codec is known but its backend is not installed.
    """

    key = name.strip().lower()
    try:
        factory, _ = _REGISTRY[key]
    except KeyError as exc:
        raise ValueError(f"Unknown codec: {name!r}") from exc
    return factory()


def is_binary(codec: RecordCodecPort) -> bool:
    """Return ``True`` when ``codec`` output may contain arbitrary bytes, newlines included."""

    return bool(getattr(codec, "binary", False))


__all__ = ["JsonCodec", "MsgpackCodec", "OrjsonCodec", "available_codecs", "get_codec", "is_binary"]
