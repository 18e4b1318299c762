"""JSON codec helpers for log export paths."""

from __future__ import annotations

from typing import Any

import orjson


def _default(value: Any) -> str:
    # Types, handlers and receivers end up in log extras.
    if isinstance(value, type):
        return value.__qualname__
    return repr(value)


def dumps_bytes(payload: Any, *, pretty: bool = False, sort_keys: bool = False) -> bytes:
    """Serialize payload to UTF-8 JSON bytes."""
    options = 0
    if pretty:
        options |= orjson.OPT_INDENT_2
    if sort_keys:
        options |= orjson.OPT_SORT_KEYS
    return orjson.dumps(payload, default=_default, option=options | orjson.OPT_SERIALIZE_NUMPY)


def dumps_text(payload: Any, *, pretty: bool = False, sort_keys: bool = False) -> str:
    return dumps_bytes(payload, pretty=pretty, sort_keys=sort_keys).decode("utf-8")


__all__ = ["dumps_bytes", "dumps_text"]
