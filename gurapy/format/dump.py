"""Serialize Python values into Gura text."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
import math
import re
from typing import Any

INDENT = "    "
KEY_PATTERN = re.compile(r"[0-9A-Za-z_]+")

_STRING_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def dump(data: Mapping[str, Any]) -> str:
    """Render a mapping as a Gura document that parses back to an equal value.

    Raises `ValueError` for keys that are not `[0-9A-Za-z_]+` and `TypeError`
    for values without a Gura representation.
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"Gura documents must be mappings, got {type(data).__name__}")
    lines = list(_dump_object(data, 0))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def dump_scalar(value: Any) -> str:
    """Render a value that fits on a single line (scalars, `{}` and flat lists)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _dump_float(value)
    if isinstance(value, str):
        return _dump_string(value)
    if isinstance(value, Mapping):
        if value:
            raise TypeError("Non-empty objects cannot be rendered inline")
        return "empty"
    if _is_sequence(value):
        if _needs_block(value):
            raise TypeError("Lists holding objects or lists cannot be rendered inline")
        return "[" + ", ".join(dump_scalar(item) for item in value) + "]"
    raise TypeError(f"Object of type {type(value).__name__} is not Gura serializable")


def _dump_object(data: Mapping[str, Any], level: int) -> Iterator[str]:
    prefix = INDENT * level
    for key, value in data.items():
        _check_key(key)
        if isinstance(value, Mapping) and value:
            yield f"{prefix}{key}:"
            yield from _dump_object(value, level + 1)
        elif _is_sequence(value) and _needs_block(value):
            yield f"{prefix}{key}: ["
            yield from _dump_list_items(value, level + 1)
            yield f"{prefix}]"
        else:
            yield f"{prefix}{key}: {dump_scalar(value)}"


def _dump_list_items(items: Sequence[Any], level: int) -> Iterator[str]:
    prefix = INDENT * level
    last_index = len(items) - 1
    for index, item in enumerate(items):
        if isinstance(item, Mapping) and item:
            lines = list(_dump_object(item, level))
        elif _is_sequence(item) and _needs_block(item):
            lines = [f"{prefix}[", *_dump_list_items(item, level + 1), f"{prefix}]"]
        else:
            lines = [f"{prefix}{dump_scalar(item)}"]

        # The separator goes right after the item's last value so an object
        # item is closed by it.
        if index < last_index:
            lines[-1] += ","
        yield from lines


def _dump_float(value: float) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return repr(value)


def _dump_string(value: str) -> str:
    chars: list[str] = []
    for char in value:
        escaped = _STRING_ESCAPES.get(char)
        if escaped is not None:
            chars.append(escaped)
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            chars.append(f"\\u{ord(char):04x}")
        else:
            chars.append(char)
    return '"' + "".join(chars) + '"'


def _check_key(key: object) -> None:
    if not isinstance(key, str) or KEY_PATTERN.fullmatch(key) is None:
        raise ValueError(f"Invalid Gura key {key!r}: keys must match [0-9A-Za-z_]+")


def _is_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _needs_block(items: Sequence[Any]) -> bool:
    return any((isinstance(item, Mapping) or _is_sequence(item)) and item for item in items)
