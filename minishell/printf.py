"""A small formatter supporting the conversions ``c s p d i u x X %``."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

CONVERSIONS = "cspdiuxX%"

_INT_BITS = 32
_LONG_BITS = 64


def _to_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _to_unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def _as_int(value: Any) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("expected an integer or a single character")
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_as_int(value) & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = _to_unsigned(value, _LONG_BITS)
    else:
        address = id(value)
    if address == 0:
        return "0x0"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec == "p":
        return _format_pointer(value)
    if spec in "di":
        return str(_to_signed(_as_int(value), _INT_BITS))
    number = _to_unsigned(_as_int(value), _INT_BITS)
    if spec == "u":
        return str(number)
    if spec == "x":
        return f"{number:x}"
    return f"{number:X}"


def format_printf(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text.

    A ``%`` followed by an unknown character, or at the very end, is dropped
    while the following character is kept as ordinary text.
    """
    values = iter(args)
    parts: list[str] = []
    position = 0
    length = len(template)
    while position < length:
        char = template[position]
        if char != "%":
            parts.append(char)
            position += 1
            continue
        following = template[position + 1] if position + 1 < length else ""
        if following and following in CONVERSIONS:
            parts.append(_convert(following, values))
            position += 2
        else:
            position += 1
    return "".join(parts)


def printf(template: str, *args: Any) -> int:
    """Write the expanded ``template`` to standard output; return its length."""
    text = format_printf(template, *args)
    sys.stdout.write(text)
    return len(text)