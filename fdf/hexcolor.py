"""Recognising and converting the hexadecimal colour tokens of a map file."""

from __future__ import annotations

from fdf.charclass import to_lower

_BASE = "0123456789abcdef"


def is_hex(text: str) -> bool:
    """Return True for a colour token such as ``0xFF0000``.

    The token must be longer than two characters and start with ``0``;
    everything after the second character must be a hexadecimal digit.
    The second character itself is not checked.
    """
    if len(text) <= 2 or text[0] != "0":
        return False
    return all(to_lower(ch) in _BASE for ch in text[2:])


def hex_to_dec(text: str) -> int:
    """Convert a hexadecimal string to a signed 32-bit integer.

    Characters that are not hexadecimal digits count as -1, so a ``0x``
    prefix sets the bits above the digits; the low bits still hold the
    digits' value. Arithmetic wraps at 32 bits.
    """
    value = 0
    for ch in text:
        digit = _BASE.find(to_lower(ch))
        value = (value * 16 + digit) & 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value