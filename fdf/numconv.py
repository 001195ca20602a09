"""Conversions between decimal text and integers."""

from __future__ import annotations

_SPACES = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit, and text without digits gives 0. The result wraps to
    a signed 32-bit integer. When the digits overflow a signed 64-bit
    integer the result is -1 for a positive number and 0 for a negative one.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + ord(text[pos]) - ord("0")
        if value > _LONG_MAX:
            return -1 if sign > 0 else 0
        pos += 1
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    return str(n)