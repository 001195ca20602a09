"""Building new strings from existing ones: slicing, joining, trimming, splitting."""

from __future__ import annotations

from typing import Callable, List


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {value!r}")
    return value


def _require_char(sep: str) -> str:
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return sep


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end of ``s`` gives an empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return _require_str(a, "a") + _require_str(b, "b")


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between repeated separators."""
    _require_str(s, "s")
    return [word for word in s.split(_require_char(sep)) if word]


def word_count(s: str, sep: str) -> int:
    """Count the non-empty runs of characters in ``s`` between ``sep`` characters."""
    return len(split(s, sep))


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character of ``s``."""
    _require_str(s, "s")
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(s: str, func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for each character of ``s`` in order."""
    _require_str(s, "s")
    for index, char in enumerate(s):
        func(index, char)