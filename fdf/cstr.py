"""Terminated-string operations on Python strings.

A string ends at its first NUL character, if it has one. Functions that
search return an index, or None where nothing is found. Copy and append
return the new string together with the length they tried to build.
"""

from __future__ import annotations

from typing import Optional, Tuple

NUL = "\0"


def _text(s: str) -> str:
    end = s.find(NUL)
    return s if end < 0 else s[:end]


def _char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: Optional[str]) -> int:
    """Return the length of ``s`` up to its terminator; None counts as 0."""
    if s is None:
        return 0
    return len(_text(s))


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return _text(s)


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    Searching for the terminator finds the position just past the text.
    """
    text = _text(s)
    if _char(c) == NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``.

    Searching for the terminator finds the position just past the text.
    """
    text = _text(s)
    if _char(c) == NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the first differing character codes, the
    terminator counting as 0, or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError(f"negative length: {n}")
    first, second = _text(a), _text(b)
    for i in range(n):
        ca = ord(first[i]) if i < len(first) else 0
        cb = ord(second[i]) if i < len(second) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``n`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    if n < 0:
        raise ValueError(f"negative length: {n}")
    hay, pin = _text(haystack), _text(needle)
    if not pin:
        return 0
    index = hay[:n].find(pin)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``. A size of 0
    copies nothing.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    text = _text(src)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the whole result would have
    had. When ``dest`` already fills the buffer it is left unchanged and
    the length reported is ``size`` plus the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    head, tail = _text(dest), _text(src)
    if len(head) >= size:
        return head, size + len(tail)
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)