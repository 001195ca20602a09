"""Byte-buffer helpers working on bytes-like objects.

Functions that write operate in place on a ``bytearray`` (or writable
memoryview) and return it. A count larger than the buffer raises
``IndexError`` instead of running past the end.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

UINT_MAX = 0xFFFFFFFF


def _check(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"negative byte count: {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer of length {len(buf)}")


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` truncated to a byte."""
    _check(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"negative byte count: {n}")
    if max(dest, src) + n > len(buf):
        raise IndexError("move runs past the end of the buffer")
    if dest != src and n:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: Buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check(n, data)
    target = value & 0xFF
    for index, byte in enumerate(bytes(data[:n])):
        if byte == target:
            return index
    return None


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first pair that differs, or 0.
    """
    _check(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the product would exceed an unsigned 32-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > UINT_MAX // size:
        raise MemoryError(f"allocation of {count} x {size} bytes overflows")
    return bytearray(count * size)