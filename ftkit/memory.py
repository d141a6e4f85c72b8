"""Byte-buffer operations with C-library semantics.

Buffers that are written to are ``bytearray`` objects and are changed in
place. Read-only arguments may be any bytes-like object. Values written
or searched for are reduced to one byte, as an ``unsigned char`` would be.
"""

from __future__ import annotations

import sys

_BYTE_MASK = 0xFF


def _require_length(data: bytes | bytearray | memoryview, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, fewer than the {n} requested")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first *length* bytes of *buf* with ``value & 0xFF``; return *buf*."""
    _require_length(buf, length, "buf")
    buf[:length] = bytes([value & _BYTE_MASK]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Set the first *length* bytes of *buf* to zero."""
    memset(buf, 0, length)


def memcpy(dst: bytearray, src: bytes | bytearray | memoryview, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* to the start of *dst*; return *dst*."""
    _require_length(src, n, "src")
    _require_length(dst, n, "dst")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move *n* bytes inside *buf* from offset *src* to offset *dest*.

    The two regions may overlap; the result is as if the source bytes were
    first copied aside. Returns *buf*.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if max(dest, src) + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf


def memchr(data: bytes | bytearray | memoryview, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value & 0xFF`` among the first *n*."""
    _require_length(data, n, "data")
    pos = bytes(data[:n]).find(value & _BYTE_MASK)
    return None if pos < 0 else pos


def memcmp(
    a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns 0 when they agree, otherwise the difference of the first pair
    of bytes that differ.
    """
    _require_length(a, n, "a")
    _require_length(b, n, "b")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total is larger than the platform
    can address.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > sys.maxsize:
        raise OverflowError(f"{count} * {size} bytes is too large to allocate")
    return bytearray(total)