"""Byte-buffer helpers operating on bytes-like objects."""

from __future__ import annotations

# Largest total allocation size accepted by ``calloc``.
_CALLOC_LIMIT = 4295032592


def _check_count(count: int, *lengths: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for length in lengths:
        if count > length:
            raise IndexError("count exceeds buffer length")


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero, in place."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when the requested total is too large.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size > _CALLOC_LIMIT // count:
        raise MemoryError("allocation too large")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``count`` bytes."""
    _check_count(count, len(data))
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first mismatch, or 0."""
    _check_count(count, len(first), len(second))
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    _check_count(count, len(dest), len(src))
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Move ``count`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly. Returns ``buffer``.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value``; return ``buffer``."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer