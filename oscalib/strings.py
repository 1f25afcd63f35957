"""Byte-string primitives working on NUL-terminated buffers."""

from __future__ import annotations

from typing import Union

__all__ = ["strlen", "wcslen", "memcpy", "memset", "memcmp"]

Buffer = Union[bytes, bytearray, memoryview, str]


def _terminated_length(buf: Buffer | None) -> int:
    if buf is None:
        return 0
    if isinstance(buf, str):
        end = buf.find("\0")
    else:
        end = bytes(buf).find(b"\0")
    return len(buf) if end < 0 else end


def strlen(buf: Buffer | None) -> int:
    """Number of characters before the first NUL, or the whole length if there is none."""
    return _terminated_length(buf)


def wcslen(buf: Buffer | None) -> int:
    """Number of character units before the first NUL."""
    return _terminated_length(buf)


def _check_count(count: int, *buffers: Buffer) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buf in buffers:
        if count > len(buf):
            raise ValueError(f"count {count} exceeds buffer length {len(buf)}")


def memcpy(dest: bytearray | None, src: Buffer | None, count: int) -> bytearray | None:
    """Copy ``count`` bytes of ``src`` into the start of ``dest``.

    Returns ``dest``, or None when either buffer is missing or ``count`` is zero.
    """
    if dest is None or src is None or not count:
        return None
    _check_count(count, dest, src)
    data = src.encode("latin-1") if isinstance(src, str) else bytes(src)
    dest[:count] = data[:count]
    return dest


def memset(dest: bytearray | None, value: int, count: int) -> bytearray | None:
    """Fill the first ``count`` bytes of ``dest`` with the low byte of ``value``.

    Returns ``dest``, or None when ``dest`` is missing or ``count`` is zero.
    """
    if dest is None or not count:
        return None
    _check_count(count, dest)
    dest[:count] = bytes([value & 0xFF]) * count
    return dest


def _signed_char(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value >= 0x80 else value


def memcmp(a: Buffer | None, b: Buffer | None, count: int) -> int:
    """Compare ``count`` bytes as signed chars.

    Returns 0 when equal, otherwise the difference of the first differing pair
    wrapped to a signed char. A missing buffer compares below a present one.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    _check_count(count, a, b)
    left = a.encode("latin-1") if isinstance(a, str) else bytes(a)
    right = b.encode("latin-1") if isinstance(b, str) else bytes(b)
    for x, y in zip(left[:count], right[:count]):
        if x != y:
            return _signed_char(_signed_char(x) - _signed_char(y))
    return 0