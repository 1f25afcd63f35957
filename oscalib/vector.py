"""A growable byte buffer that records the sizes of its end elements."""

from __future__ import annotations

from typing import Union

__all__ = ["ByteVector"]

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(value: BytesLike) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a bytes-like value, got {type(value).__name__}")
    return bytes(value)


class ByteVector:
    """Bytes pushed and popped at either end.

    Only the size of the most recent element at each end is remembered, so one
    pop is possible at each end after a push there. Capacity doubles when a
    push would fill the buffer.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._data: bytearray | None = bytearray()
        self.capacity = capacity
        self.back_size = 0
        self.front_size = 0

    @property
    def data(self) -> bytes:
        """The stored bytes."""
        return bytes(self._data) if self._data is not None else b""

    def __len__(self) -> int:
        return len(self._data) if self._data is not None else 0

    def _needs_growth(self, n: int) -> bool:
        size = len(self)
        return size == self.capacity or size + n >= self.capacity

    def _grow(self, n: int) -> None:
        self.capacity <<= 1
        while len(self) + n > self.capacity:
            self.capacity <<= 1

    def _usable(self) -> bool:
        return self._data is not None and self.capacity > 0

    def push_back(self, value: BytesLike) -> None:
        """Append ``value``; an empty value or a destroyed vector is left unchanged."""
        chunk = _as_bytes(value)
        if not self._usable() or not chunk:
            return
        assert self._data is not None
        if self._needs_growth(len(chunk)):
            self._grow(len(chunk))
            self._data.extend(chunk)
            self.back_size = len(chunk)
            return
        if not self._data:
            self.front_size = len(chunk)
        self._data.extend(chunk)
        self.back_size = len(chunk)

    def push_front(self, value: BytesLike) -> None:
        """Prepend ``value``; an empty value or a destroyed vector is left unchanged."""
        chunk = _as_bytes(value)
        if not self._usable() or not chunk:
            return
        assert self._data is not None
        if self._needs_growth(len(chunk)):
            self._grow(len(chunk))
            self._data[:0] = chunk
            self.front_size = len(chunk)
            return
        if not self._data:
            self.back_size = len(chunk)
        self._data[:0] = chunk
        self.front_size = len(chunk)

    def pop_back(self) -> bytes | None:
        """Remove and return the last pushed-back element, or None if unknown."""
        if not self._usable() or not len(self) or not self.back_size:
            return None
        assert self._data is not None
        cut = max(len(self._data) - self.back_size, 0)
        output = bytes(self._data[cut:])
        del self._data[cut:]
        self.back_size = 0
        return output

    def pop_front(self) -> bytes | None:
        """Remove and return the last pushed-front element, or None if unknown."""
        if not self._usable() or not len(self) or not self.front_size:
            return None
        assert self._data is not None
        output = bytes(self._data[: self.front_size])
        del self._data[: self.front_size]
        self.front_size = 0
        return output

    def find(self, value: BytesLike) -> int | None:
        """Byte offset of the first occurrence of ``value``, or None."""
        needle = _as_bytes(value)
        if not self._usable() or not len(self) or not needle:
            return None
        assert self._data is not None
        offset = self._data.find(needle)
        return offset if offset >= 0 else None

    def destroy(self) -> None:
        """Release the storage; the vector holds nothing afterwards."""
        self._data = None
        self.back_size = 0
        self.front_size = 0
        self.capacity = 0