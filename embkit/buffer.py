"""A fixed-capacity circular byte buffer."""

from __future__ import annotations

from collections.abc import Iterator


class BufferFullError(Exception):
    """Raised when writing to a buffer that has no free slot."""


class BufferEmptyError(Exception):
    """Raised when reading from a buffer that holds no data."""


class CircularBuffer:
    """Ring buffer of unsigned bytes with head and tail positions."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._storage = bytearray(capacity)
        self._capacity = capacity
        self._head = 0
        self._tail = 0
        self._empty = True
        self._full = False

    @property
    def capacity(self) -> int:
        """Number of bytes the buffer can hold."""
        return self._capacity

    @property
    def head(self) -> int:
        """Index of the next slot to be written."""
        return self._head

    @property
    def tail(self) -> int:
        """Index of the next slot to be read."""
        return self._tail

    def write(self, data: int) -> None:
        """Store one byte; raise BufferFullError if there is no room."""
        if not 0 <= data <= 0xFF:
            raise ValueError(f"byte value out of range: {data}")
        if self._full:
            raise BufferFullError("buffer is full, no data written")
        self._storage[self._head] = data
        self._empty = False
        self._head = (self._head + 1) % self._capacity
        if self._head == self._tail:
            self._full = True

    def read(self) -> int:
        """Remove and return the oldest byte; raise BufferEmptyError if none."""
        if self._empty:
            raise BufferEmptyError("buffer is empty, no data to read")
        data = self._storage[self._tail]
        self._tail = (self._tail + 1) % self._capacity
        if self._tail == self._head:
            self._empty = True
        self._full = False
        return data

    def is_empty(self) -> bool:
        """True when there is nothing to read."""
        return self._empty

    def is_full(self) -> bool:
        """True when every slot holds unread data."""
        return self._full

    def drain(self) -> Iterator[int]:
        """Yield bytes in write order until the buffer is empty."""
        while not self._empty:
            yield self.read()