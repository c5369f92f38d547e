"""A fixed-capacity FIFO queue of arbitrary items."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any


class QueueFullError(Exception):
    """Raised when writing to a queue that has no free slot."""


class QueueEmptyError(Exception):
    """Raised when reading from a queue that holds nothing."""


@dataclass(frozen=True)
class Message:
    """A small message carrying an identifier and a value."""

    msg: int
    value: int


class MessageQueue:
    """Ring-buffer queue that stores copies of the items written to it."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._capacity = capacity
        self._head = 0
        self._tail = 0
        self._empty = True
        self._full = False

    @property
    def capacity(self) -> int:
        """Number of items the queue can hold."""
        return self._capacity

    @property
    def head(self) -> int:
        """Index of the next slot to be written."""
        return self._head

    @property
    def tail(self) -> int:
        """Index of the next slot to be read."""
        return self._tail

    def write(self, item: Any) -> None:
        """Append a copy of item; raise QueueFullError if there is no room."""
        if self._full:
            raise QueueFullError("queue is full")
        self._slots[self._head] = copy.copy(item)
        self._empty = False
        self._head = (self._head + 1) % self._capacity
        if self._head == self._tail:
            self._full = True

    def read(self) -> Any:
        """Remove and return the oldest item; raise QueueEmptyError if none."""
        if self._empty:
            raise QueueEmptyError("queue is empty")
        item = self._slots[self._tail]
        self._slots[self._tail] = None
        self._tail = (self._tail + 1) % self._capacity
        self._full = False
        if self._tail == self._head:
            self._empty = True
        return item

    def is_empty(self) -> bool:
        """True when there is nothing to read."""
        return self._empty

    def is_full(self) -> bool:
        """True when every slot is in use."""
        return self._full

    def flush(self) -> None:
        """Discard all queued items and reset the positions."""
        if not self._empty:
            self._slots = [None] * self._capacity
            self._empty = True
            self._full = False
            self._head = 0
            self._tail = 0

    def __len__(self) -> int:
        if self._full:
            return self._capacity
        return (self._head - self._tail) % self._capacity