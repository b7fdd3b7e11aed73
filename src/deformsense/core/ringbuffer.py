from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """
    Fixed-size ring buffer for per-cycle samples.
    Overwrites the oldest entries when full.
    """

    __slots__ = ("_capacity", "_data", "_start", "_size")

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._data: list[T | None] = [None] * capacity
        self._start = 0
        self._size = 0

    def append(self, item: T) -> None:
        idx = (self._start + self._size) % self._capacity
        self._data[idx] = item
        if self._size < self._capacity:
            self._size += 1
        else:
            self._start = (self._start + 1) % self._capacity

    def clear(self) -> None:
        self._data = [None] * self._capacity
        self._start = 0
        self._size = 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            idx = (self._start + i) % self._capacity
            item = self._data[idx]
            if item is not None:
                yield item

    def newest_first(self) -> list[T]:
        """Return the logical contents ordered from the newest entry to the oldest."""
        items = list(self)
        items.reverse()
        return items
