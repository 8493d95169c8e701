"""A FIFO queue safe to share between threads, whose reads wait for data."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, TypeVar

__all__ = ["TSQueue"]

T = TypeVar("T")


class TSQueue(Generic[T]):
    """Thread-safe queue: ``front`` and ``pop`` block until an item is available."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, item: T) -> None:
        """Append an item and wake one waiting reader."""
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def front(self) -> T:
        """Return the oldest item without removing it, waiting if empty."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            return self._items[0]

    def pop(self) -> T:
        """Remove and return the oldest item, waiting if empty."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def empty(self) -> bool:
        with self._cond:
            return not self._items

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)