"""A small thread-safe queue that hands frames between pipeline stages."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class QueueClosed(Exception):
    """Raised when a closed queue is written to, or read from once drained."""


class DataQueue(Generic[T]):
    """Bounded FIFO where a full queue drops its oldest item on insertion."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def _wait_for_item(self) -> None:
        while not self._items and not self._closed:
            self._cond.wait()
        if not self._items:
            raise QueueClosed("queue is closed and empty")

    def get(self) -> T:
        """Block until an item is available, then remove and return the oldest."""
        with self._cond:
            self._wait_for_item()
            return self._items.popleft()

    def get_last(self) -> T:
        """Block until an item is available, then return the newest without removing it."""
        with self._cond:
            self._wait_for_item()
            return self._items[-1]

    def put(self, item: T, max_len: int = 3) -> None:
        """Append an item, dropping the oldest one if the queue holds max_len or more."""
        if max_len < 1:
            raise ValueError("max_len must be at least 1")
        with self._cond:
            if self._closed:
                raise QueueClosed("queue is closed")
            if len(self._items) >= max_len:
                self._items.popleft()
            self._items.append(item)
            self._cond.notify()

    def shut_down(self) -> None:
        """Close the queue and wake every waiting reader."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()