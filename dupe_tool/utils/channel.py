#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Closable thread-safe queue used for the job and result streams.
"""

from queue import Queue
from threading import Lock
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class ChannelClosed(RuntimeError):
    """Raised when putting onto a channel that has been closed."""


class Channel(Generic[T]):
    """Unbounded multi-producer/multi-consumer queue with explicit closure.

    Each item is delivered to exactly one consumer. Iterating blocks until an
    item arrives and stops once the channel is closed and drained; the close
    marker is re-queued so every consumer sees it.
    """

    def __init__(self):
        self.q: "Queue[object]" = Queue()
        self._closed = False
        self._lock = Lock()
        self._stop = object()

    def put(self, item: T) -> None:
        with self._lock:
            if self._closed:
                raise ChannelClosed("put on closed channel")
            self.q.put(item)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self.q.put(self._stop)

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> Iterator[T]:
        while True:
            item = self.q.get()
            if item is self._stop:
                self.q.put(item)
                return
            yield item  # type: ignore[misc]
