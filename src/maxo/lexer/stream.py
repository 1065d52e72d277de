"""Ordered, bounded conduit between the scanner thread and its consumer.

ItemStream is a FIFO guarded by a threading.Condition, with:
- close(), after which the consumer sees end-of-sequence instead of blocking
- cancel(), which aborts a blocked send() so an abandoned consumer never
  leaves the producer stuck on a full buffer
- forwarding of a producer crash, re-raised to the consumer once every
  item sent before it has been read

Thread Safety:
One producer thread calls send()/close(); one consumer thread calls
receive(). cancel() and drain() may be called from any thread. Only
immutable Items cross the boundary.

"""

from __future__ import annotations

import threading
from collections import deque
from typing import Protocol

from maxo.errors import LexerStateError, ScanCancelled
from maxo.items import Item


class ItemSink(Protocol):
    """Anything the Lexer can send items into."""

    def send(self, item: Item) -> None: ...

    def close(self, error: BaseException | None = None) -> None: ...


class ItemStream:
    """Bounded FIFO of Items with close and cancellation.

    Usage:
            >>> stream = ItemStream(capacity=4)
            >>> stream.send(Item(0, ItemKind.EOF, ""))
            >>> stream.close()
            >>> stream.receive()
        Item(EOF, '', @0)
            >>> stream.receive() is None
        True

    """

    __slots__ = (
        "_items",
        "_capacity",
        "_cond",
        "_cancelled",
        "_poll_interval",
        "_closed",
        "_drained",
        "_error",
    )

    def __init__(self, capacity: int = 1, *, poll_interval: float = 0.05) -> None:
        """Initialize an empty stream.

        Args:
            capacity: Items that may wait unread before send() blocks (>= 1)
            poll_interval: Upper bound on how long a blocked call sleeps
                before re-checking cancellation
        """
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._items: deque[Item] = deque()
        self._capacity = capacity
        self._cond = threading.Condition()
        self._cancelled = threading.Event()
        self._poll_interval = poll_interval
        self._closed = False
        self._drained = False
        self._error: BaseException | None = None

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        """True once the producer has closed the stream."""
        return self._closed

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Abort blocked and future send() calls and wake a blocked receive()."""
        self._cancelled.set()
        with self._cond:
            self._cond.notify_all()

    def send(self, item: Item) -> None:
        """Append an item, blocking while the buffer is full.

        Raises:
            LexerStateError: The stream is already closed.
            ScanCancelled: The stream was cancelled before the item fit.
        """
        with self._cond:
            if self._closed:
                raise LexerStateError(f"send on closed item stream: {item!r}")
            while len(self._items) >= self._capacity:
                if self._cancelled.is_set():
                    raise ScanCancelled("item stream cancelled")
                self._cond.wait(self._poll_interval)
            if self._cancelled.is_set():
                raise ScanCancelled("item stream cancelled")
            self._items.append(item)
            self._cond.notify_all()

    def close(self, error: BaseException | None = None) -> None:
        """Mark end of sequence. Idempotent; never blocks on a full buffer.

        Args:
            error: Producer failure to re-raise from receive() after the
                items already sent have been read
        """
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._error = error
            self._cond.notify_all()

    def receive(self) -> Item | None:
        """Return the next item, blocking until one is available.

        Returns:
            The next Item, or None at end of sequence (closed and empty, or
            cancelled). Every call after end of sequence also returns None.

        Raises:
            Exception: The producer's failure passed to close(), once.
        """
        with self._cond:
            while not self._items:
                if self._drained:
                    return None
                if self._closed:
                    self._drained = True
                    error, self._error = self._error, None
                    if error is not None:
                        raise error
                    return None
                if self._cancelled.is_set():
                    self._drained = True
                    return None
                self._cond.wait(self._poll_interval)

            item = self._items.popleft()
            self._cond.notify_all()
            return item

    def drain(self) -> int:
        """Discard buffered items without blocking.

        Returns:
            Number of items discarded.
        """
        with self._cond:
            discarded = len(self._items)
            self._items.clear()
            self._cond.notify_all()
            return discarded
