"""Scan handles: a producer thread plus the stream it fills.

scan() starts the state machine on a daemon thread and returns a
ScanHandle immediately. The consumer pulls items with next_item() or by
iterating the handle. The handle owns the thread: close() (or leaving a
``with`` block, or garbage collection of the handle) cancels a producer
that is still running so it never stays blocked on a full buffer.

Usage:
    >>> with scan("go rocks") as handle:
    ...     for item in handle:
    ...         print(item)
    Item(TEXT, 'go', @0)
    Item(WHITESPACE, ' ', @2)
    Item(TEXT, 'rocks', @3)
    Item(EOF, '', @8)

"""

from __future__ import annotations

import contextvars
import threading
import weakref
from collections.abc import Iterator

from maxo.config import ScanConfig, get_scan_config
from maxo.errors import ScanCancelled
from maxo.items import Item, ItemKind
from maxo.lexer.core import Lexer
from maxo.lexer.stream import ItemStream
from maxo.profiling import get_scan_accumulator
from maxo.utils.logger import get_logger

logger = get_logger(__name__)


def _produce(lexer: Lexer, stream: ItemStream) -> None:
    """Producer thread body."""
    logger.debug("scan started: %d code points", len(lexer.source))
    try:
        lexer.run()
    except ScanCancelled:
        logger.debug("scan cancelled at offset %d after %d items", lexer.position, lexer.emitted)
        stream.close()
    except Exception as exc:
        logger.exception("scanner thread failed at offset %d", lexer.position)
        stream.close(error=exc)
    else:
        logger.debug(
            "scan finished: %d items, terminal %s",
            lexer.emitted,
            lexer.last_kind.name if lexer.last_kind else None,
        )


class ScanHandle:
    """Live view of one scan.

    Thread Safety:
        Read from a single consumer thread. close() may be called from any
        thread.

    """

    def __init__(self, source: str, config: ScanConfig) -> None:
        """Start scanning ``source`` on a new producer thread.

        Args:
            source: Text to scan
            config: Buffer size, polling and join settings
        """
        self._source = source
        self._config = config
        self._stream = ItemStream(config.buffer_size, poll_interval=config.poll_interval)
        self._lexer = Lexer(source, self._stream)
        self._received = 0
        self._terminal: Item | None = None
        self._closed = False

        # The producer sees the caller's context variables
        context = contextvars.copy_context()
        self._thread = threading.Thread(
            target=context.run,
            args=(_produce, self._lexer, self._stream),
            name=config.thread_name,
            daemon=True,
        )
        # Must not reference self, or the handle would never be collected
        self._finalizer = weakref.finalize(self, self._stream.cancel)
        self._thread.start()

    @property
    def source(self) -> str:
        return self._source

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def done(self) -> bool:
        """True once the producer thread has exited."""
        return not self._thread.is_alive()

    @property
    def terminal(self) -> Item | None:
        """The EOF or ERROR item, once the consumer has received it."""
        return self._terminal

    def next_item(self) -> Item | None:
        """Block until the next item is available.

        Returns:
            The next Item in scan order, or None at end of sequence.
            Reading after the end, or after close(), keeps returning None.
        """
        if self._closed:
            return None
        item = self._stream.receive()
        if item is None:
            return None

        self._received += 1
        if item.kind.is_terminal:
            self._terminal = item
            acc = get_scan_accumulator()
            if acc is not None:
                acc.record_scan(
                    len(self._source),
                    self._received,
                    failed=item.kind is ItemKind.ERROR,
                )
        return item

    def __iter__(self) -> Iterator[Item]:
        while (item := self.next_item()) is not None:
            yield item

    def cancel(self) -> None:
        """Ask the producer to stop without waiting for it."""
        self._stream.cancel()

    def close(self) -> None:
        """Cancel the producer if it is still running and join its thread.

        Idempotent. Items not yet read are discarded.
        """
        if self._closed:
            return
        self._closed = True
        self._stream.cancel()
        self._stream.drain()
        self._thread.join(self._config.join_timeout)
        if self._thread.is_alive():
            logger.warning(
                "scanner thread %s did not exit within %ss",
                self._thread.name,
                self._config.join_timeout,
            )
        self._finalizer.detach()

    def __enter__(self) -> ScanHandle:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else ("done" if self.done else "running")
        return f"<ScanHandle {state} received={self._received}>"


def scan(source: str | bytes, *, config: ScanConfig | None = None) -> ScanHandle:
    """Start scanning ``source`` and return a handle to its item stream.

    Args:
        source: Text to scan. Bytes are decoded as UTF-8 with
            ``surrogateescape``; invalid sequences end the scan with an
            ERROR item.
        config: Scan settings (defaults to the context's ScanConfig)

    Returns:
        ScanHandle that yields items in scan order

    """
    if isinstance(source, bytes):
        source = source.decode("utf-8", "surrogateescape")
    return ScanHandle(source, config if config is not None else get_scan_config())
