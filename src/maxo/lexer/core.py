"""State-machine scanner core.

The Lexer holds a cursor over an immutable source string and exposes the
primitives state handlers use to consume it: next(), backup(), peek(),
emit(), ignore() and errorf(). run() drives handlers from lex_text until
one of them returns None, then closes the sink.

Every segment leaves the Lexer through emit() or one of the terminal
helpers, in scan order, and exactly one terminal item (EOF or ERROR) ends
each scan.

Thread Safety:
Lexer instances are single-use and owned by one producer thread.
Only the Items it sends cross thread boundaries.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from maxo.errors import LexerStateError
from maxo.items import Item, ItemKind

if TYPE_CHECKING:
    from maxo.lexer.states import StateFn
    from maxo.lexer.stream import ItemSink

# Returned by next() at end of input; never a valid code point.
EOF = ""


class Lexer:
    """Cursor and driver for one scan.

    Cursor state:
        _start: Offset of the pending (not yet emitted) segment
        _pos: Current scan offset
        _width: Width of the last code point consumed by next(), 0 when
            there is nothing to back up over

    Invariant: 0 <= _start <= _pos <= len(source).

    Usage:
            >>> sink = ListSink()
            >>> Lexer("go rocks", sink).run()
            >>> sink.items
        [Item(TEXT, 'go', @0), Item(WHITESPACE, ' ', @2), Item(TEXT, 'rocks', @3), Item(EOF, '', @8)]

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_start",
        "_pos",
        "_width",
        "_sink",
        "_finished",
        "_emitted",
        "_last_kind",
    )

    def __init__(self, source: str, sink: ItemSink) -> None:
        """Initialize lexer with source text.

        Args:
            source: Text to scan
            sink: Receives items in scan order and is closed by run()
        """
        self._source = source
        self._source_len = len(source)
        self._start = 0
        self._pos = 0
        self._width = 0
        self._sink = sink
        self._finished = False
        self._emitted = 0
        self._last_kind: ItemKind | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def start(self) -> int:
        return self._start

    @property
    def position(self) -> int:
        return self._pos

    @property
    def width(self) -> int:
        return self._width

    @property
    def finished(self) -> bool:
        """True once the terminal item has been sent."""
        return self._finished

    @property
    def emitted(self) -> int:
        """Number of items sent so far, terminal item included."""
        return self._emitted

    @property
    def last_kind(self) -> ItemKind | None:
        return self._last_kind

    # =========================================================================
    # Cursor primitives
    # =========================================================================

    def next(self) -> str:
        """Consume and return the code point at the cursor.

        Returns:
            The consumed code point, or EOF ("") at end of input.
        """
        if self._pos >= self._source_len:
            self._width = 0
            return EOF

        char = self._source[self._pos]
        self._width = 1
        self._pos += 1
        return char

    def backup(self) -> None:
        """Un-consume the code point returned by the last next().

        Only valid once per next(); the recorded width is cleared so a
        second call cannot step past the start of that code point.

        Raises:
            LexerStateError: Nothing to back up over.
        """
        if self._width == 0:
            raise LexerStateError(f"backup without a preceding next() at offset {self._pos}")
        self._pos -= self._width
        self._width = 0

    def peek(self) -> str:
        """Return the next code point without consuming it."""
        char = self.next()
        if char != EOF:
            self.backup()
        return char

    def ignore(self) -> None:
        """Drop the pending segment without emitting it."""
        self._start = self._pos

    @property
    def has_pending(self) -> bool:
        return self._pos > self._start

    # =========================================================================
    # Emission
    # =========================================================================

    def emit(self, kind: ItemKind) -> None:
        """Send source[start:position] as an item of the given kind.

        Raises:
            LexerStateError: The scan already produced its terminal item.
        """
        self._send(Item(self._start, kind, self._source[self._start : self._pos]))
        self.ignore()

    def emit_pending(self, kind: ItemKind) -> None:
        """Emit the pending segment only if it is non-empty."""
        if self._pos > self._start:
            self.emit(kind)

    def emit_eof(self, kind: ItemKind) -> None:
        """Flush the pending segment as ``kind`` and end the scan with EOF.

        Returns None so handlers can ``return lexer.emit_eof(...)``.
        """
        self.emit_pending(kind)
        self._send(Item(self._pos, ItemKind.EOF, ""))

    def errorf(self, message: str, *args: object) -> None:
        """End the scan with a single ERROR item.

        The message is %-formatted with args. No EOF follows. Returns None
        so handlers can ``return lexer.errorf(...)``.
        """
        if args:
            message = message % args
        self._send(Item(self._start, ItemKind.ERROR, message))

    def _send(self, item: Item) -> None:
        if self._finished:
            raise LexerStateError(f"item emitted after terminal {self._last_kind.name}: {item!r}")
        self._sink.send(item)
        self._emitted += 1
        self._last_kind = item.kind
        if item.kind.is_terminal:
            self._finished = True

    # =========================================================================
    # Driver
    # =========================================================================

    def run(self, state: StateFn | None = None) -> None:
        """Run state handlers until one returns None, then close the sink.

        Args:
            state: Initial handler (defaults to lex_text)
        """
        if state is None:
            from maxo.lexer.states import lex_text

            state = lex_text

        try:
            while state is not None:
                state = state(self)
        except LexerStateError as exc:
            if self._finished:
                raise
            self.errorf("%s", exc)

        if not self._finished:
            self.errorf("scanner halted at offset %d without reaching end of input", self._pos)

        self._sink.close()
