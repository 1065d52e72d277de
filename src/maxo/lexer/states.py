"""State handlers for the maxo scanner.

Each handler consumes code points through the Lexer cursor until it finds
a classification boundary, emits what it has accumulated, and returns the
handler for the next mode, or None once a terminal item has been sent.

The scanner alternates between two modes:
- lex_text: runs of non-whitespace (initial state)
- lex_whitespace: runs of White_Space code points

A boundary is a change of the whitespace predicate between consecutive
code points. Empty segments are never emitted.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from maxo.items import ItemKind
from maxo.lexer.charsets import is_space, is_surrogate
from maxo.lexer.core import EOF

if TYPE_CHECKING:
    from maxo.lexer.core import Lexer


class StateFn(Protocol):
    """A scanner mode: consumes input and returns the next mode."""

    def __call__(self, lexer: Lexer, /) -> StateFn | None: ...


def lex_text(lexer: Lexer) -> StateFn | None:
    """Scan a run of non-whitespace."""
    while True:
        char = lexer.next()
        if char == EOF:
            return lexer.emit_eof(ItemKind.TEXT)
        if is_space(char):
            lexer.backup()
            lexer.emit_pending(ItemKind.TEXT)
            return lex_whitespace
        if is_surrogate(char):
            return lexer.errorf(
                "invalid code point U+%04X at offset %d",
                ord(char),
                lexer.position - lexer.width,
            )


def lex_whitespace(lexer: Lexer) -> StateFn | None:
    """Scan a run of whitespace."""
    while True:
        char = lexer.next()
        if char == EOF:
            return lexer.emit_eof(ItemKind.WHITESPACE)
        if not is_space(char):
            lexer.backup()
            lexer.emit_pending(ItemKind.WHITESPACE)
            return lex_text
