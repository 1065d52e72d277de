"""State-machine scanner for maxo.

Splits text into alternating TEXT and WHITESPACE items and streams them
from a producer thread to the consumer, ending with one EOF or ERROR item.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── charsets.py          # White_Space classification
├── core.py              # Lexer (cursor primitives + driver)
├── states.py            # lex_text / lex_whitespace handlers
├── stream.py            # ItemStream (bounded, closable, cancellable)
└── handle.py            # scan() and ScanHandle (owns the producer thread)

Usage:
    >>> from maxo.lexer import scan
    >>> with scan("  hi  ") as handle:
    ...     print(list(handle))
[Item(WHITESPACE, '  ', @0), Item(TEXT, 'hi', @2), Item(WHITESPACE, '  ', @4), Item(EOF, '', @6)]

"""

from maxo.lexer.core import EOF, Lexer
from maxo.lexer.handle import ScanHandle, scan
from maxo.lexer.states import StateFn, lex_text, lex_whitespace
from maxo.lexer.stream import ItemSink, ItemStream

__all__ = [
    "EOF",
    "ItemSink",
    "ItemStream",
    "Lexer",
    "ScanHandle",
    "StateFn",
    "lex_text",
    "lex_whitespace",
    "scan",
]
