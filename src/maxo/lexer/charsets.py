"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from maxo.lexer.charsets import is_space

    if is_space(char):
        ...
"""

# Unicode White_Space property. Differs from str.isspace(), which also
# accepts the information separators U+001C..U+001F.
WHITE_SPACE: frozenset[str] = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def is_space(char: str) -> bool:
    """Check if a single code point is Unicode white space."""
    return char in WHITE_SPACE


def is_surrogate(char: str) -> bool:
    """Check if a code point is a lone UTF-16 surrogate.

    These never appear in valid text; bytes decoded with
    ``errors="surrogateescape"`` turn invalid UTF-8 into U+DC80..U+DCFF.
    """
    return "\ud800" <= char <= "\udfff"
