"""StringBuilder for O(n) output accumulation.

Consumers receive one item at a time and build their output piece by
piece. Appending to a list and joining once at the end is O(n) total,
where repeated string concatenation is O(n²).

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("og").append(" ").append("skcor")
            >>> sb.build()
            'og skcor'
            >>> sb.length
            8

    Thread Safety:
        Instance is local to each consuming call.
        No shared mutable state.

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        self._parts.clear()
        self._length = 0
        return self

    @property
    def length(self) -> int:
        """Total length of the accumulated text."""
        return self._length

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
