"""Item and ItemKind definitions for the maxo scanner.

The scanner produces a stream of Item objects that a consumer drains.
Each Item has a start offset, a kind, and the exact text it covers.

Thread Safety:
Item is frozen (immutable) and safe to hand from the producer thread
to the consumer thread.
ItemKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class ItemKind(Enum):
    """Classification tags attached to scanned segments.

    Only kinds that a state handler actually produces are listed here.
    A new kind is added together with the handler that emits it.

    """

    # Content
    WHITESPACE = auto()  # run of White_Space code points
    TEXT = auto()  # run of anything else

    # Terminal
    EOF = auto()  # end of input, value is always ""
    ERROR = auto()  # scan error, value is the message

    @property
    def is_terminal(self) -> bool:
        """True for kinds that end a scan."""
        return self is ItemKind.EOF or self is ItemKind.ERROR


@dataclass(frozen=True, slots=True)
class Item:
    """A classified segment of input.

    Attributes:
        position: Offset (in code points) where the segment starts
        kind: The classification (from ItemKind enum)
        value: The exact substring covered, or the message for ERROR items

    """

    position: int
    kind: ItemKind
    value: str

    @property
    def end(self) -> int:
        """Offset just past the segment (same as position for terminal items)."""
        if self.kind.is_terminal:
            return self.position
        return self.position + len(self.value)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Item({self.kind.name}, {val!r}, @{self.position})"
