"""Exception classes for maxo.

Provides standardized exceptions for error handling throughout maxo.
"""

from __future__ import annotations


class MaxoError(Exception):
    """Base exception for all maxo errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(MaxoError):
    """Input could not be classified.

    Raised by consumers (such as transform) when the scan ends with an
    ERROR item instead of EOF. Nothing scanned before the error is usable.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        """Initialize scan error with optional offset.

        Args:
            message: Error description
            position: Offset in the input where the failing segment started
        """
        self.message = message
        self.position = position

        location = f"offset {position}: " if position is not None else ""
        super().__init__(f"{location}{message}")


class LexerStateError(MaxoError):
    """The scanner cursor or item stream was driven incorrectly.

    Raised on a second backup() without an intervening next(), on emitting
    after the terminal item, and on sending into a closed stream.
    """

    pass


class ScanCancelled(MaxoError):
    """The consumer abandoned the scan.

    Raised inside the producer thread when its item stream is cancelled,
    to unwind the state machine. Never reaches the consumer.
    """

    pass
