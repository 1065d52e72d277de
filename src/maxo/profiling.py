"""ScanAccumulator: opt-in profiling for scans.

This module provides accumulated metrics across scans:
- Number of scans that reached a terminal item
- Total source length
- Items delivered to consumers
- Scans that ended in an ERROR item

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from maxo import transform
    from maxo.profiling import profiled_scan

    with profiled_scan() as metrics:
        transform("go rocks")

    print(metrics.summary())
    # {"total_ms": 0.4, "scan_calls": 1, "source_length": 8, "item_count": 4, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics across scans.

    Recorded on the consumer side when a terminal item is received, so the
    numbers are complete as soon as the consuming call returns.

    Attributes:
        start_time: Profiling start timestamp.
        scan_calls: Number of scans recorded.
        source_length: Total length of scanned sources.
        item_count: Items received, terminal items included.
        error_count: Scans that ended with an ERROR item.

    """

    start_time: float = field(default_factory=perf_counter)
    scan_calls: int = 0
    source_length: int = 0
    item_count: int = 0
    error_count: int = 0

    def record_scan(self, source_length: int, item_count: int, failed: bool = False) -> None:
        """Record a finished scan.

        Args:
            source_length: Length of the scanned source.
            item_count: Number of items the consumer received.
            failed: True when the scan ended with an ERROR item.

        """
        self.scan_calls += 1
        self.source_length += source_length
        self.item_count += item_count
        if failed:
            self.error_count += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, scan_calls, source_length, item_count, error_count.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scan_calls": self.scan_calls,
            "source_length": self.source_length,
            "item_count": self.item_count,
            "error_count": self.error_count,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated as scans finish.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
