"""ContextVar-based scan configuration for maxo.

Provides context-local configuration using Python's ContextVars (PEP 567).
scan() reads the active config when no explicit config is passed, and the
producer thread runs in a copy of the caller's context so it sees the same
values.

Usage:
    # Explicit
    handle = scan("go rocks", config=ScanConfig(buffer_size=8))

    # Context-wide
    from maxo.config import set_scan_config, reset_scan_config, ScanConfig

    set_scan_config(ScanConfig(buffer_size=8))
    try:
        output = transform("go rocks")
    finally:
        reset_scan_config()

    # Or use the context manager
    with scan_config_context(ScanConfig(buffer_size=8)):
        output = transform("go rocks")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        buffer_size: Capacity of the item stream (at least 1). The producer
            blocks once this many items are waiting to be read.
        poll_interval: Seconds between cancellation checks while the producer
            or consumer is blocked on the stream.
        join_timeout: Seconds close() waits for the producer thread to exit,
            or None to wait indefinitely.
        thread_name: Name given to producer threads.

    """

    buffer_size: int = 1
    poll_interval: float = 0.05
    join_timeout: float | None = 1.0
    thread_name: str = "maxo-lexer"

    def __post_init__(self) -> None:
        if self.buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {self.buffer_size}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.join_timeout is not None and self.join_timeout < 0:
            raise ValueError(f"join_timeout must be non-negative, got {self.join_timeout}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({"buffer_size": 4, "unknown_key": 1})
            >>> config.buffer_size
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Example:
        >>> with scan_config_context(ScanConfig(buffer_size=16)):
        ...     output = transform("hello world")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
