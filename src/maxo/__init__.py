"""
maxo: streaming word/whitespace scanner

The front end of a small language toolchain. A state-machine scanner
splits text into alternating TEXT and WHITESPACE items and streams them
from a producer thread to the consumer, ending with exactly one EOF or
ERROR item.

Quick Start:
    >>> from maxo import scan, transform
    >>> transform("go rocks")
    'og skcor'

    >>> with scan("go rocks") as handle:
    ...     for item in handle:
    ...         print(item.kind.name, repr(item.value))
    TEXT 'go'
    WHITESPACE ' '
    TEXT 'rocks'
    EOF ''
"""

from maxo.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from maxo.errors import LexerStateError, MaxoError, ScanCancelled, ScanError
from maxo.items import Item, ItemKind
from maxo.lexer import ItemStream, Lexer, ScanHandle, scan
from maxo.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from maxo.transform import reverse, transform

__version__ = "0.0.1"

__all__ = [
    "Item",
    "ItemKind",
    "ItemStream",
    "Lexer",
    "LexerStateError",
    "MaxoError",
    "ScanAccumulator",
    "ScanCancelled",
    "ScanConfig",
    "ScanError",
    "ScanHandle",
    "__version__",
    "get_scan_accumulator",
    "get_scan_config",
    "profiled_scan",
    "reset_scan_config",
    "reverse",
    "scan",
    "scan_config_context",
    "set_scan_config",
    "transform",
]
