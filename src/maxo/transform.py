"""Reference consumer: reverse every word, keep whitespace verbatim.

transform() drains a scan to completion. TEXT items are appended with
their code points reversed and WHITESPACE items are appended unchanged, so
segment boundaries and spacing survive exactly. An ERROR item fails the
whole call; no partial output is returned.

Example:
    >>> transform("go rocks")
    'og skcor'
    >>> transform("  hi  ")
    '  ih  '

"""

from __future__ import annotations

from maxo.config import ScanConfig
from maxo.errors import ScanError
from maxo.items import ItemKind
from maxo.lexer import scan
from maxo.stringbuilder import StringBuilder


def reverse(text: str) -> str:
    """Reverse the code points of ``text``."""
    return text[::-1]


def transform(source: str | bytes, *, config: ScanConfig | None = None) -> str:
    """Scan ``source`` and reassemble it with each word reversed.

    Args:
        source: Text to transform (bytes are decoded as in scan())
        config: Scan settings (defaults to the context's ScanConfig)

    Returns:
        The reassembled text.

    Raises:
        ScanError: The scan ended with an ERROR item.

    """
    sb = StringBuilder()
    with scan(source, config=config) as handle:
        for item in handle:
            if item.kind is ItemKind.TEXT:
                sb.append(reverse(item.value))
            elif item.kind is ItemKind.WHITESPACE:
                sb.append(item.value)
            elif item.kind is ItemKind.ERROR:
                raise ScanError(
                    f"error processing the following {item.value!r}",
                    position=item.position,
                )
            elif item.kind is ItemKind.EOF:
                return sb.build()

    # Stream ended without a terminal item; only possible if the scan was cancelled
    raise ScanError("scan ended without a terminal item")
