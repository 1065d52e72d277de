"""Minimal logging utilities for maxo.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from maxo.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("scan started")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "maxo." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'maxo.mymodule'
    """
    if not (name == "maxo" or name.startswith("maxo.")):
        name = f"maxo.{name}"
    return logging.getLogger(name)
