"""Utility modules for maxo.

Provides:
- logger: get_logger for logging
"""

from maxo.utils.logger import get_logger

__all__ = ["get_logger"]
