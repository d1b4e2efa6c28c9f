"""Utility modules for regulex.

Provides:
- logger: get_logger for logging
"""

from regulex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
