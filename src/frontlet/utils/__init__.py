"""Utility modules for Frontlet.

Provides:
- logger: get_logger for logging
"""

from frontlet.utils.logger import get_logger

__all__ = [
    "get_logger",
]
