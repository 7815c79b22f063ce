"""Minimal logging utilities for Frontlet.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from frontlet.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "frontlet." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'frontlet.mymodule'
    """
    if not (name == "frontlet" or name.startswith("frontlet.")):
        name = f"frontlet.{name}"
    return logging.getLogger(name)
