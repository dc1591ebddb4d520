"""Minimal logging utilities for searchlex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from searchlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing query")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "searchlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'searchlex.mymodule'
    """
    if not (name == "searchlex" or name.startswith("searchlex.")):
        name = f"searchlex.{name}"
    return logging.getLogger(name)
