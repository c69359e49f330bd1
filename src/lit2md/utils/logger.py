"""Minimal logging utilities for lit2md.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; the command line does that.

Example:
    >>> from lit2md.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Converting %s", "main.go")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lit2md." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("scanner")
        >>> logger.name
        'lit2md.scanner'
    """
    if not (name == "lit2md" or name.startswith("lit2md.")):
        name = f"lit2md.{name}"
    return logging.getLogger(name)
