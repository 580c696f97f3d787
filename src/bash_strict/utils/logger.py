"""Logging helpers for bash-strict.

Wraps the standard library ``logging`` module so every logger lives under
the ``bash_strict`` namespace. The library never installs handlers; callers
configure output.

Example:
    >>> from bash_strict.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("header ends at line %d", 4)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance prefixed with "bash_strict."

    Example:
        >>> get_logger("parser").name
        'bash_strict.parser'
    """
    if not (name == "bash_strict" or name.startswith("bash_strict.")):
        name = f"bash_strict.{name}"
    return logging.getLogger(name)
