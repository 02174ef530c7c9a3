"""Logging helper for shelltok.

Library modules log at DEBUG level only and never configure handlers;
the CLI enables output with ``--verbose``.

Example:
    >>> from shelltok.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.name
    'shelltok.logger'
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger under the "shelltok." namespace."""
    if not (name == "shelltok" or name.startswith("shelltok.")):
        name = f"shelltok.{name}"
    return logging.getLogger(name)
