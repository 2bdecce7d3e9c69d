"""
Package-wide logger.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("chain_reactions")
logger.addHandler(logging.NullHandler())


def configure_logging(debug: bool = False) -> None:
    """
    Attach a stderr handler to the package logger (used by the CLI).
    """
    level = logging.DEBUG if debug else logging.INFO
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
