"""
Miscellaneous utilities shared across chain-reactions.
"""

from .logging import configure_logging, logger
from .config import config

__all__ = ["logger", "configure_logging", "config"]
