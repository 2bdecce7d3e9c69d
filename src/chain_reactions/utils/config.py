"""
Global configuration flags.
"""

from dataclasses import dataclass


@dataclass
class CRConfig:
    debug: bool = False


config = CRConfig()
