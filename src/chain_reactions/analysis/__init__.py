"""
Chain analysis utilities.

Key responsibilities:
- Cost the sequential groupings the optimum is measured against.
- Re-evaluate a split table independently of the DP.
- Summarise a planned chain in a report.
"""

from . import baselines
from .report import ChainAnalysisReport, analyze_chain

__all__ = [
    "baselines",
    "ChainAnalysisReport",
    "analyze_chain",
]
