"""
chain-reactions

Optimal matrix-chain ordering with a replayable dynamic-programming trace.
"""

from .chain.dims import DimensionSequence, Matrix, ValidationError, validate
from .schedule.planner import ChainPlan, ParenthesizationResult, plan
from .schedule.steps import FillStep, StepSequencer, enumerate_steps
from .runtime.replay import ReplayCursor

__all__ = [
    "DimensionSequence",
    "Matrix",
    "ValidationError",
    "validate",
    "ChainPlan",
    "ParenthesizationResult",
    "plan",
    "FillStep",
    "StepSequencer",
    "enumerate_steps",
    "ReplayCursor",
]
