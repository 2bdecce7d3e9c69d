"""
Optimal-order planning for matrix chains.

This package turns a dimension sequence into:
- Filled cost and split tables (the interval DP).
- The optimal parenthesization and its cost.
- An ordered trace of fill steps for stepwise replay.
"""

from .order import ChainOrder, as_array, compute_order, reconstruct
from .planner import ChainPlan, ParenthesizationResult, plan
from .steps import (
    FillStep,
    SplitCandidate,
    StepSequencer,
    enumerate_steps,
    plan_with_steps,
    replay_cost_table,
    steps_by_length,
)
from .validate import validate_order, validate_steps

__all__ = [
    "ChainOrder",
    "as_array",
    "compute_order",
    "reconstruct",
    "ChainPlan",
    "ParenthesizationResult",
    "plan",
    "FillStep",
    "SplitCandidate",
    "StepSequencer",
    "enumerate_steps",
    "plan_with_steps",
    "replay_cost_table",
    "steps_by_length",
    "validate_order",
    "validate_steps",
]
