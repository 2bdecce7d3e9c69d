from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Union

from chain_reactions.analysis.baselines import (
    count_parenthesizations,
    left_to_right_cost,
    right_to_left_cost,
    split_table_cost,
)
from chain_reactions.schedule.planner import ChainPlan, plan


@dataclass(frozen=True)
class ChainAnalysisReport:
    plan: ChainPlan
    baselines: Dict[str, int]
    num_parenthesizations: int
    savings_ratio: float
    notes: List[str]


def analyze_chain(values: Union[ChainPlan, Iterable[Any]]) -> ChainAnalysisReport:
    """
    Compare the optimum against the sequential groupings.

    Accepts raw dimensions, which are planned here, or an existing ChainPlan,
    whose tables are reused.
    """
    chain_plan = values if isinstance(values, ChainPlan) else plan(values)
    dims = chain_plan.dims
    n = dims.num_matrices

    baselines = {
        "left_to_right": left_to_right_cost(dims),
        "right_to_left": right_to_left_cost(dims),
    }
    worst = max(baselines.values())
    savings = 1.0 - chain_plan.min_cost / worst if worst else 0.0

    notes: List[str] = []
    if n == 1:
        notes.append("Single matrix; nothing to multiply.")
    else:
        recomputed = split_table_cost(dims, chain_plan.split)
        if recomputed != chain_plan.min_cost:
            raise ValueError(
                f"Split table evaluates to {recomputed}, expected {chain_plan.min_cost}."
            )
        best_name = min(baselines, key=lambda name: (baselines[name], name))
        if chain_plan.min_cost == baselines[best_name]:
            notes.append(f"Optimal order costs the same as the {best_name.replace('_', '-')} grouping.")
        else:
            notes.append(
                f"Optimal order saves {baselines[best_name] - chain_plan.min_cost} multiplications "
                f"over the best sequential grouping ({best_name.replace('_', '-')})."
            )
        notes.append(f"Savings against the worse sequential grouping: {savings:.1%}.")

    return ChainAnalysisReport(
        plan=chain_plan,
        baselines=baselines,
        num_parenthesizations=count_parenthesizations(n),
        savings_ratio=savings,
        notes=notes,
    )
