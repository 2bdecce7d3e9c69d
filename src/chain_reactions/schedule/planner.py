from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from chain_reactions.chain.dims import DimensionSequence, Matrix, derive_matrices, validate
from chain_reactions.schedule.order import CostTable, SplitTable, compute_order, reconstruct
from chain_reactions.schedule.validate import validate_order
from chain_reactions.utils.config import config
from chain_reactions.utils.logging import logger


@dataclass(frozen=True)
class ParenthesizationResult:
    min_cost: int
    expression: str


@dataclass
class ChainPlan:
    """
    Everything a presentation layer needs to render one chain.
    """
    dims: DimensionSequence
    matrices: List[Matrix]
    cost: CostTable
    split: SplitTable
    result: ParenthesizationResult
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def min_cost(self) -> int:
        return self.result.min_cost

    @property
    def expression(self) -> str:
        return self.result.expression

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dims": list(self.dims),
            "matrices": [
                {"index": m.index, "name": m.name, "rows": m.rows, "cols": m.cols}
                for m in self.matrices
            ],
            "cost": [list(row) for row in self.cost],
            "split": [list(row) for row in self.split],
            "min_cost": self.min_cost,
            "expression": self.expression,
        }


def plan(values: Iterable[Any]) -> ChainPlan:
    """
    Validate ``values`` and compute the optimal parenthesization.

    Raises:
        ValidationError: if ``values`` is not a valid dimension sequence.
    """
    dims = validate(values)
    matrices = derive_matrices(dims)
    order = compute_order(dims)
    if config.debug:
        validate_order(dims, order)

    n = dims.num_matrices
    expression = reconstruct(order.split, 0, n - 1)
    result = ParenthesizationResult(min_cost=order.min_cost, expression=expression)
    logger.debug("planned %d matrices: cost=%d %s", n, result.min_cost, expression)

    return ChainPlan(
        dims=dims,
        matrices=matrices,
        cost=order.cost,
        split=order.split,
        result=result,
        meta={"num_matrices": n, "num_cells": n * (n - 1) // 2},
    )
