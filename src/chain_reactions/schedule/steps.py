"""
Step-by-step replay of the DP fill.

Each :class:`FillStep` resolves one cell (i, j) and records every split that
was compared for it, in the order the table is filled: chain length
ascending, then start index ascending.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Sequence, Tuple

from chain_reactions.chain.dims import DimensionSequence, derive_matrices, validate
from chain_reactions.schedule.order import (
    CostTable,
    SplitTable,
    empty_tables,
    pair_cost,
    reconstruct,
)
from chain_reactions.schedule.planner import ChainPlan, ParenthesizationResult
from chain_reactions.utils.logging import logger


@dataclass(frozen=True)
class SplitCandidate:
    k: int
    left_cost: int
    right_cost: int
    pair_cost: int
    total_cost: int
    dimensions: Tuple[int, int, int]  # rows(i), cols(k), cols(j)


@dataclass(frozen=True)
class FillStep:
    index: int
    i: int
    j: int
    candidates: Tuple[SplitCandidate, ...]
    chosen_k: int
    result_cost: int

    @property
    def chain_length(self) -> int:
        return self.j - self.i + 1

    def describe(self) -> List[str]:
        """
        One line per candidate in 1-based notation, then the chosen minimum.
        """
        lines = []
        for cand in self.candidates:
            p, q, r = cand.dimensions
            lines.append(
                f"k={cand.k + 1}: m[{self.i + 1},{cand.k + 1}] + m[{cand.k + 2},{self.j + 1}]"
                f" + {p}×{q}×{r} = {cand.left_cost} + {cand.right_cost} + {cand.pair_cost}"
                f" = {cand.total_cost}"
            )
        lines.append(f"Minimum cost: {self.result_cost} (k = {self.chosen_k + 1})")
        return lines


def _fill(dims: DimensionSequence, cost: CostTable, split: SplitTable) -> Iterator[FillStep]:
    n = dims.num_matrices
    index = 0
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            candidates: List[SplitCandidate] = []
            for k in range(i, j):
                left: int = cost[i][k]  # type: ignore[assignment]
                right: int = cost[k + 1][j]  # type: ignore[assignment]
                pair = pair_cost(dims, i, k, j)
                candidates.append(
                    SplitCandidate(
                        k=k,
                        left_cost=left,
                        right_cost=right,
                        pair_cost=pair,
                        total_cost=left + right + pair,
                        dimensions=(dims[i], dims[k + 1], dims[j + 1]),
                    )
                )
            # min() keeps the first of equal totals
            best = min(candidates, key=lambda cand: cand.total_cost)
            cost[i][j] = best.total_cost
            split[i][j] = best.k
            yield FillStep(
                index=index,
                i=i,
                j=j,
                candidates=tuple(candidates),
                chosen_k=best.k,
                result_cost=best.total_cost,
            )
            index += 1


def enumerate_steps(dims: DimensionSequence) -> Iterator[FillStep]:
    """
    Lazily yield the n(n-1)/2 fill steps for ``dims``.

    A fresh call always reproduces the same sequence.
    """
    n = dims.num_matrices
    cost, split = empty_tables(n)
    return _fill(dims, cost, split)


class StepSequencer:
    """
    Restartable view over :func:`enumerate_steps`.

    Every ``iter()`` starts a new pass; ``cost`` and ``split`` hold the
    running tables of the latest pass and are complete once it is exhausted.
    """

    def __init__(self, dims: DimensionSequence) -> None:
        self.dims = dims
        self.cost, self.split = empty_tables(dims.num_matrices)

    def __iter__(self) -> Iterator[FillStep]:
        self.cost, self.split = empty_tables(self.dims.num_matrices)
        logger.debug("starting fill replay for %d matrices", self.dims.num_matrices)
        return _fill(self.dims, self.cost, self.split)

    def __len__(self) -> int:
        n = self.dims.num_matrices
        return n * (n - 1) // 2

    def steps(self) -> List[FillStep]:
        return list(self)


def replay_cost_table(steps: Iterable[FillStep], num_matrices: int) -> CostTable:
    """
    Rebuild the cost table a consumer sees after applying ``steps`` in order.
    """
    cost, _ = empty_tables(num_matrices)
    for step in steps:
        cost[step.i][step.j] = step.result_cost
    return cost


def plan_with_steps(values: Iterable[Any]) -> Tuple[ChainPlan, List[FillStep]]:
    """
    Single DP pass producing both the final plan and its fill trace.
    """
    dims = validate(values)
    sequencer = StepSequencer(dims)
    steps = sequencer.steps()

    n = dims.num_matrices
    result = ParenthesizationResult(
        min_cost=sequencer.cost[0][n - 1],  # type: ignore[arg-type]
        expression=reconstruct(sequencer.split, 0, n - 1),
    )
    chain_plan = ChainPlan(
        dims=dims,
        matrices=derive_matrices(dims),
        cost=sequencer.cost,
        split=sequencer.split,
        result=result,
        meta={"num_matrices": n, "num_cells": len(steps)},
    )
    return chain_plan, steps


def steps_by_length(steps: Sequence[FillStep]) -> List[List[FillStep]]:
    """Group steps into waves of equal chain length."""
    waves: List[List[FillStep]] = []
    for step in steps:
        if not waves or waves[-1][0].chain_length != step.chain_length:
            waves.append([])
        waves[-1].append(step)
    return waves
