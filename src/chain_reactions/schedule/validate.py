"""
Validation of computed DP tables and fill traces.
"""

from __future__ import annotations

from typing import Sequence

from chain_reactions.chain.dims import DimensionSequence
from chain_reactions.schedule.order import ChainOrder, pair_cost


def validate_order(dims: DimensionSequence, order: ChainOrder) -> None:
    """
    Structural checks on a filled ChainOrder:
    - table shape matches the number of matrices
    - zero diagonal
    - every cell equals the total of its recorded split, which is the first minimum
    """
    n = dims.num_matrices
    _ensure_shape(order, n)
    _ensure_zero_diagonal(order, n)
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            _ensure_cell_optimal(dims, order, i, i + length - 1)


def _ensure_shape(order: ChainOrder, n: int) -> None:
    if len(order.cost) != n or any(len(row) != n for row in order.cost):
        raise ValueError(f"Cost table must be {n}x{n}.")
    if len(order.split) != n or any(len(row) != n for row in order.split):
        raise ValueError(f"Split table must be {n}x{n}.")


def _ensure_zero_diagonal(order: ChainOrder, n: int) -> None:
    for i in range(n):
        if order.cost[i][i] != 0:
            raise ValueError(f"cost[{i}][{i}] must be 0, got {order.cost[i][i]}.")


def _ensure_cell_optimal(dims: DimensionSequence, order: ChainOrder, i: int, j: int) -> None:
    k = order.split[i][j]
    if k is None or not i <= k < j:
        raise ValueError(f"split[{i}][{j}] = {k} is outside [{i}, {j}).")

    totals = [
        order.cost[i][kk] + order.cost[kk + 1][j] + pair_cost(dims, i, kk, j)  # type: ignore[operator]
        for kk in range(i, j)
    ]
    best = min(totals)
    if order.cost[i][j] != totals[k - i]:
        raise ValueError(f"cost[{i}][{j}] does not match its split at k={k}.")
    if totals[k - i] != best:
        raise ValueError(f"cost[{i}][{j}] is not minimal; k={i + totals.index(best)} is cheaper.")
    if totals.index(best) != k - i:
        raise ValueError(f"split[{i}][{j}] = {k} is not the first minimising split.")


def validate_steps(dims: DimensionSequence, steps: Sequence) -> None:
    """
    Check that a fill trace covers every cell once, in dependency order.
    """
    n = dims.num_matrices
    expected = [
        (i, i + length - 1)
        for length in range(2, n + 1)
        for i in range(n - length + 1)
    ]
    actual = [(step.i, step.j) for step in steps]
    if actual != expected:
        raise ValueError("Fill steps do not follow length-then-start order.")
    for position, step in enumerate(steps):
        if step.index != position:
            raise ValueError(f"Step at position {position} has index {step.index}.")
        if len(step.candidates) != step.j - step.i:
            raise ValueError(f"Step ({step.i}, {step.j}) is missing split candidates.")
