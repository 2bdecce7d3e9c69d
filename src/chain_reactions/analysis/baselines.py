"""
Reference costs to compare the optimal order against.
"""

from __future__ import annotations

from math import comb

from chain_reactions.chain.dims import DimensionSequence
from chain_reactions.schedule.order import SplitTable, pair_cost


def left_to_right_cost(dims: DimensionSequence) -> int:
    """
    Cost of ``((A1 × A2) × A3) ...``: the running product keeps dims[0] rows.
    """
    return sum(dims[0] * dims[k] * dims[k + 1] for k in range(1, dims.num_matrices))


def right_to_left_cost(dims: DimensionSequence) -> int:
    """
    Cost of ``... (A(n-2) × (A(n-1) × An))``: the running product keeps dims[-1] columns.
    """
    n = dims.num_matrices
    return sum(dims[i] * dims[i + 1] * dims[n] for i in range(n - 1))


def split_table_cost(dims: DimensionSequence, split: SplitTable) -> int:
    """
    Re-evaluate the parenthesization encoded by ``split`` from scratch.
    """

    def _cost(i: int, j: int) -> int:
        if i == j:
            return 0
        k = split[i][j]
        if k is None or not i <= k < j:
            raise ValueError(f"split[{i}][{j}] = {k} is not a split point in [{i}, {j}).")
        return _cost(i, k) + _cost(k + 1, j) + pair_cost(dims, i, k, j)

    return _cost(0, dims.num_matrices - 1)


def count_parenthesizations(num_matrices: int) -> int:
    """
    Number of distinct full parenthesizations (Catalan number C(n-1)).
    """
    if num_matrices <= 0:
        raise ValueError("num_matrices must be positive.")
    m = num_matrices - 1
    return comb(2 * m, m) // (m + 1)
