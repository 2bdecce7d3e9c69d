from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from chain_reactions.chain.dims import DimensionSequence

# Cells with i > j (and split cells with i == j) hold None.
CostTable = List[List[Optional[int]]]
SplitTable = List[List[Optional[int]]]


@dataclass
class ChainOrder:
    """
    Filled DP tables for one dimension sequence.

    Attributes:
        cost: cost[i][j] is the minimum scalar multiplications for A(i+1)..A(j+1).
        split: split[i][j] is the k at which the optimal product of i..j splits.
    """
    cost: CostTable
    split: SplitTable

    @property
    def num_matrices(self) -> int:
        return len(self.cost)

    @property
    def min_cost(self) -> int:
        value = self.cost[0][self.num_matrices - 1]
        if value is None:
            raise ValueError("Cost table has not been filled.")
        return value


def empty_tables(n: int) -> tuple[CostTable, SplitTable]:
    cost: CostTable = [[None] * n for _ in range(n)]
    split: SplitTable = [[None] * n for _ in range(n)]
    for i in range(n):
        cost[i][i] = 0
    return cost, split


def pair_cost(dims: DimensionSequence, i: int, k: int, j: int) -> int:
    """Scalar multiplications for (A(i)..A(k)) x (A(k+1)..A(j))."""
    return dims[i] * dims[k + 1] * dims[j + 1]


def compute_order(dims: DimensionSequence) -> ChainOrder:
    """
    Classical interval DP over chain lengths 2..n.

    Ties keep the first (smallest) k because the comparison is strict.
    """
    n = dims.num_matrices
    cost, split = empty_tables(n)

    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            best_k = i
            best = cost[i][i] + cost[i + 1][j] + pair_cost(dims, i, i, j)  # type: ignore[operator]
            for k in range(i + 1, j):
                q = cost[i][k] + cost[k + 1][j] + pair_cost(dims, i, k, j)  # type: ignore[operator]
                if q < best:
                    best = q
                    best_k = k
            cost[i][j] = best
            split[i][j] = best_k

    return ChainOrder(cost=cost, split=split)


def reconstruct(split: SplitTable, i: int, j: int) -> str:
    """
    Fully parenthesized product of A(i+1)..A(j+1), e.g. ``((A1 × A2) × A3)``.
    """
    if i == j:
        return f"A{i + 1}"
    k = split[i][j]
    if k is None or not i <= k < j:
        raise ValueError(f"split[{i}][{j}] = {k} is not a split point in [{i}, {j}).")
    return f"({reconstruct(split, i, k)} × {reconstruct(split, k + 1, j)})"


def as_array(table: List[List[Optional[int]]], fill: int = -1) -> np.ndarray:
    """
    Convert a DP table to an int64 array, writing ``fill`` for undefined cells.
    """
    return np.array(
        [[fill if cell is None else cell for cell in row] for row in table],
        dtype=np.int64,
    )
