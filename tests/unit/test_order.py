from __future__ import annotations

import re

import numpy as np
import pytest

from chain_reactions.chain.dims import derive_matrices, validate
from chain_reactions.schedule.order import ChainOrder, as_array, compute_order, reconstruct


def _random_dims(rng: np.random.Generator, num_matrices: int):
    return validate(rng.integers(1, 50, size=num_matrices + 1).tolist())


def test_compute_order_fills_known_tables() -> None:
    order = compute_order(validate([10, 20, 30, 40]))
    assert order.cost == [
        [0, 6000, 18000],
        [None, 0, 24000],
        [None, None, 0],
    ]
    assert order.split[0][2] == 1
    assert order.split[0][1] == 0
    assert order.split[1][2] == 1
    assert order.min_cost == 18000


def test_compute_order_textbook_chain() -> None:
    order = compute_order(validate([30, 35, 15, 5, 10, 20, 25]))
    assert order.min_cost == 15125
    assert order.cost[1][4] == 7125
    assert order.split[0][5] == 2
    assert reconstruct(order.split, 0, 5) == "((A1 × (A2 × A3)) × ((A4 × A5) × A6))"


def test_single_matrix_has_trivial_tables() -> None:
    order = compute_order(validate([5, 10]))
    assert order.cost == [[0]]
    assert order.min_cost == 0
    assert reconstruct(order.split, 0, 0) == "A1"


def test_ties_keep_smallest_split() -> None:
    order = compute_order(validate([1, 1, 1, 1]))
    assert order.cost[0][2] == 2
    assert order.split[0][2] == 0
    assert reconstruct(order.split, 0, 2) == "(A1 × (A2 × A3))"


def test_recurrence_holds_for_random_chains(rng) -> None:
    for n in range(1, 9):
        dims = _random_dims(rng, n)
        order = compute_order(dims)
        for i in range(n):
            assert order.cost[i][i] == 0
        for length in range(2, n + 1):
            for i in range(n - length + 1):
                j = i + length - 1
                k = order.split[i][j]
                expected = order.cost[i][k] + order.cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                assert order.cost[i][j] == expected
                for other in range(i, j):
                    total = order.cost[i][other] + order.cost[other + 1][j] + dims[i] * dims[other + 1] * dims[j + 1]
                    assert total >= expected


def test_pair_cost_matches_matrix_form(rng) -> None:
    dims = _random_dims(rng, 6)
    matrices = derive_matrices(dims)
    for i in range(6):
        for j in range(i + 1, 6):
            for k in range(i, j):
                assert dims[i] * dims[k + 1] * dims[j + 1] == (
                    matrices[i].rows * matrices[k].cols * matrices[j].cols
                )


def test_reconstruct_lists_each_label_once_in_order(rng) -> None:
    for n in range(1, 10):
        order = compute_order(_random_dims(rng, n))
        expression = reconstruct(order.split, 0, n - 1)
        labels = re.findall(r"A(\d+)", expression)
        assert labels == [str(i + 1) for i in range(n)]
        assert expression.count("(") == n - 1
        assert expression.count(")") == n - 1

        depth = 0
        for char in expression:
            depth += {"(": 1, ")": -1}.get(char, 0)
            assert depth >= 0
        assert depth == 0


def test_as_array_marks_undefined_cells() -> None:
    order = compute_order(validate([10, 20, 30]))
    arr = as_array(order.cost)
    assert arr.dtype == np.int64
    assert arr.tolist() == [[0, 6000], [-1, 0]]


def test_reconstruct_rejects_undefined_split() -> None:
    with pytest.raises(ValueError):
        reconstruct([[None, None], [None, None]], 0, 1)
    with pytest.raises(ValueError):
        reconstruct([[None, 1], [None, None]], 0, 1)


def test_min_cost_requires_filled_table() -> None:
    with pytest.raises(ValueError):
        ChainOrder(cost=[[0, None], [None, 0]], split=[[None, None], [None, None]]).min_cost
