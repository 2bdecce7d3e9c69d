from __future__ import annotations

import pytest

from chain_reactions.chain.dims import validate
from chain_reactions.runtime.replay import ReplayCallbacks, ReplayCursor, StepReplayer
from chain_reactions.schedule.order import compute_order
from chain_reactions.schedule.steps import enumerate_steps


def _cursor(values):
    dims = validate(values)
    return ReplayCursor(list(enumerate_steps(dims)), dims.num_matrices), dims


def test_cursor_advances_and_fills_display_table() -> None:
    cursor, _ = _cursor([10, 20, 30, 40])
    assert cursor.current is None
    assert cursor.displayed_cost_table() == [[0, None, None], [None, 0, None], [None, None, 0]]

    step = cursor.advance()
    assert (step.i, step.j) == (0, 1)
    assert cursor.current is step
    assert cursor.displayed_cost_table()[0][1] == 6000
    assert cursor.displayed_cost_table()[0][2] is None


def test_cursor_completes_with_final_tables() -> None:
    cursor, dims = _cursor([30, 35, 15, 5, 10, 20, 25])
    while cursor.advance() is not None:
        pass
    assert cursor.is_complete
    cost, split = cursor.displayed_tables()
    order = compute_order(dims)
    assert cost == order.cost
    assert split == order.split


def test_cursor_seek_and_restart() -> None:
    cursor, _ = _cursor([10, 20, 30, 40])
    cursor.advance()
    cursor.advance()
    saved = cursor.position
    cursor.restart()
    assert cursor.position == 0
    cursor.seek(saved)
    assert cursor.current.j - cursor.current.i == 1
    with pytest.raises(ValueError):
        cursor.seek(len(cursor) + 1)


def test_replayer_pauses_after_max_steps() -> None:
    cursor, _ = _cursor([10, 20, 30, 40])
    seen = []
    completed = []
    callbacks = ReplayCallbacks(on_step=seen.append, on_complete=lambda: completed.append(True))
    replayer = StepReplayer(cursor)

    assert replayer.run(callbacks, max_steps=2) == 2
    assert not completed
    assert replayer.run(callbacks) == 1
    assert completed == [True]
    assert [(s.i, s.j) for s in seen] == [(0, 1), (1, 2), (0, 2)]

    stats = replayer.profiler.snapshot()
    assert stats.cells_filled == 3
    assert stats.candidates_evaluated == 4
    assert "replay" in stats.events


def test_replayer_completes_empty_trace() -> None:
    cursor, _ = _cursor([5, 10])
    completed = []
    delivered = StepReplayer(cursor).run(
        ReplayCallbacks(on_step=lambda step: None, on_complete=lambda: completed.append(True))
    )
    assert delivered == 0
    assert completed == [True]


def test_replayer_rejects_negative_budget() -> None:
    cursor, _ = _cursor([10, 20, 30])
    with pytest.raises(ValueError):
        StepReplayer(cursor).run(ReplayCallbacks(on_step=lambda step: None), max_steps=-1)


def test_replayer_reports_completion_once_per_pass() -> None:
    for values in ([5, 10], [10, 20, 30]):
        cursor, _ = _cursor(values)
        completed = []
        replayer = StepReplayer(cursor)
        callbacks = ReplayCallbacks(on_step=lambda step: None, on_complete=lambda: completed.append(True))

        replayer.run(callbacks)
        replayer.run(callbacks)
        assert completed == [True]

        cursor.restart()
        replayer.run(callbacks)
        expected = [True, True] if len(cursor) else [True]
        assert completed == expected
