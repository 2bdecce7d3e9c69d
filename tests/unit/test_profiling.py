from __future__ import annotations

from chain_reactions.runtime.profiling import Profiler


def test_profiler_records_stats() -> None:
    profiler = Profiler()

    profiler.record_cell(1)
    profiler.record_cell(3)
    profiler.record_event("replay", 1.5)
    profiler.record_event("replay", 0.5)

    stats = profiler.snapshot()
    assert stats.cells_filled == 2
    assert stats.candidates_evaluated == 4
    assert stats.events["replay"] == 2.0
