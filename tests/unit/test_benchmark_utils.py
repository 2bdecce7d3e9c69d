from __future__ import annotations

from benchmarks.utils import (
    BenchmarkResult,
    format_summary_table,
    random_dims,
    run_single_trial,
    summarize,
)


def test_summarize_and_format_table() -> None:
    results = [
        BenchmarkResult("demo", "plan", 0, num_matrices=4, wall_time_s=0.5, min_cost=10),
        BenchmarkResult("demo", "plan", 1, num_matrices=4, wall_time_s=0.7, min_cost=12),
        BenchmarkResult("demo", "steps", 0, num_matrices=4, wall_time_s=0.8, min_cost=10),
    ]

    summary = summarize(results)
    table = format_summary_table(summary)

    assert [row["mode"] for row in summary] == ["plan", "steps"]
    assert summary[0]["trials"] == 2
    assert summary[0]["wall_time_max_s"] == 0.7
    assert "num_matrices" in table


def test_run_single_trial_records_cost(rng) -> None:
    dims = random_dims(rng, 5)
    assert len(dims) == 6
    assert all(1 <= d <= 100 for d in dims)

    result = run_single_trial("demo", "plan", 0, dims=dims, plan_fn=lambda d: 42)
    assert result.num_matrices == 5
    assert result.min_cost == 42
    assert result.wall_time_s >= 0.0


def test_format_summary_table_empty() -> None:
    assert format_summary_table([]) == "No results recorded."
