from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from statistics import mean
from time import perf_counter
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np


@dataclass
class BenchmarkResult:
    """
    Structured summary for a single benchmark trial.
    """

    benchmark: str
    mode: str
    trial: int
    num_matrices: int
    wall_time_s: float
    min_cost: int
    extra_metrics: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        result = asdict(self)
        return result


def random_dims(rng: np.random.Generator, num_matrices: int, *, low: int = 1, high: int = 100) -> List[int]:
    """
    Draw ``num_matrices + 1`` dimensions uniformly from [low, high].
    """
    return [int(v) for v in rng.integers(low, high + 1, size=num_matrices + 1)]


def run_single_trial(
    benchmark_name: str,
    mode: str,
    trial: int,
    *,
    dims: Sequence[int],
    plan_fn: Callable[[Sequence[int]], int],
    extra_metrics: Optional[Dict[str, float]] = None,
) -> BenchmarkResult:
    """
    Time one planning call.

    Args:
        benchmark_name: Label for the benchmark family (e.g. "scaling").
        mode: Planning mode ("plan", "steps", etc.).
        trial: Integer trial index.
        dims: Dimension sequence to plan.
        plan_fn: Callable returning the minimum cost for ``dims``.
        extra_metrics: Optional dictionary of custom metrics to attach.
    """
    start = perf_counter()
    min_cost = plan_fn(dims)
    wall = perf_counter() - start

    return BenchmarkResult(
        benchmark=benchmark_name,
        mode=mode,
        trial=trial,
        num_matrices=len(dims) - 1,
        wall_time_s=wall,
        min_cost=int(min_cost),
        extra_metrics=extra_metrics or {},
    )


def summarize(results: Sequence[BenchmarkResult]) -> List[dict]:
    """
    Aggregate benchmark results by mode and chain size for printing.
    """
    summaries: List[dict] = []
    groups: dict[tuple[str, int], List[BenchmarkResult]] = {}
    for res in results:
        groups.setdefault((res.mode, res.num_matrices), []).append(res)

    for (mode, num_matrices), group in sorted(groups.items(), key=lambda kv: kv[0]):
        summaries.append(
            {
                "mode": mode,
                "num_matrices": num_matrices,
                "trials": len(group),
                "wall_time_mean_s": mean(r.wall_time_s for r in group),
                "wall_time_max_s": max(r.wall_time_s for r in group),
            }
        )
    return summaries


def export_json(results: Sequence[BenchmarkResult], destination: Path) -> None:
    """
    Write raw benchmark results to JSON for later analysis.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    payload = [res.to_dict() for res in results]
    destination.write_text(json.dumps(payload, indent=2))


def _format_value(value: Optional[float]) -> str:
    if value is None:
        return "N/A"
    return f"{value:.4f}"


def format_summary_table(summary: Sequence[dict]) -> str:
    """
    Format aggregated summaries into a readable table.
    """
    if not summary:
        return "No results recorded."

    headers = [
        "mode",
        "num_matrices",
        "trials",
        "wall_time_mean_s",
        "wall_time_max_s",
    ]

    col_widths: dict[str, int] = {}
    for header in headers:
        max_len = len(header)
        for row in summary:
            value = row[header]
            cell = (
                _format_value(value)
                if isinstance(value, (float, type(None)))
                else str(value)
            )
            max_len = max(max_len, len(cell))
        col_widths[header] = max_len

    def format_cell(h: str, value: object) -> str:
        if isinstance(value, (float, type(None))):
            return _format_value(value).ljust(col_widths[h])
        return str(value).ljust(col_widths[h])

    lines = [
        " | ".join(h.ljust(col_widths[h]) for h in headers),
        "-+-".join("-" * col_widths[h] for h in headers),
    ]
    for row in summary:
        lines.append(" | ".join(format_cell(h, row[h]) for h in headers))
    return "\n".join(lines)
