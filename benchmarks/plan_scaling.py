"""
Time plan() and the step trace on random chains of growing length.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Sequence

import numpy as np

from benchmarks.utils import (
    BenchmarkResult,
    export_json,
    format_summary_table,
    random_dims,
    run_single_trial,
    summarize,
)
from chain_reactions.chain.dims import validate
from chain_reactions.schedule.planner import plan
from chain_reactions.schedule.steps import StepSequencer


PROFILES = {
    "small": {"sizes": [4, 8, 16], "trials": 5},
    "medium": {"sizes": [16, 32, 64], "trials": 3},
    "large": {"sizes": [64, 128, 200], "trials": 2},
}


def _plan_cost(dims: Sequence[int]) -> int:
    return plan(dims).min_cost


def _steps_cost(dims: Sequence[int]) -> int:
    sequencer = StepSequencer(validate(dims))
    steps = sequencer.steps()
    return steps[-1].result_cost if steps else 0


def run_benchmark(args: argparse.Namespace) -> List[BenchmarkResult]:
    rng = np.random.default_rng(args.seed)
    results: List[BenchmarkResult] = []
    for size in args.sizes:
        for trial in range(args.trials):
            dims = random_dims(rng, size, high=args.max_dim)
            planned = run_single_trial("scaling", "plan", trial, dims=dims, plan_fn=_plan_cost)
            traced = run_single_trial("scaling", "steps", trial, dims=dims, plan_fn=_steps_cost)
            if planned.min_cost != traced.min_cost:
                raise RuntimeError(f"plan and step trace disagree for {dims}")
            results.extend([planned, traced])
    return results


def _apply_profile(args: argparse.Namespace) -> argparse.Namespace:
    if args.profile:
        profile = PROFILES[args.profile]
        args.sizes = profile["sizes"]
        args.trials = profile["trials"]
    return args


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--sizes", type=int, nargs="+", default=[4, 8, 16, 32])
    parser.add_argument("--trials", type=int, default=3)
    parser.add_argument("--max-dim", type=int, default=100)
    parser.add_argument("--seed", type=int, default=1234)
    parser.add_argument("--profile", choices=sorted(PROFILES), default=None)
    parser.add_argument("--export", type=Path, default=None)
    return _apply_profile(parser.parse_args())


def main() -> None:
    args = parse_args()
    results = run_benchmark(args)
    summary = summarize(results)
    print(format_summary_table(summary))
    if args.export:
        export_json(results, args.export)
        print(f"\nSaved raw results to {args.export}")


if __name__ == "__main__":
    main()
