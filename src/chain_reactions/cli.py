"""
Plan a matrix chain from the command line and optionally replay the DP fill.
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from chain_reactions.analysis.report import analyze_chain
from chain_reactions.chain.dims import ValidationError, parse_dimensions
from chain_reactions.runtime.replay import ReplayCallbacks, ReplayCursor, StepReplayer
from chain_reactions.schedule.order import CostTable
from chain_reactions.schedule.steps import FillStep, plan_with_steps, steps_by_length
from chain_reactions.utils.config import config
from chain_reactions.utils.logging import configure_logging, logger

EXAMPLES = {
    "simple": "10, 20, 30, 40",
    "medium": "5, 10, 3, 12, 5, 50, 6",
    "complex": "30, 35, 15, 5, 10, 20, 25",
}


def format_table(table: CostTable) -> str:
    cells = [["-" if cell is None else str(cell) for cell in row] for row in table]
    width = max([len(str(len(cells)))] + [len(cell) for row in cells for cell in row])
    header = " " * 4 + " ".join(str(j + 1).rjust(width) for j in range(len(cells)))
    lines = [header]
    for i, row in enumerate(cells):
        lines.append(f"{i + 1:>3} " + " ".join(cell.rjust(width) for cell in row))
    return "\n".join(lines)


def _print_step(step: FillStep) -> None:
    print(f"\nm[{step.i + 1},{step.j + 1}] (chain length {step.chain_length}):")
    for line in step.describe():
        print(f"  {line}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chain-reactions", description=__doc__)
    parser.add_argument("dimensions", nargs="?", help='Comma-separated dimensions, e.g. "10, 20, 30".')
    parser.add_argument("--example", choices=sorted(EXAMPLES), help="Use a preset chain instead.")
    parser.add_argument("--steps", action="store_true", help="Print every fill step.")
    parser.add_argument("--delay", type=float, default=0.0, help="Seconds to wait between steps.")
    parser.add_argument("--json", type=Path, default=None, help="Write the plan and steps as JSON.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging and table checks.")
    args = parser.parse_args(argv)
    if args.dimensions is None and args.example is None:
        parser.error("provide dimensions or --example")
    if args.delay < 0:
        parser.error("--delay must be non-negative")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.debug)
    config.debug = args.debug

    text = EXAMPLES[args.example] if args.example else args.dimensions
    try:
        dims = parse_dimensions(text)
    except ValidationError as exc:
        print(f"error: {exc.reason}", file=sys.stderr)
        return 2

    chain_plan, steps = plan_with_steps(dims)
    report = analyze_chain(chain_plan)
    logger.debug("%d fill steps in %d waves", len(steps), len(steps_by_length(steps)))

    print("Matrices:")
    for matrix in chain_plan.matrices:
        print(f"  {matrix.name}: {matrix.size}")

    if args.steps:
        cursor = ReplayCursor(steps, dims.num_matrices)
        replayer = StepReplayer(cursor)
        while not cursor.is_complete:
            replayer.run(ReplayCallbacks(on_step=_print_step), max_steps=1)
            if args.delay and not cursor.is_complete:
                time.sleep(args.delay)
        stats = replayer.profiler.snapshot()
        print(f"\nFilled {stats.cells_filled} cells, compared {stats.candidates_evaluated} splits.")

    print("\nCost table:")
    print(format_table(chain_plan.cost))
    print("\nSplit table (1-based k):")
    print(format_table([[None if k is None else k + 1 for k in row] for row in chain_plan.split]))
    print(f"\nOptimal parenthesization: {chain_plan.expression}")
    print(f"Minimum scalar multiplications: {chain_plan.min_cost}")
    for note in report.notes:
        print(f"  - {note}")

    if args.json:
        payload = chain_plan.to_dict()
        payload["steps"] = [_step_to_dict(step) for step in steps]
        args.json.parent.mkdir(parents=True, exist_ok=True)
        args.json.write_text(json.dumps(payload, indent=2))
        print(f"\nSaved plan to {args.json}")
    return 0


def _step_to_dict(step: FillStep) -> dict:
    candidates: List[dict] = [
        {
            "k": c.k,
            "left_cost": c.left_cost,
            "right_cost": c.right_cost,
            "pair_cost": c.pair_cost,
            "total_cost": c.total_cost,
        }
        for c in step.candidates
    ]
    return {
        "i": step.i,
        "j": step.j,
        "candidates": candidates,
        "chosen_k": step.chosen_k,
        "result_cost": step.result_cost,
    }


if __name__ == "__main__":
    sys.exit(main())
