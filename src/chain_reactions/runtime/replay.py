from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Callable, List, Optional, Sequence

from chain_reactions.schedule.order import CostTable, SplitTable, empty_tables
from chain_reactions.schedule.steps import FillStep
from chain_reactions.runtime.profiling import Profiler
from chain_reactions.utils.logging import logger


class ReplayCursor:
    """
    Position within a fixed list of fill steps.

    Pausing is not advancing; restarting is seeking to 0. The position is a
    plain int, so it can be saved and restored with :meth:`seek`.
    """

    def __init__(self, steps: Sequence[FillStep], num_matrices: int) -> None:
        self.steps: List[FillStep] = list(steps)
        self.num_matrices = num_matrices
        self.position = 0

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def is_complete(self) -> bool:
        return self.position >= len(self.steps)

    @property
    def current(self) -> Optional[FillStep]:
        """The step applied most recently, or None before the first one."""
        if self.position == 0:
            return None
        return self.steps[self.position - 1]

    def advance(self) -> Optional[FillStep]:
        """Apply the next step and return it, or None when complete."""
        if self.is_complete:
            return None
        step = self.steps[self.position]
        self.position += 1
        return step

    def seek(self, position: int) -> None:
        if not 0 <= position <= len(self.steps):
            raise ValueError(f"Position {position} outside [0, {len(self.steps)}].")
        self.position = position

    def restart(self) -> None:
        self.seek(0)

    def displayed_tables(self) -> tuple[CostTable, SplitTable]:
        """Tables as a viewer sees them: unfilled cells are None."""
        cost, split = empty_tables(self.num_matrices)
        for step in self.steps[: self.position]:
            cost[step.i][step.j] = step.result_cost
            split[step.i][step.j] = step.chosen_k
        return cost, split

    def displayed_cost_table(self) -> CostTable:
        return self.displayed_tables()[0]


@dataclass
class ReplayCallbacks:
    """
    Callbacks supplied by a presentation layer.

    Args:
        on_step: Called with each step as it is applied.
        on_complete: Optional hook once the last step has been applied.
    """

    on_step: Callable[[FillStep], None]
    on_complete: Optional[Callable[[], None]] = None


class StepReplayer:
    """
    Drives callbacks over a cursor. Delivery pacing belongs to the caller,
    which decides how many steps to request per call.
    """

    def __init__(self, cursor: ReplayCursor) -> None:
        self.cursor = cursor
        self.profiler = Profiler()
        self._completed = False

    def run(self, callbacks: ReplayCallbacks, *, max_steps: Optional[int] = None) -> int:
        """
        Apply up to ``max_steps`` steps (all remaining when None).

        Returns:
            Number of steps delivered by this call.
        """
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps must be non-negative.")

        if not self.cursor.is_complete:
            # one completion per pass; restart or seek starts a new pass
            self._completed = False

        delivered = 0
        start = perf_counter()
        while max_steps is None or delivered < max_steps:
            step = self.cursor.advance()
            if step is None:
                break
            self.profiler.record_cell(len(step.candidates))
            callbacks.on_step(step)
            delivered += 1
        self.profiler.record_event("replay", (perf_counter() - start) * 1000.0)

        logger.debug("replayed %d steps (position %d/%d)", delivered, self.cursor.position, len(self.cursor))
        if self.cursor.is_complete and not self._completed:
            self._completed = True
            if callbacks.on_complete:
                callbacks.on_complete()
        return delivered
