"""
Lightweight replay profiling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class ProfileStats:
    cells_filled: int = 0
    candidates_evaluated: int = 0
    events: Dict[str, float] = field(default_factory=dict)


class Profiler:
    def __init__(self) -> None:
        self.stats = ProfileStats()

    def record_cell(self, num_candidates: int) -> None:
        self.stats.cells_filled += 1
        self.stats.candidates_evaluated += num_candidates

    def record_event(self, name: str, duration_ms: float) -> None:
        self.stats.events[name] = self.stats.events.get(name, 0.0) + duration_ms

    def snapshot(self) -> ProfileStats:
        return self.stats
