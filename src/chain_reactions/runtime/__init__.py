"""
Runtime support for replaying fill traces.

This layer is responsible for:
- Tracking a replay position that can pause, resume, seek and restart.
- Delivering steps to presentation callbacks.
- Counting the work replayed.
"""

from .replay import ReplayCallbacks, ReplayCursor, StepReplayer
from .profiling import Profiler, ProfileStats

__all__ = [
    "ReplayCallbacks",
    "ReplayCursor",
    "StepReplayer",
    "Profiler",
    "ProfileStats",
]
