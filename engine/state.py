"""
state.py — Driver Status & Run Metrics
=======================================
The lifecycle enum of the driver and the analytics snapshot the UI shows.

State machine:
    IDLE       →  play()          →  RUNNING
    RUNNING    →  pause()         →  PAUSED
    PAUSED     →  play()          →  RUNNING   (resume, same list)
    RUNNING    →  (last pass)     →  COMPLETED
    COMPLETED  →  play()          →  RUNNING   (fresh list)
    any        →  stop()          →  IDLE
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class DriverStatus(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    PAUSED    = "paused"
    COMPLETED = "completed"


@dataclass
class RunMetrics:
    status:               str         = DriverStatus.IDLE.value
    list_length:          int         = 0
    comparisons:          int         = 0
    swaps:                int         = 0
    passes:               int         = 0
    total_passes:         int         = 0   # n - 1 for a list of n values
    expected_comparisons: int         = 0   # n * (n - 1) / 2
    values:               List[float] = field(default_factory=list)

    @property
    def progress(self) -> float:
        """Fraction of comparisons done, 0.0 – 1.0."""
        if self.expected_comparisons == 0:
            return 1.0 if self.status == DriverStatus.COMPLETED.value else 0.0
        return min(1.0, self.comparisons / self.expected_comparisons)
