"""
sorting/
--------
Algorithm layer.  Everything here is pure: no timers, no scenes.

    from sorting import generate_list, RunState, tick, advance, StepAction
"""

from sorting.data        import generate_list
from sorting.bubble_sort import (
    PSEUDOCODE,
    COMPARE_LINE,
    SWAP_LINE,
    RunState,
    StepAction,
    StepOutcome,
    tick,
    advance,
    sort_passes,
)

__all__ = [
    "generate_list",
    "PSEUDOCODE",
    "COMPARE_LINE",
    "SWAP_LINE",
    "RunState",
    "StepAction",
    "StepOutcome",
    "tick",
    "advance",
    "sort_passes",
]
