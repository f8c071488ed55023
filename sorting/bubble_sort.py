"""
bubble_sort.py — Bubble Sort as a Step Function
================================================
Bubble sort broken into the two halves of one animation step:

    tick(state)     – start of a step: finished?  paused?  otherwise
                      compare list[i] with list[i + 1] and swap if needed.
    advance(state)  – end of a step (after the interval delay): move the
                      comparison index, closing the pass when it reaches
                      the end of the unsorted region.

The driver wraps these in a timer loop; tests call them directly.

Design decisions:
  - RunState is the only thing these functions touch.  No scene, no timer,
    no callbacks, so every invariant can be checked without a clock.
  - Equal neighbours never swap (stable, no-op comparison).
  - There is no early exit on a pass without swaps: a list of length n
    always takes n - 1 passes, which is what the animation shows.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


# ---------------------------------------------------------------------------
# Pseudocode — index = line shown in the player's side panel
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(list):",                          # 0
    "    for remaining in len(list) - 1 down to 1:",   # 1
    "        for i in 0 .. remaining - 1:",            # 2
    "            if list[i] > list[i + 1]:",           # 3
    "                swap(list[i], list[i + 1])",      # 4
]

COMPARE_LINE = 3
SWAP_LINE    = 4


# ---------------------------------------------------------------------------
# Run state
# ---------------------------------------------------------------------------
@dataclass
class RunState:
    """
    Attributes:
        values                : The working list.  Only tick() mutates it.
        loop_index            : Comparison offset within the active pass.
        remaining_repetitions : Passes still required.
        paused                : When True, tick() suspends instead of comparing.
        comparisons           : Comparisons performed so far.
        swaps                 : Swaps performed so far.
        passes                : Passes completed so far.
    """

    values:                List[float] = field(default_factory=list)
    loop_index:            int         = 0
    remaining_repetitions: int         = 0
    paused:                bool        = False
    comparisons:           int         = 0
    swaps:                 int         = 0
    passes:                int         = 0

    @classmethod
    def fresh(cls, values: List[float]) -> "RunState":
        return cls(values=list(values), remaining_repetitions=max(len(values) - 1, 0))

    @property
    def is_sorted(self) -> bool:
        return self.loop_index >= self.remaining_repetitions


# ---------------------------------------------------------------------------
# Step outcome
# ---------------------------------------------------------------------------
class StepAction(Enum):
    CONTINUE = "continue"   # compared (and maybe swapped); schedule the next step
    SUSPEND  = "suspend"    # paused; do not schedule anything
    COMPLETE = "complete"   # sort finished; terminal


@dataclass(frozen=True)
class StepOutcome:
    action:  StepAction
    left:    Optional[int] = None   # data index of the left element of the pair
    right:   Optional[int] = None
    swapped: bool          = False


# ---------------------------------------------------------------------------
# Step functions
# ---------------------------------------------------------------------------
def tick(state: RunState) -> StepOutcome:
    """
    First half of a step.

    Returns COMPLETE when no comparisons remain, SUSPEND when paused (with
    the pair that would have been compared, if any), otherwise performs
    the comparison and returns CONTINUE with the swap result.
    """
    if state.is_sorted:
        # completion waits for resume, a paused run never finishes
        if state.paused:
            return StepOutcome(StepAction.SUSPEND)
        return StepOutcome(StepAction.COMPLETE)

    left  = state.loop_index
    right = left + 1

    if state.paused:
        return StepOutcome(StepAction.SUSPEND, left, right)

    values  = state.values
    swapped = values[left] > values[right]
    if swapped:
        values[left], values[right] = values[right], values[left]
        state.swaps += 1
    state.comparisons += 1

    return StepOutcome(StepAction.CONTINUE, left, right, swapped)


def advance(state: RunState) -> bool:
    """
    Second half of a step.  Returns True if this closed a pass, in which
    case the unsorted region shrinks by one and the index restarts at 0.
    """
    state.loop_index += 1
    if state.loop_index < state.remaining_repetitions:
        return False

    state.remaining_repetitions -= 1
    state.loop_index = 0
    state.passes    += 1
    return True


def sort_passes(values: List[float]) -> RunState:
    """Run tick/advance to completion without any timing; returns the final state."""
    state = RunState.fresh(values)
    while tick(state).action is StepAction.CONTINUE:
        advance(state)
    return state
