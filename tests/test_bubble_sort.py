import random

import pytest

from sorting import RunState, StepAction, advance, sort_passes, tick


def test_fresh_state_counts_passes():
    assert RunState.fresh([4, 2, 9, 1]).remaining_repetitions == 3
    assert RunState.fresh([1]).remaining_repetitions == 0
    assert RunState.fresh([]).remaining_repetitions == 0


def test_fresh_state_copies_values():
    values = [3, 1]
    state = RunState.fresh(values)
    tick(state)
    assert values == [3, 1]
    assert state.values == [1, 3]


def test_scenario_five_three_eight():
    state = RunState.fresh([5, 3, 8])
    trace = []
    while True:
        outcome = tick(state)
        if outcome.action is StepAction.COMPLETE:
            break
        trace.append((outcome.left, outcome.right, outcome.swapped, list(state.values)))
        advance(state)

    assert trace == [
        (0, 1, True,  [3, 5, 8]),
        (1, 2, False, [3, 5, 8]),
        (0, 1, False, [3, 5, 8]),
    ]
    assert state.comparisons == 3
    assert state.passes == 2
    assert state.swaps == 1


def test_single_value_completes_immediately():
    state = RunState.fresh([1])
    assert tick(state).action is StepAction.COMPLETE
    assert state.comparisons == 0
    assert state.passes == 0


def test_empty_list_completes_immediately():
    assert tick(RunState.fresh([])).action is StepAction.COMPLETE


def test_equal_values_never_swap():
    state = sort_passes([2, 2, 2])
    assert state.values == [2, 2, 2]
    assert state.swaps == 0
    assert state.passes == 2
    assert state.comparisons == 3


def test_paused_tick_suspends_without_comparing():
    state = RunState.fresh([9, 1])
    state.paused = True
    outcome = tick(state)
    assert outcome.action is StepAction.SUSPEND
    assert (outcome.left, outcome.right) == (0, 1)
    assert state.values == [9, 1]
    assert state.comparisons == 0


def test_paused_tick_on_sorted_state_does_not_complete():
    state = RunState.fresh([1])
    state.paused = True
    outcome = tick(state)
    assert outcome.action is StepAction.SUSPEND
    assert outcome.left is None


def test_advance_closes_pass_at_boundary():
    state = RunState.fresh([3, 2, 1])
    assert advance(state) is False
    assert state.loop_index == 1
    assert advance(state) is True
    assert state.loop_index == 0
    assert state.remaining_repetitions == 1
    assert state.passes == 1


@pytest.mark.parametrize("seed", range(10))
def test_sort_passes_sorts_random_lists(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 50) for _ in range(rng.randint(0, 15))]
    state = sort_passes(values)
    n = len(values)
    assert state.values == sorted(values)
    assert state.passes == max(n - 1, 0)
    assert state.comparisons == n * (n - 1) // 2
