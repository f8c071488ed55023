"""
driver.py — Bubble Sort Animation Driver
=========================================
The driver is the ONLY object the control surface talks to.  It owns the
run state, the settings, the scene of the current run and the single
scheduled step, and exposes play / pause / stop / on_sort_completed.

One step, split across the interval delay:

    _step()          tick(state) → COMPLETE / SUSPEND / CONTINUE
                     mark the compared pair CURRENT, swap bars if the
                     values were swapped, schedule _finish_step
    _finish_step()   advance(state), settle the pass boundary bar or
                     clear the emphasis, then _step() again

Every scheduled callback carries the generation it was created for.
stop() and a restarting play() bump the generation, so a callback that
was already dequeued when its handle got cancelled does nothing.

Thread safety:
  Not thread-safe.  Call play/pause/stop and run the scheduler from one
  thread (the web app serialises requests with a lock).
"""

import logging
from functools import partial
from typing import Any, Callable, List, Mapping, Optional, Sequence

from engine.scheduler import Scheduler, TimerHandle
from engine.settings import DEFAULT_SETTINGS, Settings
from engine.state import DriverStatus, RunMetrics
from scene import BarElement, BarState, PlayerContainer, Scene, build_scene
from sorting import (
    COMPARE_LINE,
    SWAP_LINE,
    RunState,
    StepAction,
    advance,
    generate_list,
    tick,
)

logger = logging.getLogger(__name__)


ListGenerator = Callable[[int, float], Sequence[float]]
SceneBuilder  = Callable[[Sequence[float], Settings], Scene]


class BubbleSortDriver:
    """
    Attributes:
        container      : PlayerContainer the scene is shown in.
        scheduler      : Scheduler the step loop is chained on.
        settings       : Settings of the current (or next) run.
        state          : RunState of the current run, None when idle.
        status         : Current DriverStatus.
        current_line   : Pseudocode line of the last step (-1 when idle).
    """

    def __init__(
        self,
        container: PlayerContainer,
        scheduler: Scheduler,
        settings: Settings = DEFAULT_SETTINGS,
        list_generator: ListGenerator = generate_list,
        scene_builder: SceneBuilder = build_scene,
    ):
        self.container    = container
        self.scheduler    = scheduler
        self.settings     = settings
        self.state:  Optional[RunState]   = None
        self.status: DriverStatus         = DriverStatus.IDLE
        self.current_line: int            = -1

        self._list_generator = list_generator
        self._scene_builder  = scene_builder
        self._generation:  int                         = 0
        self._pending:     Optional[TimerHandle]       = None
        self._subscribers: List[Callable[[], None]]    = []

        self.container.set_max_bar_height(settings.max_bar_height)
        self.container.show_placeholder()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def play(self, overrides: Optional[Mapping[str, Any]] = None) -> None:
        """
        Resume a paused run, or start a fresh one.

        A fresh run merges `overrides` into the settings, generates a new
        list and runs the first step right away.  Calling play() while a
        run is active and not paused cancels it and starts over.  When
        resuming, `overrides` is ignored.
        """
        if self.status is DriverStatus.PAUSED:
            self._resume()
            return

        # build everything that can fail before the current run is cancelled
        settings = self.settings.merged(overrides)
        values = list(self._list_generator(int(settings.list_length), settings.max_bar_height))

        if self.status is DriverStatus.RUNNING:
            logger.info("play() during an active run; restarting")
        self._cancel_run()

        self.settings = settings
        self.state  = RunState.fresh(values)
        self.status = DriverStatus.RUNNING
        self.container.set_max_bar_height(settings.max_bar_height)
        self.container.show_placeholder()

        logger.info(
            "Run %d started: %d values, %s ms per step",
            self._generation, len(values), settings.step_interval_ms,
        )
        self._step(self._generation)

    def pause(self) -> None:
        """Suspend progression.  The step already scheduled still fires and parks the loop."""
        if self.status is not DriverStatus.RUNNING:
            return
        self.state.paused = True
        self.status = DriverStatus.PAUSED
        logger.info("Run %d paused", self._generation)

    def stop(self) -> None:
        """Discard the run and go back to the idle placeholder.  Subscribers are kept."""
        if self.status is not DriverStatus.IDLE:
            logger.info("Run %d stopped", self._generation)
        self._cancel_run()
        self.state  = None
        self.status = DriverStatus.IDLE
        self.current_line = -1
        self.container.show_placeholder()

    def on_sort_completed(self, callback: Callable[[], None]) -> None:
        """
        Register a zero-arg callback, run once per completed sort.

        Every subscriber registered at completion time is notified, in
        order, even if an earlier one calls play() or stop(): the sort did
        complete.  Check `status` inside a callback to see whether a new
        run has already started.
        """
        self._subscribers.append(callback)

    def metrics(self) -> RunMetrics:
        state = self.state
        if state is None:
            return RunMetrics(status=self.status.value)
        n = len(state.values)
        return RunMetrics(
            status=self.status.value,
            list_length=n,
            comparisons=state.comparisons,
            swaps=state.swaps,
            passes=state.passes,
            total_passes=max(n - 1, 0),
            expected_comparisons=n * (n - 1) // 2,
            values=list(state.values),
        )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def generation(self) -> int:
        return self._generation

    @property
    def has_pending_step(self) -> bool:
        return self._pending is not None

    @property
    def is_running(self) -> bool:
        return self.status is DriverStatus.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.status is DriverStatus.PAUSED

    @property
    def is_completed(self) -> bool:
        return self.status is DriverStatus.COMPLETED

    # ------------------------------------------------------------------
    # Step loop
    # ------------------------------------------------------------------
    def _step(self, generation: int) -> None:
        if generation != self._generation:
            logger.debug("Dropping stale step of run %d", generation)
            return
        self._pending = None

        state = self.state
        scene = self._ensure_scene()
        self.container.update_scroll()

        outcome = tick(state)

        if outcome.action is StepAction.COMPLETE:
            self._complete(scene)
            return
        if outcome.left is None:
            # paused right before completion
            return

        left  = scene.find_element_by_index(outcome.left)
        right = scene.find_element_by_index(outcome.right)
        scene.set_visual_state(left,  BarState.CURRENT)
        scene.set_visual_state(right, BarState.CURRENT)

        if outcome.action is StepAction.SUSPEND:
            self.current_line = COMPARE_LINE
            return

        if outcome.swapped:
            scene.swap(left, right)
            self.current_line = SWAP_LINE
        else:
            self.current_line = COMPARE_LINE

        self._pending = self.scheduler.call_later(
            self.settings.step_interval,
            partial(self._finish_step, generation, left, right, outcome.swapped),
        )

    def _finish_step(
        self,
        generation: int,
        left: BarElement,
        right: BarElement,
        swapped: bool,
    ) -> None:
        if generation != self._generation:
            logger.debug("Dropping stale step of run %d", generation)
            return
        self._pending = None

        scene = self.container.scene
        if advance(self.state):
            # the bar that ended up on the right edge of the pass is final
            settled, other = (left, right) if swapped else (right, left)
            scene.set_visual_state(settled, BarState.SETTLED)
            scene.set_visual_state(other,   BarState.DEFAULT)
        else:
            scene.set_visual_state(left,  BarState.DEFAULT)
            scene.set_visual_state(right, BarState.DEFAULT)

        self._step(generation)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _resume(self) -> None:
        self.state.paused = False
        self.status = DriverStatus.RUNNING
        logger.info("Run %d resumed", self._generation)
        # a step still in flight picks the loop up by itself
        if self._pending is None:
            self._step(self._generation)

    def _ensure_scene(self) -> Scene:
        scene = self.container.scene
        if scene is None:
            scene = self._scene_builder(self.state.values, self.settings)
            self.container.show_scene(scene)
        return scene

    def _complete(self, scene: Scene) -> None:
        scene.mark_all(BarState.SETTLED)
        self.status = DriverStatus.COMPLETED
        self.current_line = -1
        state = self.state
        logger.info(
            "Run %d completed: %d comparisons, %d swaps, %d passes",
            self._generation, state.comparisons, state.swaps, state.passes,
        )
        for callback in list(self._subscribers):
            callback()

    def _cancel_run(self) -> None:
        self._generation += 1
        self.scheduler.cancel(self._pending)
        self._pending = None
