"""
scheduler.py — Cooperative Step Scheduler
==========================================
A tiny timer queue for the player's self-rescheduling step loop.

Nothing here runs on its own thread.  Callbacks only fire when the owner
calls run_due() (the web app does it on every state poll) or run_next()
(tests do, to step without waiting).  That keeps the driver
single-threaded: one callback runs to completion before the next starts.

Timing:
  - call_later(delay, cb) is due at  now + delay.
  - While a callback is firing, "now" is that callback's due time, so a
    chain of steps scheduled from inside callbacks keeps its cadence even
    when the poll arrives late.  A late poll catches up, in order.
  - Cancellation is best-effort from the caller's point of view; owners
    that care about stale callbacks must check their own liveness token.

Usage:
    sched = Scheduler()
    handle = sched.call_later(0.3, step)
    ...
    sched.run_due()          # from your event loop / request handler
"""

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass(order=True)
class TimerHandle:
    due:       float
    seq:       int
    callback:  Callable[[], None] = field(compare=False)
    cancelled: bool               = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    """
    Attributes:
        clock : Zero-arg callable returning monotonic seconds.
                Tests inject a fake clock here.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._queue:   List[TimerHandle] = []
        self._counter                    = itertools.count()
        self._firing:  Optional[float]   = None   # due time of the callback running now

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------
    def now(self) -> float:
        if self._firing is not None:
            return self._firing
        return self.clock()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule `callback` to run `delay` seconds from now."""
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        handle = TimerHandle(self.now() + delay, next(self._counter), callback)
        heapq.heappush(self._queue, handle)
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        if handle is not None:
            handle.cancel()

    # ------------------------------------------------------------------
    # Firing
    # ------------------------------------------------------------------
    def run_due(self) -> int:
        """Fire every callback due by the clock's current time.  Returns the count."""
        deadline = self.clock()
        fired = 0
        while True:
            handle = self._pop_live()
            if handle is None:
                break
            if handle.due > deadline:
                heapq.heappush(self._queue, handle)
                break
            self._fire(handle)
            fired += 1
        return fired

    def run_next(self) -> bool:
        """Fire the earliest pending callback regardless of the clock."""
        handle = self._pop_live()
        if handle is None:
            return False
        self._fire(handle)
        return True

    def run_until_idle(self, limit: int = 100_000) -> int:
        """Fire callbacks until none are pending.  `limit` guards runaway loops."""
        fired = 0
        while fired < limit and self.run_next():
            fired += 1
        return fired

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def pending(self) -> int:
        return sum(1 for h in self._queue if not h.cancelled)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _pop_live(self) -> Optional[TimerHandle]:
        while self._queue:
            handle = heapq.heappop(self._queue)
            if not handle.cancelled:
                return handle
        return None

    def _fire(self, handle: TimerHandle) -> None:
        previous, self._firing = self._firing, handle.due
        try:
            handle.callback()
        finally:
            self._firing = previous
