"""Shared fixtures: a hand-driven clock, and a driver wired to fixed lists."""
import pytest

from engine import BubbleSortDriver, Scheduler, Settings
from scene import PlayerContainer


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FixedLists:
    """List generator that hands out prepared lists in order, recording each call."""

    def __init__(self, *lists):
        self.lists = [list(l) for l in lists]
        self.calls = []

    def __call__(self, length, max_value):
        self.calls.append((length, max_value))
        if len(self.lists) > 1:
            return list(self.lists.pop(0))
        return list(self.lists[0])


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock)


@pytest.fixture
def container():
    return PlayerContainer(width=900)


@pytest.fixture
def settings():
    return Settings(step_interval_ms=100)


@pytest.fixture
def make_driver(container, scheduler, settings):
    def _make(*lists, **kwargs):
        generator = FixedLists(*(lists or ([5, 3, 8],)))
        driver = BubbleSortDriver(
            container,
            scheduler,
            settings=kwargs.pop("settings", settings),
            list_generator=generator,
            **kwargs,
        )
        driver.generator = generator
        return driver
    return _make
