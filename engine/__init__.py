"""
engine/
-------
Playback layer: settings, scheduling and the animation driver.

    from engine import BubbleSortDriver, Scheduler, Settings
"""

from engine.settings  import Settings, DEFAULT_SETTINGS, SPEED_PRESETS
from engine.state     import DriverStatus, RunMetrics
from engine.scheduler import Scheduler, TimerHandle
from engine.driver    import BubbleSortDriver

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
    "SPEED_PRESETS",
    "DriverStatus",
    "RunMetrics",
    "Scheduler",
    "TimerHandle",
    "BubbleSortDriver",
]
