"""
settings.py — Player Settings
==============================
Layout and timing knobs for one run of the player.

Settings is frozen: a run keeps the instance it started with, and every
play() builds a new one via merged().  Overrides arrive either as Python
keyword names (``step_interval_ms``) or as the camelCase names the browser
sends (``stepIntervalMs``).
"""

import math
from dataclasses import dataclass, fields, replace
from numbers import Real
from typing import Any, Dict, Mapping, Optional


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS: Dict[str, int] = {
    "slow":   1000,   # teaching mode
    "medium": 300,
    "fast":   100,    # demo mode
    "turbo":  30,
}


# camelCase (browser) → field name
ALIASES: Dict[str, str] = {
    "maxBarHeight":   "max_bar_height",
    "barWidth":       "bar_width",
    "barSpacing":     "bar_spacing",
    "textOffset":     "text_offset",
    "stepIntervalMs": "step_interval_ms",
    "animationSpeed": "step_interval_ms",
    "listLength":     "list_length",
}


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Settings:
    """
    Attributes:
        max_bar_height   : Height cap of a single bar; also the max generated value.
        bar_width        : Width of a single bar.
        bar_spacing      : Gap between neighbouring bars.
        text_offset      : Vertical distance between the bar area and its label.
        step_interval_ms : Delay between two animation steps.
        list_length      : Number of values to generate and sort.
    """

    max_bar_height:   float = 200
    bar_width:        float = 30
    bar_spacing:      float = 5
    text_offset:      float = 20
    step_interval_ms: float = 300
    list_length:      int   = 10

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value!r}")
            if value <= 0:
                raise ValueError(f"{f.name} must be positive, got {value!r}")
        if int(self.list_length) != self.list_length:
            raise ValueError(f"list_length must be an integer, got {self.list_length!r}")

    @property
    def step_interval(self) -> float:
        """Step delay in seconds."""
        return self.step_interval_ms / 1000.0

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "Settings":
        """Return a copy with `overrides` applied.  Unknown keys raise ValueError."""
        if not overrides:
            return self
        return replace(self, **normalise_overrides(overrides))

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_SETTINGS = Settings()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def normalise_overrides(overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map camelCase keys to field names, resolve a ``speed`` preset into
    step_interval_ms, and drop None values (= "keep current").
    """
    known = {f.name for f in fields(Settings)}
    out: Dict[str, Any] = {}

    for key, value in overrides.items():
        if value is None:
            continue
        if key == "speed":
            if value not in SPEED_PRESETS:
                raise ValueError(f"Unknown speed preset: {value!r}")
            out["step_interval_ms"] = SPEED_PRESETS[value]
            continue
        name = ALIASES.get(key, key)
        if name not in known:
            raise ValueError(f"Unknown setting: {key!r}")
        out[name] = value

    return out
