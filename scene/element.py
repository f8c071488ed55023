from enum import Enum
from typing import Dict, Any


# ---------------------------------------------------------------------------
# Bar State Enum — maps 1-to-1 with the CSS classes of the player
# ---------------------------------------------------------------------------
class BarState(Enum):
    DEFAULT  = "bar"       # neutral
    CURRENT  = "current"   # one of the pair being compared RIGHT NOW
    SETTLED  = "swapped"   # in its final position (pass boundary / sort done)


# ---------------------------------------------------------------------------
# BarElement
# ---------------------------------------------------------------------------
class BarElement:
    """
    One bar of the scene: a rect plus its numeric label.

    Attributes:
        tag     : Data index this bar currently represents.  Changes on swap.
        x       : Horizontal offset along the player (pixels).  Changes on swap.
        value   : The list value the bar was built from (never changes).
        width   : Rendered rect width (bar_width).
        height  : Rendered rect height, value capped at max_bar_height.
        y       : Top of the rect (max_bar_height - height).
        label   : Text drawn under the bar.
        state   : Current BarState for visual encoding.
    """

    __slots__ = ("tag", "x", "value", "width", "height", "y", "label", "state")

    def __init__(
        self,
        tag: int,
        x: float,
        value: float,
        height: float,
        width: float = 30,
        y: float = 0.0,
        label: str = "",
    ):
        self.tag: int         = tag
        self.x: float         = x
        self.value: float     = value
        self.width: float     = width
        self.height: float    = height
        self.y: float         = y
        self.label: str       = label or str(value)
        self.state: BarState  = BarState.DEFAULT

    # ------------------------------------------------------------------
    # Class helpers
    # ------------------------------------------------------------------
    @property
    def css_class(self) -> str:
        if self.state is BarState.DEFAULT:
            return "bar"
        return f"bar {self.state.value}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag":    self.tag,
            "x":      self.x,
            "value":  self.value,
            "height": self.height,
            "label":  self.label,
            "state":  self.state.value,
        }

    def __repr__(self) -> str:
        return f"BarElement(tag={self.tag}, value={self.value}, x={self.x}, state={self.state.value})"
