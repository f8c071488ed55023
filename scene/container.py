"""
container.py — Player Container
================================
The single surface the driver renders into.  It shows either the idle
placeholder prompt or the scene of the current run, and tracks whether the
scene is wider than the visible area (horizontal scroll).

The container knows nothing about sorting; the driver tells it what to
show.  Width comes from the client (the browser reports its clientWidth).
"""

from typing import Optional

from scene.scene import Scene


PLACEHOLDER_TEXT = 'Press "Play" button to start'

# extra room above the tallest bar for labels and padding
HEIGHT_PADDING = 150


class PlayerContainer:
    """
    Attributes:
        width       : Visible width in pixels.
        height      : Fixed height, derived from max_bar_height.
        scene       : The scene being shown, or None when idle.
        scroll_x    : True when the scene does not fit horizontally.
        placeholder : Text shown while idle.
    """

    def __init__(self, width: float = 900, max_bar_height: float = 200):
        self.width:       float           = width
        self.height:      float           = max_bar_height + HEIGHT_PADDING
        self.scene:       Optional[Scene] = None
        self.scroll_x:    bool            = False
        self.placeholder: str             = PLACEHOLDER_TEXT

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------
    def show_placeholder(self) -> None:
        self.scene    = None
        self.scroll_x = False

    def show_scene(self, scene: Scene) -> None:
        self.scene = scene

    @property
    def is_idle(self) -> bool:
        return self.scene is None

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def resize(self, width: float) -> None:
        if width > 0:
            self.width = width
        self.update_scroll()

    def set_max_bar_height(self, max_bar_height: float) -> None:
        self.height = max_bar_height + HEIGHT_PADDING

    def update_scroll(self) -> None:
        """Allow horizontal scroll when the container can not show all bars."""
        if self.scene is None:
            self.scroll_x = False
            return
        self.scroll_x = not self.width > self.scene.width
