"""
ui/
---
Presentation layer.

    from ui import render_player, render_scene
    from ui import playback_controls, settings_panel, …
"""

from ui.canvas import render_scene, render_player, player_classes, CanvasConfig

from ui.controls import (
    button_states,
    playback_controls,
    settings_panel,
    analytics_panel,
    pseudocode_viewer,
)

__all__ = [
    "render_scene",
    "render_player",
    "player_classes",
    "CanvasConfig",
    "button_states",
    "playback_controls",
    "settings_panel",
    "analytics_panel",
    "pseudocode_viewer",
]
