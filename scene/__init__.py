"""
scene/
------
Visual data layer.  Public API:

    from scene import Scene, BarElement, BarState, SceneInvariantError
    from scene import build_scene, PlayerContainer
"""

from scene.element   import BarElement, BarState
from scene.scene     import Scene, SceneInvariantError
from scene.builder   import build_scene
from scene.container import PlayerContainer, PLACEHOLDER_TEXT

__all__ = [
    "BarElement", "BarState",
    "Scene",      "SceneInvariantError",
    "build_scene",
    "PlayerContainer", "PLACEHOLDER_TEXT",
]
