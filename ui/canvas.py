"""
canvas.py — SVG Bar Renderer
=============================
Pure rendering functions: Scene → SVG string, PlayerContainer → HTML.

The renderer consumes:
  • scene      – the Scene of the current run (bar positions, tags, states)
  • config     – visual config (palette, corner radius, fonts, …)

And produces markup ready to inject into the DOM.

Design decisions:
  - NO mutation.  The driver mutates the scene; this module only reads it.
  - Each bar is an SVG <g> carrying its CSS class and data-index tag, with
    the rect and label inside, translated along x.  The page's CSS colours
    the bar by class, and the inline fill here keeps the SVG readable on
    its own (e.g. when saved to a file).
  - The wrapper gets the `scroll-x` class when the scene is wider than the
    container, mirroring PlayerContainer.scroll_x.
"""

import html
from typing import Dict

from scene import BarElement, BarState, PlayerContainer, Scene


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    bg: str = "#0d1117"

    # bar colors (state → fill)
    bar_colors: Dict[str, str] = {
        BarState.DEFAULT.value: "#0ea5e9",   # cyan blue
        BarState.CURRENT.value: "#f59e0b",   # amber — pair being compared
        BarState.SETTLED.value: "#10b981",   # emerald — in final position
    }

    bar_radius:        str = "0.3rem"
    label_color:       str = "#e6edf3"
    label_size:        int = 12
    label_weight:      str = "600"
    placeholder_color: str = "#7d8590"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Functions
# ---------------------------------------------------------------------------
def render_scene(scene: Scene, config: CanvasConfig = CONFIG) -> str:
    """Returns an SVG string with one <g class="bar …"> per element."""
    svg_parts = [
        f'<svg width="{scene.width}" height="{scene.height}" '
        f'viewBox="0 0 {scene.width} {scene.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    ]

    for element in scene:
        svg_parts.append(_render_bar(element, scene.height, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def render_player(container: PlayerContainer, config: CanvasConfig = CONFIG) -> str:
    """
    Returns the inner HTML of the player wrapper: the placeholder prompt
    while idle, the scene SVG during a run.
    """
    if container.scene is None:
        return (
            f'<p class="placeholder" style="color: {config.placeholder_color};">'
            f'{html.escape(container.placeholder)}</p>'
        )
    return render_scene(container.scene, config)


def player_classes(container: PlayerContainer) -> str:
    return "player scroll-x" if container.scroll_x else "player"


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(element: BarElement, scene_height: float, config: CanvasConfig) -> str:
    fill = config.bar_colors.get(element.state.value, config.bar_colors[BarState.DEFAULT.value])
    label = html.escape(element.label)

    parts = [
        f'<g class="{element.css_class}" data-index="{element.tag}" '
        f'transform="translate({element.x} 0)">',
        f'  <rect y="{element.y}" rx="{config.bar_radius}" '
        f'width="{element.width}" height="{element.height}" fill="{fill}"/>',
        f'  <text x="{element.width / 2}" y="{scene_height}" text-anchor="middle" '
        f'font-size="{config.label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.label_color}" font-weight="{config.label_weight}">{label}</text>',
        '</g>',
    ]
    return "\n".join(parts)

