"""
builder.py — Scene Builder
===========================
Pure function: list + layout settings → Scene.

Bar i sits at x = i * (bar_width + bar_spacing), its rect is as tall as its
value (capped at max_bar_height) and bottom-aligned on max_bar_height, and
its label is the value itself.  Same inputs, same scene.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from scene.element import BarElement
from scene.scene import Scene

if TYPE_CHECKING:
    # engine imports scene; only the annotation needs this
    from engine.settings import Settings


def bar_offset(index: int, settings: Settings) -> float:
    """x coordinate of the bar representing data index `index`."""
    return index * (settings.bar_width + settings.bar_spacing)


def build_scene(values: Sequence[float], settings: Settings) -> Scene:
    elements: List[BarElement] = []
    for i, value in enumerate(values):
        height = min(value, settings.max_bar_height)
        elements.append(
            BarElement(
                tag=i,
                x=bar_offset(i, settings),
                value=value,
                height=height,
                width=settings.bar_width,
                y=settings.max_bar_height - height,
                label=str(value),
            )
        )

    return Scene(
        elements,
        width=len(values) * (settings.bar_width + settings.bar_spacing),
        height=settings.max_bar_height + settings.text_offset,
    )
