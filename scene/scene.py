"""
scene.py — Mutable Bar Scene
=============================
The renderable picture of the list being sorted.  Built once per run by
build_scene(), then mutated in place by the driver.

Elements are looked up by TAG, never by list position: after a swap the
element at position i in `elements` may represent any data index.  The one
invariant this class protects is that tags stay a permutation of
0 .. n-1, which is why position and tag are always exchanged together.
"""

from typing import Iterator, List, Optional

from scene.element import BarElement, BarState


class SceneInvariantError(LookupError):
    """A data index has no element tagged with it: tag/position mapping is broken."""


class Scene:
    """
    Attributes:
        elements : Bars in creation order (their on-screen order changes via x).
        width    : Total width of the scene in pixels.
        height   : Total height (bar area + label offset).
    """

    def __init__(self, elements: List[BarElement], width: float, height: float):
        self.elements: List[BarElement] = list(elements)
        self.width:    float            = width
        self.height:   float            = height

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def find_element_by_index(self, tag: int) -> BarElement:
        for element in self.elements:
            if element.tag == tag:
                return element
        raise SceneInvariantError(f"No bar is tagged with data index {tag}")

    def get(self, tag: int) -> Optional[BarElement]:
        try:
            return self.find_element_by_index(tag)
        except SceneInvariantError:
            return None

    def ordered(self) -> List[BarElement]:
        """Elements sorted by tag, i.e. in the order of the data list."""
        return sorted(self.elements, key=lambda e: e.tag)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    @staticmethod
    def set_position(element: BarElement, x: float) -> None:
        element.x = x

    @staticmethod
    def set_tag(element: BarElement, tag: int) -> None:
        element.tag = tag

    @staticmethod
    def set_visual_state(element: BarElement, state: BarState) -> None:
        element.state = state

    def swap(self, left: BarElement, right: BarElement) -> None:
        """Exchange position and tag of two bars in one go."""
        left_x, left_tag = left.x, left.tag
        self.set_position(left, right.x)
        self.set_tag(left, right.tag)
        self.set_position(right, left_x)
        self.set_tag(right, left_tag)

    def mark_all(self, state: BarState) -> None:
        for element in self.elements:
            element.state = state

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[BarElement]:
        return iter(self.elements)

    def __repr__(self) -> str:
        return f"Scene(bars={len(self.elements)}, width={self.width}, height={self.height})"
