import pytest

from engine import Settings
from scene import BarState, PlayerContainer, SceneInvariantError, build_scene


@pytest.fixture
def layout():
    return Settings(max_bar_height=100, bar_width=10, bar_spacing=2, text_offset=15)


def test_build_scene_positions_and_tags(layout):
    scene = build_scene([40, 150, 0], layout)

    assert [e.tag for e in scene] == [0, 1, 2]
    assert [e.x for e in scene] == [0, 12, 24]
    assert [e.label for e in scene] == ["40", "150", "0"]
    assert all(e.state is BarState.DEFAULT for e in scene)
    assert scene.width == 36
    assert scene.height == 115


def test_build_scene_caps_height(layout):
    tall = build_scene([150], layout).find_element_by_index(0)
    assert tall.height == 100
    assert tall.y == 0
    assert tall.value == 150


def test_build_scene_is_deterministic(layout):
    a = build_scene([3, 1, 2], layout)
    b = build_scene([3, 1, 2], layout)
    assert [e.to_dict() for e in a] == [e.to_dict() for e in b]


def test_find_element_by_index_follows_tags(layout):
    scene = build_scene([3, 1], layout)
    left = scene.find_element_by_index(0)
    right = scene.find_element_by_index(1)

    scene.swap(left, right)

    assert scene.find_element_by_index(0) is right
    assert scene.find_element_by_index(1) is left
    assert (left.x, right.x) == (12, 0)
    assert [e.value for e in scene.ordered()] == [1, 3]


def test_missing_tag_is_an_invariant_error(layout):
    scene = build_scene([1, 2], layout)
    with pytest.raises(SceneInvariantError):
        scene.find_element_by_index(2)
    assert scene.get(2) is None


def test_mark_all(layout):
    scene = build_scene([1, 2, 3], layout)
    scene.mark_all(BarState.SETTLED)
    assert {e.css_class for e in scene} == {"bar swapped"}


def test_container_placeholder_and_scroll(layout):
    container = PlayerContainer(width=30, max_bar_height=100)
    assert container.is_idle
    assert container.height == 250

    container.show_scene(build_scene([1, 2, 3], layout))
    container.update_scroll()
    assert container.scroll_x is True

    container.resize(500)
    assert container.scroll_x is False

    container.show_placeholder()
    assert container.is_idle
    assert container.scroll_x is False
