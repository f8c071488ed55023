from engine import DriverStatus, RunMetrics, Settings
from scene import BarState, PlayerContainer, build_scene
from sorting import COMPARE_LINE, PSEUDOCODE
from ui import (
    analytics_panel,
    button_states,
    player_classes,
    playback_controls,
    pseudocode_viewer,
    render_player,
    render_scene,
)


def test_render_scene_emits_one_group_per_bar():
    scene = build_scene([10, 20], Settings(bar_width=10, bar_spacing=5))
    scene.find_element_by_index(1).state = BarState.CURRENT

    svg = render_scene(scene)

    assert svg.startswith("<svg")
    assert svg.count('<g class="bar') == 2
    assert 'class="bar current" data-index="1"' in svg
    assert 'transform="translate(15 0)"' in svg
    assert ">20</text>" in svg


def test_render_player_placeholder_while_idle():
    container = PlayerContainer()
    out = render_player(container)
    assert "Press &quot;Play&quot; button to start" in out
    assert "<svg" not in out
    assert player_classes(container) == "player"


def test_render_player_scene_and_scroll_class():
    container = PlayerContainer(width=10)
    container.show_scene(build_scene([1, 2, 3], Settings()))
    container.update_scroll()

    assert "<svg" in render_player(container)
    assert player_classes(container) == "player scroll-x"


def test_button_states_follow_status():
    assert button_states(DriverStatus.IDLE) == {"play": True, "pause": False, "stop": False}
    assert button_states(DriverStatus.RUNNING) == {"play": False, "pause": True, "stop": True}
    assert button_states(DriverStatus.PAUSED) == {"play": True, "pause": False, "stop": True}
    assert button_states(DriverStatus.COMPLETED) == {"play": False, "pause": False, "stop": True}


def test_playback_controls_badge_on_completion():
    assert "SORTED" in playback_controls(DriverStatus.COMPLETED)
    assert "SORTED" not in playback_controls(DriverStatus.RUNNING)


def test_analytics_panel():
    assert "Press Play" in analytics_panel(None)
    html = analytics_panel(RunMetrics(
        status="running", list_length=4, comparisons=3, swaps=1,
        passes=1, total_passes=3, expected_comparisons=6,
    ))
    assert "3 / 6" in html
    assert "50%" in html


def test_pseudocode_viewer_highlights_and_escapes():
    html = pseudocode_viewer(PSEUDOCODE, current_line=COMPARE_LINE)
    assert f'class="code-line highlight" data-line="{COMPARE_LINE}"' in html
    assert "&gt;" in html
