from dataclasses import FrozenInstanceError

import pytest

from engine import DEFAULT_SETTINGS, SPEED_PRESETS, Settings


def test_defaults():
    assert DEFAULT_SETTINGS.to_dict() == {
        "max_bar_height": 200,
        "bar_width": 30,
        "bar_spacing": 5,
        "text_offset": 20,
        "step_interval_ms": 300,
        "list_length": 10,
    }
    assert DEFAULT_SETTINGS.step_interval == pytest.approx(0.3)


def test_merged_accepts_field_and_camel_case_names():
    merged = DEFAULT_SETTINGS.merged({"listLength": 25, "step_interval_ms": 50})
    assert merged.list_length == 25
    assert merged.step_interval_ms == 50
    assert DEFAULT_SETTINGS.list_length == 10


def test_animation_speed_alias():
    assert DEFAULT_SETTINGS.merged({"animationSpeed": 120}).step_interval_ms == 120


def test_speed_preset():
    assert DEFAULT_SETTINGS.merged({"speed": "fast"}).step_interval_ms == SPEED_PRESETS["fast"]


def test_none_values_keep_current():
    assert DEFAULT_SETTINGS.merged({"listLength": None}) == DEFAULT_SETTINGS


def test_empty_overrides_return_same_instance():
    assert DEFAULT_SETTINGS.merged(None) is DEFAULT_SETTINGS
    assert DEFAULT_SETTINGS.merged({}) is DEFAULT_SETTINGS


@pytest.mark.parametrize("overrides", [
    {"listLength": 0},
    {"barWidth": -3},
    {"stepIntervalMs": "fast"},
    {"listLength": 2.5},
    {"listLength": True},
    {"colour": "red"},
    {"speed": "warp"},
    {"maxBarHeight": float("nan")},
    {"listLength": float("inf")},
    {"stepIntervalMs": float("inf")},
])
def test_invalid_overrides_raise(overrides):
    with pytest.raises(ValueError):
        DEFAULT_SETTINGS.merged(overrides)


def test_settings_are_frozen():
    with pytest.raises(FrozenInstanceError):
        Settings().list_length = 3


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_values_are_rejected(value):
    with pytest.raises(ValueError, match="finite"):
        Settings(bar_width=value)
