import pytest

from grapple2d.layout import compute_layout


def test_lane_is_five_eighths_of_width():
    layout = compute_layout(1280, 720)
    assert layout.play_width == 800
    assert layout.gutter_x == 240
    assert layout.viewport_height == 720


def test_lane_width_is_floored():
    layout = compute_layout(1001)
    assert layout.play_width == 625
    assert layout.gutter_x == pytest.approx(188.0)


def test_custom_ratio():
    layout = compute_layout(1000, lane_ratio=0.5)
    assert layout.play_width == 500
    assert layout.gutter_x == 250


def test_negative_viewport_rejected():
    with pytest.raises(ValueError):
        compute_layout(-1, 100)
