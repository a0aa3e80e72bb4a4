"""
Lane layout derived from the viewport size.
"""

from dataclasses import dataclass
import math

LANE_RATIO = 5 / 8


@dataclass(frozen=True)
class Layout:
    """Centered play lane with equal gutters on both sides."""

    viewport_width: float
    viewport_height: float
    play_width: float
    gutter_x: float


def compute_layout(viewport_width: float, viewport_height: float = 0.0,
                   lane_ratio: float = LANE_RATIO) -> Layout:
    """
    Derive the lane width and gutter offset for a viewport.

    Args:
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels, carried through unchanged
        lane_ratio: Share of the width given to the lane

    Returns:
        Layout with play_width = floor(width * ratio) and the leftover split evenly

    Raises:
        ValueError: If a viewport dimension is negative
    """
    if viewport_width < 0 or viewport_height < 0:
        raise ValueError(f"Viewport size must be non-negative, got {viewport_width}x{viewport_height}")

    play_width = math.floor(viewport_width * lane_ratio)
    gutter_x = (viewport_width - play_width) / 2
    return Layout(float(viewport_width), float(viewport_height), float(play_width), gutter_x)
