"""
Backend-neutral draw commands and the world-to-screen transform.
"""

from dataclasses import dataclass, replace
from typing import List, Tuple
from .primitives import Vector2
from .layout import Layout

# Story text shown in the left gutter, keyed by world y
GUTTER_CAPTIONS: Tuple[Tuple[float, str], ...] = (
    (-2000.0, "You feel small but determined…"),
)


@dataclass(frozen=True)
class CircleCommand:
    center: Vector2
    radius: float


@dataclass(frozen=True)
class LineCommand:
    start: Vector2
    end: Vector2


@dataclass(frozen=True)
class RectCommand:
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class TextCommand:
    x: float
    y: float
    max_width: float
    text: str


@dataclass(frozen=True)
class RenderFrame:
    """
    Everything drawn for one frame.

    Produced in world space by the session; to_screen() applies the lane
    gutter and camera offsets.
    """

    tether: LineCommand
    avatar: CircleCommand
    platforms: Tuple[RectCommand, ...]
    cam_y: float
    latched: bool = False


def _shift(point: Vector2, dx: float, dy: float) -> Vector2:
    return Vector2(point.x + dx, point.y + dy)


def to_screen(frame: RenderFrame, layout: Layout) -> RenderFrame:
    """Translate a world-space frame into screen space."""
    dx, dy = layout.gutter_x, -frame.cam_y
    return replace(
        frame,
        tether=LineCommand(_shift(frame.tether.start, dx, dy), _shift(frame.tether.end, dx, dy)),
        avatar=CircleCommand(_shift(frame.avatar.center, dx, dy), frame.avatar.radius),
        platforms=tuple(RectCommand(r.x + dx, r.y + dy, r.w, r.h) for r in frame.platforms)
    )


def gutter_captions(layout: Layout, cam_y: float) -> List[TextCommand]:
    """Screen-space captions for the left gutter. Empty when there is no room."""
    width = layout.gutter_x - 40
    if width <= 0:
        return []
    return [TextCommand(20.0, world_y - cam_y, width, text)
            for world_y, text in GUTTER_CAPTIONS]
