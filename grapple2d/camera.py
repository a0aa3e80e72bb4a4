"""
Upward-only camera follow with exponential smoothing.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .avatar import Avatar

logger = logging.getLogger(__name__)


def update_camera(cam_y: float, avatar_y: float, viewport_height: float,
                  smoothing: float = 0.1, deadzone: float = 0.5) -> float:
    """
    Ease the camera toward the avatar when it rises above the deadzone line.

    Args:
        cam_y: Current camera offset (world y at the top of the screen)
        avatar_y: Avatar center y
        viewport_height: Viewport height
        smoothing: Fraction of the gap closed this frame
        deadzone: Height of the follow line as a fraction of the viewport

    Returns:
        The new camera offset. Unchanged while the avatar is below the line.
    """
    line = viewport_height * deadzone
    screen_mid = cam_y + line
    target = avatar_y - line if avatar_y < screen_mid else cam_y
    return cam_y + (target - cam_y) * smoothing


class Camera:
    """Vertical camera offset with a fall fail-safe."""

    def __init__(self, smoothing: float = 0.1, deadzone: float = 0.5,
                 fail_safe_margin: float = 300.0):
        self.y = 0.0
        self.smoothing = float(smoothing)
        self.deadzone = float(deadzone)
        self.fail_safe_margin = float(fail_safe_margin)

    def follow(self, avatar_y: float, viewport_height: float) -> float:
        self.y = update_camera(self.y, avatar_y, viewport_height,
                               self.smoothing, self.deadzone)
        return self.y

    def needs_reset(self, avatar: 'Avatar', viewport_height: float) -> bool:
        """True once the avatar's top edge is fail_safe_margin below the visible window."""
        return avatar.position.y - avatar.radius > self.y + viewport_height + self.fail_safe_margin

    def reset(self) -> None:
        self.y = 0.0
