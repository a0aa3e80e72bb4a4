"""
Tether constraint keeping the avatar on a rope around a latched anchor.
"""

from typing import Dict, Optional, Any, TYPE_CHECKING
import logging
from .primitives import Vector2, clamp

if TYPE_CHECKING:
    from .avatar import Avatar

logger = logging.getLogger(__name__)


class Tether:
    """Variable-length rope from the avatar to a fixed anchor point."""

    def __init__(self, min_length: float = 6.0, max_length: float = 120.0,
                 ease: float = 0.25):
        """
        Initialize an unlatched tether.

        Args:
            min_length: Shortest rope length
            max_length: Longest rope length, also the reach of a free arm
            ease: Fraction of the gap to the target length closed per frame

        Raises:
            ValueError: If the bounds are inverted or ease is outside (0, 1]
        """
        if min_length < 0 or min_length > max_length:
            raise ValueError(f"Invalid rope bounds [{min_length}, {max_length}]")
        if not (0 < ease <= 1):
            raise ValueError("Rope ease must be in (0, 1]")

        self.min_length = float(min_length)
        self.max_length = float(max_length)
        self.ease = float(ease)

        self.latched = False
        self.anchor: Optional[Vector2] = None
        self.rope_length = self.max_length
        self.just_latched = False

    def clamp_length(self, length: float) -> float:
        return clamp(length, self.min_length, self.max_length)

    def tip(self, origin: Vector2, direction: Vector2, pointer_world: Vector2) -> Vector2:
        """
        Where the rope ends: the anchor when latched, otherwise the point
        along the arm toward the pointer, limited to max_length.
        """
        if self.latched:
            return self.anchor
        reach = min(origin.distance_to(pointer_world), self.max_length)
        return origin + direction * reach

    def latch(self, anchor: Vector2, origin: Vector2, radius: float) -> None:
        """Fix the rope to anchor with a length derived from the current distance."""
        self.latched = True
        self.anchor = anchor
        self.rope_length = self.clamp_length(anchor.distance_to(origin) - radius)
        self.just_latched = True
        logger.debug(f"Latched at ({anchor.x:.1f}, {anchor.y:.1f}), rope {self.rope_length:.1f}")

    def release(self) -> None:
        """Drop the anchor. The rope length is kept for the next latch."""
        if self.latched:
            logger.debug("Tether released")
        self.latched = False
        self.anchor = None

    def resize(self, pointer_world: Vector2, radius: float) -> float:
        """
        Reel the rope toward the pointer's distance from the anchor.

        Returns:
            The new rope length
        """
        if not self.latched:
            return self.rope_length
        target = self.clamp_length(pointer_world.distance_to(self.anchor) - radius)
        self.rope_length = self.clamp_length(self.rope_length + (target - self.rope_length) * self.ease)
        return self.rope_length

    def apply(self, avatar: 'Avatar') -> Vector2:
        """
        Pull the avatar onto the rope.

        The avatar is moved to sit rope_length + radius from the anchor along
        the current arm direction, and the same correction is added to its
        velocity so it swings instead of teleporting. The first frame after a
        latch is skipped.

        Returns:
            The correction applied (zero when skipped or unlatched)
        """
        if not self.latched:
            return Vector2()
        if self.just_latched:
            self.just_latched = False
            return Vector2()

        self.rope_length = self.clamp_length(self.rope_length)
        direction = avatar.arm_direction()
        target = self.anchor - direction * (self.rope_length + avatar.radius)
        correction = target - avatar.position

        avatar.position = avatar.position + correction
        avatar.velocity = avatar.velocity + correction
        return correction

    def get_constraint_info(self) -> Dict[str, Any]:
        """Get tether state for debugging."""
        return {
            'latched': self.latched,
            'anchor': self.anchor.as_tuple() if self.anchor else None,
            'rope_length': self.rope_length,
            'just_latched': self.just_latched,
            'bounds': (self.min_length, self.max_length)
        }
