"""
Circle-vs-platform collision detection and response.
"""

from typing import Optional, TYPE_CHECKING
import logging
from .primitives import Platform, Vector2

if TYPE_CHECKING:
    from .avatar import Avatar
    from .level import Level

logger = logging.getLogger(__name__)


class CollisionInfo:
    """Information about an avatar overlapping a platform."""

    def __init__(self, platform: Platform, contact_point: Vector2,
                 push: Vector2, penetration: float):
        """
        Initialize collision information.

        Args:
            platform: Platform being overlapped
            contact_point: Closest point of the platform to the avatar center
            push: Displacement that moves the avatar out of the platform
            penetration: Overlap depth (radius minus center distance)
        """
        self.platform = platform
        self.contact_point = contact_point
        self.push = push
        self.penetration = penetration

    @property
    def is_landing(self) -> bool:
        """True when the avatar is pushed upward, i.e. resting on top."""
        return self.push.y < 0


class CollisionDetector:
    """Circle-vs-AABB overlap test."""

    def detect(self, avatar: 'Avatar', platform: Platform) -> Optional[CollisionInfo]:
        """
        Check the avatar circle against one platform.

        The platform point closest to the avatar center is found by clamping.
        An avatar center sitting exactly on that point has no usable direction,
        so it is pushed straight up.

        Returns:
            CollisionInfo when overlapping, None otherwise
        """
        contact = platform.closest_point(avatar.position)
        delta = avatar.position - contact
        distance = delta.magnitude

        if distance >= avatar.radius:
            return None

        overlap = avatar.radius - distance
        if distance != 0:
            push = delta.with_magnitude(overlap)
        else:
            push = Vector2(0.0, -overlap)

        return CollisionInfo(platform, contact, push, overlap)


class CollisionResolver:
    """Positional push-out with a landing/deflection velocity policy."""

    def __init__(self, detector: Optional[CollisionDetector] = None):
        self.detector = detector or CollisionDetector()
        self.collision_count = 0
        self.max_penetration = 0.0

    def resolve(self, avatar: 'Avatar', collision: CollisionInfo) -> None:
        """
        Move the avatar out of the platform and adjust its velocity.

        A free avatar pushed upward lands: only its vertical velocity is
        cleared. Otherwise (latched, or hit from the side or below) the push
        is added to the velocity as a deflection.
        """
        avatar.position = avatar.position + collision.push

        if not avatar.latched and collision.is_landing:
            avatar.velocity = Vector2(avatar.velocity.x, 0.0)
        else:
            avatar.velocity = avatar.velocity + collision.push

        self.collision_count += 1
        self.max_penetration = max(self.max_penetration, collision.penetration)

    def resolve_level(self, avatar: 'Avatar', level: 'Level') -> int:
        """
        Resolve the avatar against every platform in level order.

        Returns:
            Number of platforms that were overlapping
        """
        resolved = 0
        for platform in level:
            collision = self.detector.detect(avatar, platform)
            if collision:
                self.resolve(avatar, collision)
                resolved += 1
        return resolved

    def reset_statistics(self) -> None:
        self.collision_count = 0
        self.max_penetration = 0.0


def resolve_circle_rect(avatar: 'Avatar', platform: Platform,
                        resolver: Optional[CollisionResolver] = None) -> Optional[CollisionInfo]:
    """Detect and resolve a single avatar/platform overlap. Returns the collision, if any."""
    resolver = resolver or CollisionResolver()
    collision = resolver.detector.detect(avatar, platform)
    if collision:
        resolver.resolve(avatar, collision)
    return collision
