"""
Per-frame motion integration for the avatar.
"""

from typing import TYPE_CHECKING
from .primitives import Vector2

if TYPE_CHECKING:
    from .avatar import Avatar


class Integrator:
    """Base class for frame integrators."""

    def integrate(self, avatar: 'Avatar') -> None:
        """Advance the avatar by one frame."""
        raise NotImplementedError


class DampedEulerIntegrator(Integrator):
    """
    Fixed-step Euler with gravity and velocity damping.

    Velocity is updated before position (semi-implicit), and the whole
    velocity vector is scaled by friction every frame.
    """

    def __init__(self, gravity: float = 0.4, friction: float = 0.98):
        """
        Args:
            gravity: Added to velocity.y every frame (y grows downward)
            friction: Velocity multiplier per frame

        Raises:
            ValueError: If friction is outside (0, 1]
        """
        if not (0 < friction <= 1):
            raise ValueError("Friction must be in (0, 1]")
        self.gravity = float(gravity)
        self.friction = float(friction)

    def integrate(self, avatar: 'Avatar') -> None:
        velocity = Vector2(avatar.velocity.x, avatar.velocity.y + self.gravity)
        avatar.velocity = velocity * self.friction
        avatar.position = avatar.position + avatar.velocity
