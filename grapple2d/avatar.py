"""
The climbing avatar: a circle with a grappling arm.
"""

from enum import Enum
from typing import Optional
import math
import logging
from .primitives import Vector2
from .constraints import Tether
from .level import Level
from .integrators import Integrator
from .collisions import CollisionResolver

logger = logging.getLogger(__name__)


class AvatarState(Enum):
    FREE = 'free'
    LATCHED = 'latched'


class Avatar:
    """Circular avatar whose arm can latch a tether onto platforms."""

    def __init__(self, position: Vector2, radius: float = 24.0,
                 tether: Optional[Tether] = None):
        """
        Initialize a resting avatar.

        Args:
            position: Center of the circle in world space
            radius: Circle radius, constant for the session
            tether: Rope solver, defaults to a Tether with stock bounds

        Raises:
            ValueError: If radius is non-positive
        """
        if radius <= 0:
            raise ValueError("Radius must be positive")

        self.position = position
        self.velocity = Vector2()
        self.radius = float(radius)
        self.arm_angle = 0.0
        self.tether = tether or Tether()

    @property
    def latched(self) -> bool:
        return self.tether.latched

    @property
    def anchor(self) -> Optional[Vector2]:
        return self.tether.anchor

    @property
    def rope_length(self) -> float:
        return self.tether.rope_length

    @property
    def state(self) -> AvatarState:
        return AvatarState.LATCHED if self.tether.latched else AvatarState.FREE

    def arm_direction(self) -> Vector2:
        return Vector2.from_angle(self.arm_angle)

    def arm_base(self) -> Vector2:
        """Point on the avatar's rim where the arm starts."""
        return self.position + self.arm_direction() * self.radius

    def arm_tip(self, pointer_world: Vector2) -> Vector2:
        return self.tether.tip(self.position, self.arm_direction(), pointer_world)

    def aim(self, pointer_world: Vector2) -> None:
        offset = pointer_world - self.position
        self.arm_angle = math.atan2(offset.y, offset.x)

    def try_latch(self, level: Level, pointer_world: Vector2) -> bool:
        """
        Latch the arm tip onto the first platform that contains it.

        Does nothing while already latched.

        Returns:
            True if a new latch was made
        """
        if self.tether.latched:
            return False

        tip = self.arm_tip(pointer_world)
        platform = level.platform_containing(tip)
        if platform is None:
            return False

        self.tether.latch(tip, self.position, self.radius)
        return True

    def release(self) -> None:
        self.tether.release()

    def update(self, pointer_world: Vector2, pointer_down: bool, level: Level,
               integrator: Integrator, resolver: CollisionResolver) -> None:
        """
        Advance one frame.

        The order is fixed: aim, reel the rope, apply the rope, integrate,
        then collide with every platform.
        """
        self.aim(pointer_world)

        if self.tether.latched and pointer_down:
            self.tether.resize(pointer_world, self.radius)

        if self.tether.latched:
            self.tether.apply(self)

        integrator.integrate(self)
        resolver.resolve_level(self, level)

    def reset(self, spawn: Vector2) -> None:
        """Put the avatar back at spawn, at rest and unlatched."""
        self.position = spawn
        self.velocity = Vector2()
        self.release()
        logger.debug(f"Avatar reset to ({spawn.x:.1f}, {spawn.y:.1f})")
