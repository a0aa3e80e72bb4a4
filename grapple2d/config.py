"""
Tunable constants for the playground.
"""

from dataclasses import dataclass, asdict, fields
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)


@dataclass
class PlaygroundConfig:
    """
    Physics, tether and camera parameters.

    All distances are world units (pixels) and all rates are per frame.

    Attributes:
        gravity: Downward acceleration added to velocity.y each frame
        friction: Velocity multiplier applied each frame, in (0, 1]
        avatar_radius: Radius of the avatar circle
        min_rope_length: Shortest allowed tether
        max_rope_length: Longest allowed tether, also the free arm reach
        rope_ease: Fraction of the remaining gap closed per frame while reeling
        camera_smoothing: Fraction of the remaining gap the camera closes per frame
        camera_deadzone: Fraction of viewport height above which the camera follows
        fail_safe_margin: Distance below the visible window that triggers a reset
        lane_ratio: Share of the viewport width used by the play lane
        spawn_x_ratio: Spawn x as a share of the lane width
        max_safe_speed: Speed above which a warning is logged
    """

    gravity: float = 0.4
    friction: float = 0.98
    avatar_radius: float = 24.0
    min_rope_length: float = 6.0
    max_rope_length: float = 120.0
    rope_ease: float = 0.25
    camera_smoothing: float = 0.1
    camera_deadzone: float = 0.5
    fail_safe_margin: float = 300.0
    lane_ratio: float = 5 / 8
    spawn_x_ratio: float = 0.15
    max_safe_speed: float = 200.0

    def __post_init__(self):
        if self.avatar_radius <= 0:
            raise ValueError("Avatar radius must be positive")
        if not (0 < self.friction <= 1):
            raise ValueError("Friction must be in (0, 1]")
        if self.min_rope_length < 0:
            raise ValueError("Minimum rope length must be non-negative")
        if self.min_rope_length > self.max_rope_length:
            raise ValueError("Minimum rope length exceeds maximum rope length")
        for name in ('rope_ease', 'camera_smoothing', 'camera_deadzone', 'lane_ratio'):
            value = getattr(self, name)
            if not (0 < value <= 1):
                raise ValueError(f"{name} must be in (0, 1], got {value}")
        if self.fail_safe_margin < 0:
            raise ValueError("Fail-safe margin must be non-negative")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'PlaygroundConfig':
        """Build a config from a mapping, ignoring (and logging) unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
        return cls(**{k: float(v) for k, v in values.items() if k in known})

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
