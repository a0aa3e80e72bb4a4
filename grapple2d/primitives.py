"""
Value types shared by the playground: an immutable 2D vector and static platforms.
"""

from dataclasses import dataclass
from typing import Tuple
import math
import numpy as np


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(value, high))


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector. Every operation returns a new vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Vector2':
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Vector2':
        if scalar == 0.0:
            raise ZeroDivisionError("Cannot divide a vector by zero")
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> 'Vector2':
        return Vector2(-self.x, -self.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: 'Vector2') -> float:
        return self.x * other.x + self.y * other.y

    def normalized(self) -> 'Vector2':
        """Unit vector in the same direction. Raises ZeroDivisionError for a zero vector."""
        return self / self.magnitude

    def with_magnitude(self, length: float) -> 'Vector2':
        """Rescale to the given length, keeping the direction."""
        return self.normalized() * length

    def distance_to(self, other: 'Vector2') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def angle(self) -> float:
        """Heading in radians, measured like atan2(y, x)."""
        return math.atan2(self.y, self.x)

    @classmethod
    def from_angle(cls, theta: float, length: float = 1.0) -> 'Vector2':
        return cls(math.cos(theta) * length, math.sin(theta) * length)

    @classmethod
    def from_array(cls, values) -> 'Vector2':
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (2,):
            raise ValueError(f"Expected a 2-element vector, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Platform:
    """
    Static axis-aligned rectangle in world coordinates.

    (x, y) is the top-left corner; y grows downward, as on screen.
    """

    x: float
    y: float
    w: float
    h: float = 12.0

    def __post_init__(self):
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"Platform size must be positive, got {self.w}x{self.h}")

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains_point(self, point: Vector2) -> bool:
        """Strict containment: points on the boundary are outside."""
        return (self.x < point.x < self.right and
                self.y < point.y < self.bottom)

    def closest_point(self, point: Vector2) -> Vector2:
        """Closest point of the rectangle (boundary or interior) to the given point."""
        return Vector2(clamp(point.x, self.x, self.right),
                       clamp(point.y, self.y, self.bottom))

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)
