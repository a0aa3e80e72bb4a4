"""
Level store: the ordered, static list of platforms the avatar climbs.
"""

from typing import List, Optional, Sequence, Union, Iterator
import numbers
import logging
import numpy as np
from .primitives import Platform, Vector2
from .layout import Layout

logger = logging.getLogger(__name__)

DEFAULT_ROW_WIDTH = 80.0
DEFAULT_HEIGHT = 12.0


class Level:
    """
    Ordered collection of platforms.

    Platforms are appended during setup and only read during play. Insertion
    order matters: the first platform defines the spawn height and latch
    lookups resolve ties in favour of earlier platforms.
    """

    def __init__(self, play_width: float):
        """
        Args:
            play_width: Lane width used to spread evenly spaced rows

        Raises:
            ValueError: If play_width is negative
        """
        if play_width < 0:
            raise ValueError("Play width must be non-negative")
        self.play_width = float(play_width)
        self.platforms: List[Platform] = []

    def __len__(self) -> int:
        return len(self.platforms)

    def __iter__(self) -> Iterator[Platform]:
        return iter(self.platforms)

    def __getitem__(self, index: int) -> Platform:
        return self.platforms[index]

    def add_platform(self, x: float, y: float, w: float, h: float = DEFAULT_HEIGHT) -> Platform:
        """Append one platform and return it."""
        platform = Platform(float(x), float(y), float(w), float(h))
        self.platforms.append(platform)
        logger.debug(f"Added platform {platform.as_tuple()}")
        return platform

    def add_row(self, y: float, positions: Union[int, Sequence[float]],
                w: float = DEFAULT_ROW_WIDTH, h: float = DEFAULT_HEIGHT) -> List[Platform]:
        """
        Append a row of identical ledges at height y.

        Args:
            y: Top edge of every ledge in the row
            positions: Either explicit x coordinates, or a count of ledges to
                spread evenly across [0, play_width - w]
            w: Ledge width
            h: Ledge height

        Returns:
            The platforms added, in order

        Raises:
            ValueError: If a count smaller than one is given
        """
        if isinstance(positions, numbers.Integral) and not isinstance(positions, bool):
            count = int(positions)
            if count < 1:
                raise ValueError(f"A row needs at least one ledge, got {count}")
            if count == 1:
                xs = [0.0]
            else:
                gap = (self.play_width - w) / (count - 1)
                xs = [i * gap for i in range(count)]
        elif isinstance(positions, (str, bytes, bool)):
            raise ValueError(f"Invalid row positions: {positions!r}")
        else:
            xs = list(positions)

        return [self.add_platform(x, y, w, h) for x in xs]

    def as_array(self) -> np.ndarray:
        """Platforms as an (N, 4) array of x, y, w, h."""
        if not self.platforms:
            return np.zeros((0, 4), dtype=np.float64)
        return np.array([p.as_tuple() for p in self.platforms], dtype=np.float64)

    def platform_containing(self, point: Vector2) -> Optional[Platform]:
        """
        First platform, in insertion order, that strictly contains point.

        This is a linear scan over every platform per call; there is no
        spatial index.
        """
        if not self.platforms:
            return None
        rects = self.as_array()
        inside = ((point.x > rects[:, 0]) & (point.x < rects[:, 0] + rects[:, 2]) &
                  (point.y > rects[:, 1]) & (point.y < rects[:, 1] + rects[:, 3]))
        hits = np.flatnonzero(inside)
        if hits.size == 0:
            return None
        return self.platforms[int(hits[0])]

    def distances_to(self, point: Vector2) -> np.ndarray:
        """Distance from point to each platform (zero when inside)."""
        rects = self.as_array()
        closest_x = np.clip(point.x, rects[:, 0], rects[:, 0] + rects[:, 2])
        closest_y = np.clip(point.y, rects[:, 1], rects[:, 1] + rects[:, 3])
        return np.hypot(point.x - closest_x, point.y - closest_y)

    @property
    def spawn_height(self) -> float:
        """Top of the first platform."""
        if not self.platforms:
            raise ValueError("Level has no platforms")
        return self.platforms[0].y


def build_default_level(layout: Layout, viewport_height: Optional[float] = None) -> Level:
    """
    Build the stock climbing level for a lane.

    The ground spans the whole lane 100 units above the bottom of the viewport,
    followed by a staircase of ledges and a few rows near the top.
    """
    height = layout.viewport_height if viewport_height is None else viewport_height
    level = Level(layout.play_width)

    level.add_platform(0, height - 100, layout.play_width, 100)
    level.add_platform(220, 460, 80, 12)
    level.add_platform(360, 380, 80, 12)
    level.add_platform(480, 280, 80, 12)

    level.add_row(160, [100, 200, 300, 400, 500])
    level.add_row(40, [150, 350, 550])
    level.add_row(-10, [50, 500])

    logger.info(f"Built default level with {len(level)} platforms for lane width {layout.play_width}")
    return level
