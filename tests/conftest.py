import matplotlib
matplotlib.use('Agg')

import pytest

from grapple2d.level import Level
from grapple2d.engine import Session


@pytest.fixture
def flat_level():
    """A single wide floor at y=100 in an 800 wide lane."""
    level = Level(800)
    level.add_platform(0, 100, 800, 12)
    return level


@pytest.fixture
def session():
    return Session(viewport_size=(1280, 720))
