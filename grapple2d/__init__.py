"""
Grapple-and-Climb Playground Package

A small 2D physics core for a tethered climbing avatar, with a matplotlib front end.
"""

__version__ = "1.0.0"

from .primitives import Vector2, Platform
from .config import PlaygroundConfig
from .layout import Layout, compute_layout
from .level import Level, build_default_level
from .collisions import CollisionDetector, CollisionResolver, CollisionInfo, resolve_circle_rect
from .constraints import Tether
from .avatar import Avatar, AvatarState
from .camera import Camera, update_camera
from .controls import FrameInput, InputAdapter
from .render import RenderFrame, to_screen
from .engine import Session
from .io import ConfigLoader

__all__ = [
    'Vector2',
    'Platform',
    'PlaygroundConfig',
    'Layout',
    'compute_layout',
    'Level',
    'build_default_level',
    'CollisionDetector',
    'CollisionResolver',
    'CollisionInfo',
    'resolve_circle_rect',
    'Tether',
    'Avatar',
    'AvatarState',
    'Camera',
    'update_camera',
    'FrameInput',
    'InputAdapter',
    'RenderFrame',
    'to_screen',
    'Session',
    'ConfigLoader'
]
