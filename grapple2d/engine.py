"""
Session coordinating the avatar, level and camera one frame at a time.
"""

from typing import Dict, Any, Optional, Tuple
import math
import logging
from .primitives import Vector2
from .config import PlaygroundConfig
from .layout import Layout, compute_layout
from .level import Level, build_default_level
from .constraints import Tether
from .avatar import Avatar
from .camera import Camera
from .integrators import DampedEulerIntegrator
from .collisions import CollisionResolver
from .controls import FrameInput
from .render import RenderFrame, CircleCommand, LineCommand, RectCommand

logger = logging.getLogger(__name__)


class Session:
    """Single owner of all mutable playground state."""

    def __init__(self, config: Optional[PlaygroundConfig] = None,
                 viewport_size: Tuple[float, float] = (1280, 720),
                 level: Optional[Level] = None):
        """
        Initialize a session and place the avatar at spawn.

        Args:
            config: Tuned constants, defaults to PlaygroundConfig()
            viewport_size: Viewport (width, height) in pixels
            level: Platforms to climb, defaults to the stock level for the lane

        Raises:
            ValueError: If the level is empty
        """
        self.config = config or PlaygroundConfig()
        width, height = viewport_size
        self.layout: Layout = compute_layout(width, height, self.config.lane_ratio)

        self.level = level if level is not None else build_default_level(self.layout)
        if len(self.level) == 0:
            raise ValueError("Cannot start a session on a level without platforms")

        tether = Tether(self.config.min_rope_length, self.config.max_rope_length,
                        self.config.rope_ease)
        self.avatar = Avatar(self.spawn_point, self.config.avatar_radius, tether)
        self.camera = Camera(self.config.camera_smoothing, self.config.camera_deadzone,
                             self.config.fail_safe_margin)
        self.integrator = DampedEulerIntegrator(self.config.gravity, self.config.friction)
        self.collision_resolver = CollisionResolver()

        self.frame_count = 0
        self.reset_count = 0
        self.last_input = FrameInput(self.avatar.position)

        logger.info(f"Session started: viewport {width}x{height}, "
                    f"lane {self.layout.play_width}, {len(self.level)} platforms")

    @property
    def spawn_point(self) -> Vector2:
        """Lane-relative spawn, resting on top of the first platform."""
        return Vector2(self.layout.play_width * self.config.spawn_x_ratio,
                       self.level.spawn_height - self.config.avatar_radius)

    @property
    def viewport_height(self) -> float:
        return self.layout.viewport_height

    def on_pointer_down(self, pointer_world: Optional[Vector2] = None) -> bool:
        """Try to latch toward the pointer. Returns True if a latch was made."""
        pointer = pointer_world if pointer_world is not None else self.last_input.pointer_world
        return self.avatar.try_latch(self.level, pointer)

    def on_pointer_up(self) -> None:
        self.avatar.release()

    def on_reset_requested(self) -> None:
        logger.info("Reset requested")
        self.reset()

    def on_viewport_resized(self, width: float, height: float) -> None:
        """Recompute the lane. The level itself is static and is not rebuilt."""
        self.layout = compute_layout(width, height, self.config.lane_ratio)
        logger.info(f"Viewport resized to {width}x{height}, lane {self.layout.play_width}")

    def reset(self) -> None:
        """Return the avatar to spawn and the camera to the ground."""
        self.avatar.reset(self.spawn_point)
        self.camera.reset()
        self.reset_count += 1

    def tick(self, frame_input: FrameInput) -> RenderFrame:
        """
        Advance one frame and return what to draw.

        The camera eases first, using the avatar position from the previous
        frame; the avatar then moves, and a fall far below the window resets
        the session.
        """
        self.last_input = frame_input

        self.camera.follow(self.avatar.position.y, self.viewport_height)
        self.avatar.update(frame_input.pointer_world, frame_input.pointer_down,
                           self.level, self.integrator, self.collision_resolver)

        if self.camera.needs_reset(self.avatar, self.viewport_height):
            logger.info(f"Fail-safe reset: avatar fell to y={self.avatar.position.y:.1f}")
            self.reset()

        self._validate_state()
        self.frame_count += 1
        return self.render_frame()

    def run_frames(self, n_frames: int, frame_input: Optional[FrameInput] = None) -> RenderFrame:
        """Advance n frames with the same input. Returns the last frame."""
        if n_frames < 1:
            raise ValueError("Number of frames must be at least 1")
        frame_input = frame_input or self.last_input
        for _ in range(n_frames):
            frame = self.tick(frame_input)
        return frame

    def render_frame(self) -> RenderFrame:
        """World-space draw commands for the current state."""
        avatar = self.avatar
        tether = LineCommand(avatar.arm_base(), avatar.arm_tip(self.last_input.pointer_world))
        return RenderFrame(
            tether=tether,
            avatar=CircleCommand(avatar.position, avatar.radius),
            platforms=tuple(RectCommand(*p.as_tuple()) for p in self.level),
            cam_y=self.camera.y,
            latched=avatar.latched
        )

    def get_state(self) -> Dict[str, Any]:
        """Get a plain snapshot of the session state."""
        return {
            'frame': self.frame_count,
            'position': self.avatar.position.as_tuple(),
            'velocity': self.avatar.velocity.as_tuple(),
            'arm_angle': self.avatar.arm_angle,
            'state': self.avatar.state.value,
            'tether': self.avatar.tether.get_constraint_info(),
            'cam_y': self.camera.y
        }

    def get_debug_info(self) -> Dict[str, Any]:
        """Get debugging information."""
        distances = self.level.distances_to(self.avatar.position)
        return {
            'frame': self.frame_count,
            'resets': self.reset_count,
            'platforms': len(self.level),
            'collision_count': self.collision_resolver.collision_count,
            'max_penetration': self.collision_resolver.max_penetration,
            'nearest_platform_distance': float(distances.min()),
            'speed': self.avatar.velocity.magnitude,
            'layout': {'play_width': self.layout.play_width, 'gutter_x': self.layout.gutter_x}
        }

    def _validate_state(self) -> None:
        """Warn about state that points to a physics problem."""
        position, velocity = self.avatar.position, self.avatar.velocity
        if any(math.isnan(v) for v in (position.x, position.y, velocity.x, velocity.y)):
            logger.error(f"NaN detected in avatar state at frame {self.frame_count}")
            return

        speed = velocity.magnitude
        if speed > self.config.max_safe_speed:
            logger.warning(f"Avatar has extreme velocity: {speed:.1f}")
