"""
Input boundary: the per-frame input snapshot and the event adapter.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING
import logging
from .primitives import Vector2

if TYPE_CHECKING:
    from .engine import Session

logger = logging.getLogger(__name__)

RESET_KEYS = ('escape', 'r')


@dataclass(frozen=True)
class FrameInput:
    """What the core reads from the input devices during a tick."""

    pointer_world: Vector2
    pointer_down: bool = False


class InputAdapter:
    """
    Translate pointer, key and resize events into Session calls.

    The adapter remembers the pointer in screen space and converts it to world
    space on demand, so camera movement between events is accounted for.
    """

    def __init__(self, session: 'Session'):
        self.session = session
        self.screen_x = 0.0
        self.screen_y = 0.0
        self.pressed = False

    def pointer_world(self) -> Vector2:
        layout = self.session.layout
        return Vector2(self.screen_x - layout.gutter_x, self.screen_y + self.session.camera.y)

    def frame_input(self) -> FrameInput:
        return FrameInput(self.pointer_world(), self.pressed)

    def on_pointer_moved(self, screen_x: Optional[float], screen_y: Optional[float]) -> None:
        # Events outside the drawing area carry no coordinates
        if screen_x is None or screen_y is None:
            return
        self.screen_x = float(screen_x)
        self.screen_y = float(screen_y)

    def on_pointer_down(self, screen_x: Optional[float] = None,
                        screen_y: Optional[float] = None) -> bool:
        self.on_pointer_moved(screen_x, screen_y)
        self.pressed = True
        return self.session.on_pointer_down(self.pointer_world())

    def on_pointer_up(self) -> None:
        self.pressed = False
        self.session.on_pointer_up()

    def on_key(self, key: Optional[str]) -> bool:
        """Handle a key press. Returns True if the key was consumed."""
        if key is None:
            return False
        if key.lower() in RESET_KEYS:
            self.session.on_reset_requested()
            return True
        return False

    def on_resize(self, width: float, height: float) -> None:
        self.session.on_viewport_resized(width, height)
