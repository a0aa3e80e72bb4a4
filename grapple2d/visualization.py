"""
Matplotlib front end: draws session frames and feeds mouse/keyboard events back.
"""

from typing import List, Optional, Any
import logging
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.patches import Circle as MPLCircle, Rectangle
from .engine import Session
from .controls import InputAdapter
from .render import RenderFrame, to_screen, gutter_captions

logger = logging.getLogger(__name__)

BACKGROUND = '#dcdcdc'
PLATFORM_COLOR = '#787878'
AVATAR_COLOR = (100 / 255, 150 / 255, 1.0)
TETHER_COLOR = '#282828'
TEXT_COLOR = '#282828'


class Visualizer:
    """Real-time playground view using matplotlib."""

    def __init__(self, session: Session, dpi: int = 100):
        """
        Initialize visualizer.

        The axes fill the whole figure and use screen pixels with y growing
        downward, so event data coordinates are screen coordinates.

        Args:
            session: Session to draw and drive
            dpi: Figure resolution; the figure size follows the session viewport
        """
        self.session = session
        self.input = InputAdapter(session)
        self.dpi = dpi

        layout = session.layout
        self.fig = plt.figure(figsize=(layout.viewport_width / dpi, layout.viewport_height / dpi),
                              dpi=dpi, facecolor=BACKGROUND)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.set_facecolor(BACKGROUND)
        self.ax.set_axis_off()
        self._apply_limits()

        self.platform_patches: List[Rectangle] = []
        self.avatar_patch = MPLCircle((0, 0), session.avatar.radius, facecolor=AVATAR_COLOR,
                                      edgecolor='none', zorder=3)
        self.ax.add_patch(self.avatar_patch)
        self.tether_line, = self.ax.plot([], [], color=TETHER_COLOR, linewidth=4,
                                         solid_capstyle='round', zorder=2)
        self.caption_texts = []

        self.animation = None
        self.frame_rate = 60
        self._connect_events()

        logger.info("Visualizer initialized")

    def _apply_limits(self) -> None:
        layout = self.session.layout
        self.ax.set_xlim(0, layout.viewport_width)
        self.ax.set_ylim(layout.viewport_height, 0)

    def _connect_events(self) -> None:
        canvas = self.fig.canvas
        canvas.mpl_connect('motion_notify_event', self._on_motion)
        canvas.mpl_connect('button_press_event', self._on_press)
        canvas.mpl_connect('button_release_event', self._on_release)
        canvas.mpl_connect('key_press_event', self._on_key)
        canvas.mpl_connect('resize_event', self._on_resize)

    def _on_motion(self, event: Any) -> None:
        self.input.on_pointer_moved(event.xdata, event.ydata)

    def _on_press(self, event: Any) -> None:
        self.input.on_pointer_down(event.xdata, event.ydata)

    def _on_release(self, event: Any) -> None:
        self.input.on_pointer_up()

    def _on_key(self, event: Any) -> None:
        self.input.on_key(event.key)

    def _on_resize(self, event: Any) -> None:
        self.input.on_resize(event.width, event.height)
        self._apply_limits()

    def update_frame(self, frame_num: int = 0) -> List:
        """Tick the session once and redraw."""
        frame = self.session.tick(self.input.frame_input())
        return self.draw(frame)

    def draw(self, frame: RenderFrame) -> List:
        """Draw a world-space frame."""
        layout = self.session.layout
        screen = to_screen(frame, layout)

        # Platforms never change, only their screen offset does
        if len(self.platform_patches) != len(screen.platforms):
            for patch in self.platform_patches:
                patch.remove()
            self.platform_patches = []
            for rect in screen.platforms:
                patch = Rectangle((rect.x, rect.y), rect.w, rect.h,
                                  facecolor=PLATFORM_COLOR, edgecolor='none', zorder=1)
                self.ax.add_patch(patch)
                self.platform_patches.append(patch)
        else:
            for patch, rect in zip(self.platform_patches, screen.platforms):
                patch.set_xy((rect.x, rect.y))

        self.tether_line.set_data([screen.tether.start.x, screen.tether.end.x],
                                  [screen.tether.start.y, screen.tether.end.y])
        self.avatar_patch.center = screen.avatar.center.as_tuple()

        for text in self.caption_texts:
            text.remove()
        self.caption_texts = [
            self.ax.text(caption.x, caption.y, caption.text, color=TEXT_COLOR,
                         verticalalignment='top', wrap=True)
            for caption in gutter_captions(layout, frame.cam_y)
        ]

        return self.platform_patches + [self.tether_line, self.avatar_patch] + self.caption_texts

    def animate(self, interval: Optional[float] = None) -> None:
        """Start real-time animation."""
        if interval is None:
            interval = 1000 / self.frame_rate

        self.animation = animation.FuncAnimation(
            self.fig, self.update_frame, interval=interval,
            blit=False, cache_frame_data=False
        )
        plt.show()

    def render_frame(self, save_path: Optional[str] = None) -> None:
        """Render the current state without advancing it."""
        self.draw(self.session.render_frame())
        if save_path:
            self.fig.savefig(save_path, dpi=self.dpi, facecolor=BACKGROUND)
            logger.info(f"Saved frame to {save_path}")
        else:
            plt.show()

    def close(self) -> None:
        """Close visualization."""
        if self.animation:
            self.animation.event_source.stop()
        plt.close(self.fig)
