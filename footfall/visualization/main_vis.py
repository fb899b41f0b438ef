"""
Main Visualization Class - real-time matplotlib rendering.

Draws the footprints and every creature (segmented or as a smooth
outline) onto a single canvas, tracks the mouse as the target cursor,
and maps keyboard controls onto world commands.
"""

from typing import Optional, TYPE_CHECKING
import numpy as np
import matplotlib.pyplot as plt

from .colors import BACKGROUND_COLOR, HUD_TEXT
from .renderers import (
    render_footprints, render_creature, render_creature_continuous,
)
from ..events.console_log import console_log

if TYPE_CHECKING:
    from ..manager.simulation import SimulationWorld


class FootfallVisualization:
    """
    Single-canvas visualization for a SimulationWorld.

    The canvas uses screen-style coordinates: origin top-left, y down.
    """

    def __init__(self, world: 'SimulationWorld', interactive: bool = True):
        """
        Initialize visualization.

        Args:
            world: SimulationWorld to draw and control
            interactive: Open a live window (False for offscreen use)
        """
        self.world = world
        self.interactive = interactive

        # State
        self.tick = 0
        self.paused = False
        self.cursor: Optional[np.ndarray] = None

        self._setup_figure()
        self._print_controls()

    def _print_controls(self):
        """Print all keyboard controls."""
        print("[Viz] Initialized")
        print("=" * 48)
        print("  KEYBOARD CONTROLS")
        print("=" * 48)
        print("    R         Regenerate creatures")
        print("    C         Toggle continuous shape")
        print("    S         Toggle square/round segments")
        print("    Space     Pause/Resume")
        print("    V         Cycle log verbosity")
        print("    ?         Show this help")
        print("  The last creature follows the mouse.")
        print("=" * 48)

    def _setup_figure(self):
        """Create matplotlib figure and axes."""
        width, height = self.world.config.canvas
        if self.interactive:
            plt.ion()
        self.fig = plt.figure(figsize=(12, 12 * height / width), facecolor=BACKGROUND_COLOR)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self._reset_axes()

        # Event handlers
        self.fig.canvas.mpl_connect('key_press_event', self._on_key)
        self.fig.canvas.mpl_connect('motion_notify_event', self._on_motion)
        self.fig.canvas.mpl_connect('axes_leave_event', self._on_leave)

        if self.interactive:
            self.fig.canvas.draw()
            plt.show(block=False)

    def _reset_axes(self):
        width, height = self.world.config.canvas
        self.ax.clear()
        self.ax.set_facecolor(BACKGROUND_COLOR)
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_aspect('equal')
        self.ax.axis('off')

    def _on_motion(self, event):
        if event.inaxes is self.ax and event.xdata is not None:
            self.cursor = np.array([event.xdata, event.ydata])

    def _on_leave(self, event):
        self.cursor = None

    def _on_key(self, event):
        """Handle keyboard input."""
        if event.key == 'r':
            self.world.regenerate()
        elif event.key == 'c':
            self.world.toggle_continuous_shape_mode()
        elif event.key == 's':
            self.world.toggle_setting('use_squares')
        elif event.key == ' ':
            self.paused = not self.paused
            print(f"[Viz] {'PAUSED' if self.paused else 'RUNNING'}")
        elif event.key == 'v':
            level_name = console_log().cycle_verbosity()
            print(f"[Viz] Console verbosity: {level_name}")
        elif event.key == '?':
            self._print_controls()

    def draw(self):
        """Draw the current world state without advancing it."""
        cfg = self.world.config
        self._reset_axes()

        render_footprints(self.ax, self.world.footprints, cfg.max_footprint_age)
        for creature in self.world.creatures:
            if cfg.draw_continuous_shape:
                render_creature_continuous(self.ax, creature)
            else:
                render_creature(self.ax, creature, use_squares=cfg.use_squares)

        self.ax.text(
            10, 30, "'c' to toggle continuous shape",
            color=HUD_TEXT, fontsize=12, va='bottom', zorder=30
        )

    def update(self):
        """Draw this frame, then advance the world by one tick."""
        if self.paused:
            if self.interactive:
                plt.pause(0.05)
            return

        self.tick += 1
        self.draw()
        self.world.advance(self.tick, self.cursor)

        if self.interactive:
            self.fig.canvas.draw_idle()
            self.fig.canvas.flush_events()
            plt.pause(0.001)

    def close(self):
        """Close the visualization window."""
        plt.close(self.fig)
        print("[Viz] Closed")
