"""
Renderers - Functions for drawing individual visual elements.

Each renderer takes an axes object and draws specific elements.
These are composable building blocks for the full visualization.
Creature geometry is read-only here; nothing in this module mutates
simulation state.
"""

from typing import Iterable, Optional, TYPE_CHECKING
import numpy as np
from matplotlib.patches import Circle, Polygon

from ..core.vector import from_polar
from ..creature.silhouette import build_outline
from .colors import (
    footprint_color, creature_fill, OUTLINE_DARK, LEG_OUTLINE,
    OUTLINE_ACCENT, EYE_WHITE, EYE_PUPIL,
)

if TYPE_CHECKING:
    from ..creature.creature import Creature
    from ..body.segments import Head, Segment, Foot
    from ..world.footprints import Footprint


# =============================================================================
# HELPERS
# =============================================================================

def square_corners(center: np.ndarray, size: float, facing: float) -> np.ndarray:
    """
    Corners of a square of side *size* centred on *center*, rotated by *facing*.

    Returns:
        (4, 2) array, counter-clockwise from the rear-right corner
    """
    half = size / 2
    local = np.array([[-half, -half], [half, -half], [half, half], [-half, half]])
    c, s = np.cos(facing), np.sin(facing)
    rot = np.array([[c, -s], [s, c]])
    return local @ rot.T + np.asarray(center, dtype=float)


def data_to_points(ax, length: float) -> float:
    """Convert a length in data units to a matplotlib linewidth in points."""
    origin, end = ax.transData.transform([(0, 0), (length, 0)])
    pixels = abs(end[0] - origin[0])
    return pixels * 72.0 / ax.figure.dpi


# =============================================================================
# FOOTPRINTS
# =============================================================================

def render_footprint(ax, footprint: 'Footprint', max_age: int):
    """Faded grey square, oriented with the foot that left it."""
    ax.add_patch(Polygon(
        square_corners(footprint.pos, footprint.size, footprint.facing),
        closed=True, fc=footprint_color(footprint.age, max_age), ec='none',
        zorder=1
    ))


def render_footprints(ax, footprints: Iterable['Footprint'], max_age: int):
    for fp in footprints:
        render_footprint(ax, fp, max_age)


# =============================================================================
# SEGMENTED CREATURES
# =============================================================================

def render_foot(ax, foot: 'Foot', fill, edge=None, lw: float = 0.0, zorder: float = 3):
    ax.add_patch(Polygon(
        square_corners(foot.pos, foot.size, foot.facing),
        closed=True, fc=fill, ec=edge or 'none', lw=lw, zorder=zorder
    ))


def render_leg(ax, segment: 'Segment', foot: 'Foot', colour,
               is_outline: bool, zorder: float = 2):
    """Line from segment centre to foot; the outline pass is thicker and dark."""
    if is_outline:
        lw, color = data_to_points(ax, segment.size * 0.6), LEG_OUTLINE
    else:
        lw, color = data_to_points(ax, segment.size * 0.33), colour
    ax.plot(
        [segment.pos[0], foot.pos[0]], [segment.pos[1], foot.pos[1]],
        color=color, lw=lw, solid_capstyle='round', zorder=zorder
    )


def render_segment(ax, segment: 'Segment', fill, use_squares: bool,
                   edge=None, lw: float = 0.0, zorder: float = 4):
    if use_squares:
        patch = Polygon(
            square_corners(segment.pos, segment.size * 1.1, segment.facing),
            closed=True
        )
    else:
        patch = Circle(segment.pos, segment.size * 1.2 / 2)
    patch.set_facecolor(fill)
    patch.set_edgecolor(edge or 'none')
    patch.set_linewidth(lw)
    patch.set_zorder(zorder)
    ax.add_patch(patch)


def render_tail(ax, creature: 'Creature', use_squares: bool, is_outline: bool,
                edge=None, lw: float = 0.0, zorder: float = 2):
    """Legs and feet first, then the segments on top."""
    fill = creature_fill(creature.colour)
    for seg in creature.tail:
        for foot in seg.feet:
            render_foot(ax, foot, fill, edge, lw, zorder)
            render_leg(ax, seg, foot, fill, is_outline, zorder)
    for seg in creature.tail:
        render_segment(ax, seg, fill, use_squares, edge, lw, zorder + 0.5)


def render_eyes(ax, head: 'Head', white_ratio: float, pupil_ratio: float,
                zorder: float = 8):
    """Two eyes either side of the head, perpendicular to its facing."""
    for sign in (-1, 1):
        centre = head.pos + from_polar(sign * head.size * 0.5, head.facing + np.pi / 2)
        ax.add_patch(Circle(centre, head.size * white_ratio / 2,
                            fc=EYE_WHITE, ec=EYE_PUPIL, lw=0.5, zorder=zorder))
        ax.add_patch(Circle(centre, head.size * pupil_ratio / 2,
                            fc=EYE_PUPIL, ec='none', zorder=zorder + 0.1))


def render_head_box(ax, creature: 'Creature', edge=None, lw: float = 0.0,
                    zorder: float = 5, with_eyes: bool = True):
    head = creature.head
    ax.add_patch(Polygon(
        square_corners(head.pos, head.size, head.facing), closed=True,
        fc=creature_fill(creature.colour), ec=edge or 'none', lw=lw, zorder=zorder
    ))
    if with_eyes:
        render_eyes(ax, head, white_ratio=1 / 3, pupil_ratio=1 / 6, zorder=zorder + 0.5)


def render_creature(ax, creature: 'Creature', use_squares: bool = True):
    """
    Per-segment rendering: a dark outline pass, an orange outline pass,
    then a clean fill pass on top.

    Args:
        ax: Matplotlib axes
        creature: Creature to draw
        use_squares: Square segments if True, round if False
    """
    passes = (
        (OUTLINE_DARK, data_to_points(ax, 10), True, 2),
        (OUTLINE_ACCENT, data_to_points(ax, 5), True, 10),
        (None, 0.0, False, 18),
    )
    for edge, lw, is_outline, z in passes:
        render_tail(ax, creature, use_squares, is_outline, edge, lw, z)
        render_head_box(ax, creature, edge, lw, z + 3, with_eyes=(edge is None))


# =============================================================================
# CONTINUOUS CREATURES
# =============================================================================

def fill_shape(ax, points: np.ndarray, weight: float, edge, fill, zorder: float = 4):
    """Closed polygon through *points* with an outline of *weight* data units."""
    ax.add_patch(Polygon(
        points, closed=True, fc=fill, ec=edge,
        lw=data_to_points(ax, weight), joinstyle='round', zorder=zorder
    ))


def render_creature_continuous(ax, creature: 'Creature',
                               outline: Optional[np.ndarray] = None):
    """
    Smooth-silhouette rendering: the outline polygon stroked dark then
    orange, with eyes on top.

    Args:
        ax: Matplotlib axes
        creature: Creature to draw
        outline: Precomputed boundary points (built if None)
    """
    pts = build_outline(creature) if outline is None else outline
    fill = creature_fill(creature.colour)
    fill_shape(ax, pts, 10, OUTLINE_DARK, fill, zorder=4)
    fill_shape(ax, pts, 4, OUTLINE_ACCENT, fill, zorder=5)
    render_eyes(ax, creature.head, white_ratio=1 / 2, pupil_ratio=1 / 4, zorder=6)
