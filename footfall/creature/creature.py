"""
Creature - a head trailed by a chain of tapering, partly-legged segments.

Creation is the only place sizes and tail length are validated; after
that, locomotion assumes the geometry is well-formed.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import numpy as np
import matplotlib.colors as mcolors

from ..core.constants import (
    HEAD_SIZES, OUTSIZED_HEAD_SIZE, OUTSIZED_HEAD_CHANCE, TAIL_LENGTH,
    TAIL_MAX_SIZE_RATIO, TAIL_SPACING, TAIL_WAVE_AMPLITUDE,
    TAIL_WAVE_FREQUENCY, MAX_FOOT_DIST_MULTIPLIER, TWO_PI,
    CANVAS_WIDTH, CANVAS_HEIGHT,
)
from ..body.segments import Head, Segment, segment_has_feet, segment_taper
from ..body.feet import create_feet


@dataclass(eq=False)
class Creature:
    """
    A single animated creature.

    Attributes:
        id: Identifier, unique within a world
        phase: Random offset in [0, 2π) desynchronising wander and tail shape
        follows_target: True for the cursor-following creature
        head: Leading body part
        tail: Segments behind the head, nearest first
        colour: RGB triple in [0, 1]
    """
    id: int
    phase: float
    follows_target: bool
    head: Head
    tail: List[Segment]
    colour: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    _tail_length: int = field(init=False, repr=False)

    def __post_init__(self):
        self.follows_target = bool(self.follows_target)
        if not self.tail:
            raise ValueError(f"Creature {self.id}: tail must have at least one segment")
        self._tail_length = len(self.tail)

    @property
    def tail_length(self) -> int:
        return self._tail_length

    @property
    def feet(self):
        """Every foot on the creature, in chain order."""
        return [foot for seg in self.tail for foot in seg.feet]


def random_head_size(rng: np.random.Generator) -> float:
    """Weighted pick from HEAD_SIZES, with a rare outsized creature."""
    if rng.random() < OUTSIZED_HEAD_CHANCE:
        return float(OUTSIZED_HEAD_SIZE)
    return float(rng.choice(HEAD_SIZES))


def random_creature_colour(rng: np.random.Generator) -> Tuple[float, float, float]:
    """Bright colour: any hue, saturation 60-100%, full value."""
    hsv = np.array([rng.uniform(0, 1), rng.uniform(0.6, 1.0), 1.0])
    r, g, b = mcolors.hsv_to_rgb(hsv)
    return float(r), float(g), float(b)


def create_tail(head_pos: np.ndarray, num_segments: int, max_size: float,
                phase: float,
                foot_multiplier: float = MAX_FOOT_DIST_MULTIPLIER) -> List[Segment]:
    """
    Lay out a fresh tail along a sine wave behind *head_pos*.

    Segment i starts at head_pos + (i * 20, 100 * sin(phase + i / 8)),
    so each creature's phase gives it a different initial curl.

    Args:
        head_pos: Head position
        num_segments: Tail length (>= 1)
        max_size: Size at the widest point of the taper (> 0)
        phase: Creature phase
        foot_multiplier: Leg length in segment sizes

    Returns:
        List of segments, nearest the head first
    """
    if num_segments < 1:
        raise ValueError(f"Tail must have at least one segment, got {num_segments}")
    if max_size <= 0:
        raise ValueError(f"Tail max_size must be positive, got {max_size}")

    head_pos = np.asarray(head_pos, dtype=float)
    segments = []
    for i in range(num_segments):
        offset = np.array([
            i * TAIL_SPACING,
            TAIL_WAVE_AMPLITUDE * np.sin(phase + i * TAIL_WAVE_FREQUENCY),
        ])
        seg = Segment(
            pos=head_pos + offset,
            size=segment_taper(i, num_segments, max_size),
            facing=0.0,
        )
        if segment_has_feet(i):
            seg.feet.extend(create_feet(seg, foot_multiplier))
        segments.append(seg)
    return segments


def create_creature(
    creature_id: int,
    rng: Optional[np.random.Generator] = None,
    follows_target: bool = False,
    canvas: Tuple[float, float] = (CANVAS_WIDTH, CANVAS_HEIGHT),
    tail_length: int = TAIL_LENGTH,
    head_size: Optional[float] = None,
    pos: Optional[np.ndarray] = None,
    foot_multiplier: float = MAX_FOOT_DIST_MULTIPLIER,
) -> Creature:
    """
    Create a creature at a random spot on the canvas.

    Args:
        creature_id: Identifier for the new creature
        rng: Random source (default: a fresh default_rng)
        follows_target: Whether it chases the cursor instead of wandering
        canvas: (width, height) used for the random start position
        tail_length: Number of tail segments
        head_size: Fixed head size (random weighted pick if None)
        pos: Fixed head position (random if None)
        foot_multiplier: Leg length in segment sizes

    Returns:
        The new Creature
    """
    rng = rng if rng is not None else np.random.default_rng()
    size = random_head_size(rng) if head_size is None else float(head_size)
    if size <= 0:
        raise ValueError(f"Creature {creature_id}: head size must be positive, got {size}")
    if tail_length < 1:
        raise ValueError(f"Creature {creature_id}: tail_length must be >= 1, got {tail_length}")

    width, height = canvas
    if pos is None:
        pos = np.array([rng.uniform(0, width), rng.uniform(0, height)])
    head = Head(pos=pos, size=size, facing=0.0)
    phase = float(rng.uniform(0, TWO_PI))

    return Creature(
        id=creature_id,
        phase=phase,
        follows_target=follows_target,
        head=head,
        colour=random_creature_colour(rng),
        tail=create_tail(
            head_pos=head.pos,
            num_segments=tail_length,
            max_size=head.size * TAIL_MAX_SIZE_RATIO,
            phase=phase,
            foot_multiplier=foot_multiplier,
        ),
    )
