"""
Body parts - the head, tail segments and feet of a creature.

A creature is a head followed by a chain of segments. Some segments
carry a left/right pair of feet. All positions are world-space numpy
arrays that locomotion mutates in place each tick.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List
import numpy as np

from ..core.constants import (
    FOOT_SEGMENT_STRIDE, TAPER_START, TAPER_END, TAPER_MIN_SCALE,
)
from ..core.vector import map_range


class FootSide(IntEnum):
    """Which side of the segment a foot sits on; the value is the angle sign."""
    LEFT = -1
    RIGHT = 1


@dataclass(eq=False)
class Head:
    pos: np.ndarray
    size: float
    facing: float = 0.0

    def __post_init__(self):
        self.pos = np.array(self.pos, dtype=float)
        if self.size <= 0:
            raise ValueError(f"Head size must be positive, got {self.size}")


@dataclass(eq=False)
class Foot:
    """
    A planted foot.

    The position is sticky: it only changes when the foot snaps to a new
    ideal location. Facing follows the owning segment every tick.
    """
    pos: np.ndarray
    size: float
    facing: float
    side: FootSide

    def __post_init__(self):
        self.pos = np.array(self.pos, dtype=float)
        # Raises ValueError for anything but -1 / 1
        self.side = FootSide(self.side)

    @property
    def sign(self) -> int:
        return int(self.side)


@dataclass(eq=False)
class Segment:
    pos: np.ndarray
    size: float
    facing: float = 0.0
    feet: List[Foot] = field(default_factory=list)

    def __post_init__(self):
        self.pos = np.array(self.pos, dtype=float)
        if self.size <= 0:
            raise ValueError(f"Segment size must be positive, got {self.size}")


def segment_has_feet(index: int) -> bool:
    """Feet grow on chain indices 1, 5, 9, ..."""
    return (index - 1) % FOOT_SEGMENT_STRIDE == 0


def segment_taper(index: int, num_segments: int, max_size: float) -> float:
    """
    Size of tail segment *index* out of *num_segments*.

    The sine profile rises from the shoulders and narrows to a thin tip.
    A single-segment tail is sized as the first segment of a longer one.

    Args:
        index: Position in the chain (0 = nearest the head)
        num_segments: Tail length
        max_size: Size at the widest point

    Returns:
        Segment size, always in [0.3, 1] * max_size
    """
    if num_segments < 1:
        raise ValueError("Tail must have at least one segment")
    if num_segments == 1:
        frac = TAPER_START
    else:
        frac = map_range(index, 0, num_segments - 1, TAPER_START, TAPER_END, clamp=True)
    t = np.pi * frac
    return map_range(np.sin(t), 0, 1, TAPER_MIN_SCALE, 1, clamp=True) * max_size
