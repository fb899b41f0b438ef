"""
Foot placement - where feet want to be, and when they step.

Each foot has an ideal position a leg-length ahead of its segment,
splayed to its side. The foot stays planted while the body moves and
only snaps to the ideal spot once it lags by more than a leg length.
That hysteresis is what makes the gait read as walking.
"""

from typing import List, Optional
import numpy as np

from ..core.constants import FOOT_ANGLE_OFFSET, MAX_FOOT_DIST_MULTIPLIER
from ..core.vector import distance, from_polar
from ..world.footprints import Footprint, FootprintLedger
from .segments import Foot, FootSide, Segment


def foot_reach(segment: Segment,
               multiplier: float = MAX_FOOT_DIST_MULTIPLIER) -> float:
    """Leg length for *segment*; also the snap threshold."""
    return segment.size * multiplier


def ideal_foot_position(segment: Segment, side: FootSide,
                        multiplier: float = MAX_FOOT_DIST_MULTIPLIER) -> np.ndarray:
    """Point a leg-length from *segment*, angled π/8 toward *side*."""
    angle = segment.facing + int(side) * FOOT_ANGLE_OFFSET
    return segment.pos + from_polar(foot_reach(segment, multiplier), angle)


def create_feet(segment: Segment,
                multiplier: float = MAX_FOOT_DIST_MULTIPLIER) -> List[Foot]:
    """Build the left/right foot pair for *segment*, planted at their ideal spots."""
    return [
        Foot(
            pos=ideal_foot_position(segment, side, multiplier),
            size=segment.size / 2,
            facing=segment.facing,
            side=side,
        )
        for side in (FootSide.LEFT, FootSide.RIGHT)
    ]


def update_foot(segment: Segment, foot: Foot, ledger: Optional[FootprintLedger] = None,
                multiplier: float = MAX_FOOT_DIST_MULTIPLIER) -> Optional[Footprint]:
    """
    Step *foot* if it has fallen too far behind, then re-align it.

    The threshold is compared against the freshly recomputed ideal
    position with a strict '>', so a foot exactly one leg length away
    stays put.

    Args:
        segment: Owning segment (already moved this tick)
        foot: Foot to update
        ledger: Receives the footprint when the foot snaps
        multiplier: Leg length in segment sizes

    Returns:
        The new Footprint if the foot snapped, else None
    """
    ideal = ideal_foot_position(segment, foot.side, multiplier)
    printed = None
    if distance(foot.pos, ideal) > foot_reach(segment, multiplier):
        foot.pos = ideal
        printed = Footprint(pos=ideal.copy(), size=foot.size, facing=foot.facing)
        if ledger is not None:
            ledger.add(printed)
    foot.facing = segment.facing
    return printed


def update_segment_feet(segment: Segment, ledger: Optional[FootprintLedger] = None,
                        multiplier: float = MAX_FOOT_DIST_MULTIPLIER) -> List[Footprint]:
    """Update every foot on *segment*; returns the footprints emitted."""
    emitted = []
    for foot in segment.feet:
        fp = update_foot(segment, foot, ledger, multiplier)
        if fp is not None:
            emitted.append(fp)
    return emitted
