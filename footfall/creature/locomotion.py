"""
Locomotion - steering the head, dragging the tail, stepping the feet.

Per tick, each creature:
1. Picks a target point one head-size ahead (cursor-chasing or wandering).
2. Eases its head 10% of the way there and turns to face it.
3. Walks the tail: any segment further than a head-size from its leader
   eases 10% toward it; every segment turns to face its leader.
4. Updates the feet on each segment, which may emit footprints.

The tail is elastic, not a rigid link: it lags and swings behind the head.
"""

from typing import Callable, Optional, Tuple
import numpy as np

from ..core.constants import (
    LERP_RATE, TURN_AMOUNT, NOISE_PHASE_SCALE, NOISE_TIME_SCALE,
    NOISE_LOW, NOISE_HIGH, MAX_FOOT_DIST_MULTIPLIER, EPSILON,
    CANVAS_WIDTH, CANVAS_HEIGHT,
)
from ..core.vector import (
    from_polar, heading, lerp, magnitude, map_range, rotate,
    safe_distance, set_mag,
)
from ..body.feet import update_segment_feet
from ..body.segments import Foot, Segment
from ..world.footprints import FootprintLedger
from .creature import Creature

NoiseFn = Callable[[float], float]


def _is_off_canvas(pos: np.ndarray, canvas: Tuple[float, float]) -> bool:
    width, height = canvas
    return pos[0] > width or pos[0] < 0 or pos[1] > height or pos[1] < 0


def steer_angle(creature: Creature, tick: int, noise: NoiseFn) -> float:
    """Wandering deflection for this tick, in [-TURN_AMOUNT, TURN_AMOUNT]."""
    sample = noise(creature.phase * NOISE_PHASE_SCALE + tick / NOISE_TIME_SCALE)
    return map_range(sample, NOISE_LOW, NOISE_HIGH, -TURN_AMOUNT, TURN_AMOUNT, clamp=True)


def compute_target(
    creature: Creature,
    tick: int,
    cursor: Optional[np.ndarray],
    noise: NoiseFn,
    canvas: Tuple[float, float] = (CANVAS_WIDTH, CANVAS_HEIGHT),
) -> Optional[np.ndarray]:
    """
    Where the head should head for this tick.

    Args:
        creature: Creature to steer
        tick: Current tick counter (drives the wander noise)
        cursor: Target cursor position, or None if unavailable
        noise: Smooth noise function returning values in [0, 1]
        canvas: (width, height); wanderers that leave it turn back to centre

    Returns:
        Target point one head-size from the head, or None to hold still
    """
    head = creature.head

    if creature.follows_target:
        if cursor is None:
            return None
        delta = np.asarray(cursor, dtype=float) - head.pos
        if magnitude(delta) < head.size:
            return None
        return head.pos + set_mag(delta, head.size)

    width, height = canvas
    centre = np.array([width / 2, height / 2])
    if _is_off_canvas(head.pos, canvas):
        base_angle = heading(centre - head.pos)
    else:
        base_angle = head.facing

    offset = from_polar(head.size, base_angle)
    offset = rotate(offset, steer_angle(creature, tick, noise))
    return head.pos + offset


def update_head(creature: Creature, target: Optional[np.ndarray]):
    """Ease the head toward *target* and face it. No target, no change."""
    if target is None:
        return
    head = creature.head
    head.pos = lerp(head.pos, target, LERP_RATE)
    head.facing = heading(target - head.pos)


def update_tail(creature: Creature, ledger: Optional[FootprintLedger] = None,
                foot_multiplier: float = MAX_FOOT_DIST_MULTIPLIER,
                push_apart: bool = False):
    """
    Propagate motion down the chain, then step each segment's feet.

    The follow threshold is the creature's head size for every segment,
    not the segment's own size.
    """
    leader = creature.head
    threshold = creature.head.size
    for seg in creature.tail:
        toward_leader = leader.pos - seg.pos
        if magnitude(toward_leader) > threshold:
            seg.pos = lerp(seg.pos, leader.pos, LERP_RATE)
        seg.facing = heading(toward_leader)

        update_segment_feet(seg, ledger, foot_multiplier)
        if push_apart:
            for foot in seg.feet:
                push_segments_from_foot(creature, seg, foot)

        leader = seg


def push_segments_from_foot(creature: Creature, connected: Segment, foot: Foot):
    """
    Nudge every other segment away from *foot*.

    The push shrinks with distance from the foot's own segment; that
    distance is floored at EPSILON so coincident segments don't blow up.
    """
    for other in creature.tail:
        if other is connected:
            continue
        d = safe_distance(other.pos, connected.pos, EPSILON)
        away = other.pos - foot.pos
        if magnitude(away) == 0.0:
            continue
        other.pos = other.pos + set_mag(away, connected.size / d)


def update_creature(
    creature: Creature,
    tick: int,
    cursor: Optional[np.ndarray],
    noise: NoiseFn,
    ledger: Optional[FootprintLedger] = None,
    canvas: Tuple[float, float] = (CANVAS_WIDTH, CANVAS_HEIGHT),
    foot_multiplier: float = MAX_FOOT_DIST_MULTIPLIER,
    push_apart: bool = False,
) -> Optional[np.ndarray]:
    """
    Run one tick of locomotion for *creature*.

    Returns:
        The target point used this tick (None if the head held still)
    """
    target = compute_target(creature, tick, cursor, noise, canvas)
    update_head(creature, target)
    update_tail(creature, ledger, foot_multiplier, push_apart)
    return target
