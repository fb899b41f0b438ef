"""
Silhouette - closed outline polygon for continuous-shape rendering.

The outline walks down the left side of the body, fans round the tail
tip, walks back up the right side and fans round the nose. For an
unlooped chain this never self-intersects.
"""

from typing import Tuple, Union
import numpy as np

from ..core.constants import CAP_ANGLES, SIDE_ANGLES
from ..core.vector import from_polar
from ..body.segments import Head, Segment
from .creature import Creature

BodyPart = Union[Head, Segment]


def side_points(part: BodyPart) -> Tuple[np.ndarray, np.ndarray]:
    """(left, right) edge points half a size either side of *part*."""
    left, right = (
        part.pos + from_polar(part.size / 2, part.facing + offset)
        for offset in SIDE_ANGLES
    )
    return left, right


def head_cap_points(head: Head) -> np.ndarray:
    return np.array([
        head.pos + from_polar(head.size / 2, head.facing + angle)
        for angle in CAP_ANGLES
    ])


def tail_cap_points(last: Segment) -> np.ndarray:
    """Three points fanned out behind the tail tip."""
    return np.array([
        last.pos + from_polar(last.size / 2, np.pi + last.facing + angle)
        for angle in CAP_ANGLES
    ])


def build_outline(creature: Creature) -> np.ndarray:
    """
    Ordered boundary points for *creature*.

    Order: head left, each segment's left (head to tail), three tail
    caps, each segment's right (tail to head), head right, three head
    caps.

    Returns:
        (2n + 8, 2) array for a tail of n segments
    """
    if not creature.tail:
        raise ValueError(f"Creature {creature.id} has no tail to outline")

    head_left, head_right = side_points(creature.head)
    pairs = [side_points(seg) for seg in creature.tail]

    points = [head_left]
    points.extend(left for left, _ in pairs)
    points.extend(tail_cap_points(creature.tail[-1]))
    points.extend(right for _, right in reversed(pairs))
    points.append(head_right)
    points.extend(head_cap_points(creature.head))
    return np.array(points)
