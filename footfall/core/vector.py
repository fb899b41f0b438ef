"""
2D vector helpers for Footfall.

Points and vectors are length-2 float numpy arrays. Every function
returns a new array and leaves its inputs untouched.
"""

import numpy as np

from .constants import EPSILON


def vec(x, y) -> np.ndarray:
    """Build a float 2-vector."""
    return np.array([x, y], dtype=float)


def magnitude(v: np.ndarray) -> float:
    return float(np.hypot(v[0], v[1]))


def distance(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.hypot(b[0] - a[0], b[1] - a[1]))


def safe_distance(a: np.ndarray, b: np.ndarray, floor: float = EPSILON) -> float:
    """Distance floored at *floor*, for use as a divisor."""
    return max(floor, distance(a, b))


def heading(v: np.ndarray) -> float:
    """Angle of *v* from the +x axis, in [-π, π]."""
    return float(np.arctan2(v[1], v[0]))


def from_polar(radius: float, angle: float) -> np.ndarray:
    return np.array([radius * np.cos(angle), radius * np.sin(angle)])


def rotate(v: np.ndarray, angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([c * v[0] - s * v[1], s * v[0] + c * v[1]])


def set_mag(v: np.ndarray, length: float) -> np.ndarray:
    """Rescale *v* to *length*. A zero vector stays zero."""
    m = magnitude(v)
    if m == 0.0:
        return np.zeros(2)
    return np.asarray(v, dtype=float) * (length / m)


def lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """
    Move *a* a fraction *t* of the way toward *b*.

    Args:
        a: Start point
        b: Target point
        t: Fraction in [0, 1]

    Returns:
        The interpolated point
    """
    return np.asarray(a, dtype=float) + (np.asarray(b, dtype=float) - a) * t


def map_range(value: float, start1: float, stop1: float,
              start2: float, stop2: float, clamp: bool = False) -> float:
    """
    Re-map *value* from [start1, stop1] onto [start2, stop2].

    With clamp=True the result is constrained to the output range,
    whichever direction that range runs.
    """
    out = start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))
    if clamp:
        lo, hi = min(start2, stop2), max(start2, stop2)
        out = min(max(out, lo), hi)
    return float(out)
