"""
Color utilities for visualization.

Footprint fading, outline and leg colours, and small RGB helpers.
"""

import matplotlib.colors as mcolors
from typing import Tuple

from ..core.vector import map_range

BACKGROUND_COLOR = '#ffffff'
FOOTPRINT_GRAY = (150 / 255, 150 / 255, 150 / 255)
FOOTPRINT_MAX_ALPHA = 50 / 255

OUTLINE_DARK = (30 / 255, 30 / 255, 30 / 255)
LEG_OUTLINE = (40 / 255, 40 / 255, 40 / 255)
OUTLINE_ACCENT = 'orange'
EYE_WHITE = 'white'
EYE_PUPIL = OUTLINE_DARK
HUD_TEXT = '#000000'


def footprint_alpha(age: int, max_age: int) -> float:
    """
    Opacity of a footprint of the given age.

    Fresh prints start faint and fade linearly to invisible at max_age.
    """
    if max_age <= 0:
        return 0.0
    return map_range(age, 0, max_age, FOOTPRINT_MAX_ALPHA, 0.0, clamp=True)


def footprint_color(age: int, max_age: int) -> Tuple[float, float, float, float]:
    """RGBA for a footprint of the given age."""
    r, g, b = FOOTPRINT_GRAY
    return (r, g, b, footprint_alpha(age, max_age))


def creature_fill(colour) -> Tuple[float, float, float]:
    """Normalise any matplotlib colour spec to an RGB tuple."""
    return tuple(float(c) for c in mcolors.to_rgb(colour))
