"""
Visualization System - Real-time matplotlib rendering.

- Footprints fading with age
- Segmented creatures with legs, feet and eyes
- Continuous silhouettes built from the outline polygon
- Keyboard and mouse controls
"""

from .colors import footprint_alpha, footprint_color, creature_fill
from .renderers import (
    render_footprint, render_footprints, render_creature,
    render_creature_continuous, square_corners
)
from .main_vis import FootfallVisualization
