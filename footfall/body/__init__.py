"""Body systems - head, tail segments, feet and foot placement."""

from .segments import Head, Segment, Foot, FootSide, segment_has_feet, segment_taper
from .feet import (
    foot_reach, ideal_foot_position, create_feet, update_foot, update_segment_feet
)
