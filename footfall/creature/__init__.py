"""Creature systems - creation, locomotion and silhouette outlines."""

from .creature import (
    Creature, create_creature, create_tail, random_head_size, random_creature_colour
)
from .locomotion import (
    compute_target, steer_angle, update_head, update_tail, update_creature,
    push_segments_from_foot
)
from .silhouette import side_points, head_cap_points, tail_cap_points, build_outline
