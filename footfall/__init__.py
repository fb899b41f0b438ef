"""
Footfall - Procedural Creature Locomotion

Segmented creatures wander or chase a cursor, dragging elastic tails
and planting footprints with hysteresis-stepping legs.

Usage:
    python -m footfall              # Run with visualization
    python -m footfall --headless   # Headless mode

Package structure:
- core/: Constants, config, vector helpers, smooth noise
- body/: Head, segments, feet and foot placement
- creature/: Creature factory, locomotion, silhouette outline
- world/: Footprint ledger
- manager/: SimulationWorld orchestration
- events/: Console and JSONL event logging
- visualization/: matplotlib rendering and controls
"""

__version__ = "1.0.0"

from .core.config import SimulationConfig
from .core.noise import SmoothNoise
from .manager.simulation import SimulationWorld
from .main import main, main_visual, main_headless

# Submodule imports
from . import core, body, creature, world, manager, events
