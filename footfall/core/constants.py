"""
Core constants for the Footfall simulation.

This module contains the locomotion tunables, population parameters,
canvas defaults and file paths used throughout the package. Values that
a user may want to change per run are mirrored in SimulationConfig.
"""

import os
import numpy as np

# =============================================================================
# PATHS
# =============================================================================
DATA_DIR = os.environ.get('FOOTFALL_DATA_DIR', os.path.join(os.getcwd(), 'footfall_data'))
EVENT_LOG_FILE = os.path.join(DATA_DIR, 'event_log.jsonl')


def ensure_dirs():
    """Create the data directory if it doesn't exist."""
    os.makedirs(DATA_DIR, exist_ok=True)


# =============================================================================
# NUMERICS
# =============================================================================
EPSILON = 1e-6      # Floor for any distance used as a divisor
TWO_PI = 2 * np.pi


# =============================================================================
# CANVAS
# =============================================================================
CANVAS_WIDTH = 1200.0
CANVAS_HEIGHT = 800.0


# =============================================================================
# FOOTPRINTS
# =============================================================================
MAX_FOOTPRINT_AGE = 200     # Ticks before a footprint expires
PRUNE_INTERVAL = 60         # Expired footprints are filtered every N ticks


# =============================================================================
# LOCOMOTION
# =============================================================================
LERP_RATE = 0.1                 # Fraction of the gap closed per tick
TURN_AMOUNT = 0.1               # Max wandering deflection (radians)
NOISE_TIME_SCALE = 50.0         # tick / NOISE_TIME_SCALE feeds the noise
NOISE_PHASE_SCALE = 100.0       # phase * NOISE_PHASE_SCALE offsets each creature
NOISE_LOW, NOISE_HIGH = 0.1, 0.9

MAX_FOOT_DIST_MULTIPLIER = 2.5  # Leg length, in segment sizes
FOOT_ANGLE_OFFSET = np.pi / 8   # Feet splay forward of the segment facing
FOOT_SEGMENT_STRIDE = 4         # Feet on segments where (i - 1) % 4 == 0


# =============================================================================
# POPULATION / MORPHOLOGY
# =============================================================================
DEFAULT_POPULATION = 8
TAIL_LENGTH = 10
HEAD_SIZES = [10, 20, 30, 30, 30, 40, 40, 50]
OUTSIZED_HEAD_SIZE = 80
OUTSIZED_HEAD_CHANCE = 0.01
TAIL_MAX_SIZE_RATIO = 0.8       # Widest segment relative to the head

TAPER_START, TAPER_END = 0.3, 1.0
TAPER_MIN_SCALE = 0.3

TAIL_SPACING = 20.0             # Initial x spacing between segments
TAIL_WAVE_AMPLITUDE = 100.0     # Initial y offset amplitude
TAIL_WAVE_FREQUENCY = 1 / 8


# =============================================================================
# SILHOUETTE
# =============================================================================
CAP_ANGLES = (np.pi / 8, 0.0, -np.pi / 8)
SIDE_ANGLES = (-np.pi / 2, np.pi / 2)
