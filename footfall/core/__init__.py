"""Core - constants, configuration, vector helpers and smooth noise."""

from .config import SimulationConfig
from .noise import SmoothNoise, smooth_step
from . import constants, vector
