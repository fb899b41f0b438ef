"""
SimulationConfig - per-run tunables and rendering toggles.

Defaults come from core.constants. from_env() overlays FOOTFALL_*
environment variables so a launcher script can tweak a run without
touching code.
"""

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from .constants import (
    MAX_FOOTPRINT_AGE, MAX_FOOT_DIST_MULTIPLIER, PRUNE_INTERVAL,
    TAIL_LENGTH, DEFAULT_POPULATION, CANVAS_WIDTH, CANVAS_HEIGHT,
)


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class SimulationConfig:
    """
    Tunable parameters for a SimulationWorld and its renderer.

    Boolean fields are rendering/behaviour toggles and can be flipped
    with toggle().
    """
    # Footprints
    max_footprint_age: int = MAX_FOOTPRINT_AGE
    prune_interval: int = PRUNE_INTERVAL

    # Legs
    max_foot_dist_multiplier: float = MAX_FOOT_DIST_MULTIPLIER

    # Population
    population: int = DEFAULT_POPULATION
    tail_length: int = TAIL_LENGTH

    # Canvas
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT

    # Toggles
    use_squares: bool = True
    draw_continuous_shape: bool = True
    push_segments_apart: bool = False

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas must be positive, got {self.width}x{self.height}")
        if self.max_foot_dist_multiplier <= 0:
            raise ValueError("max_foot_dist_multiplier must be positive")
        if self.prune_interval < 1:
            raise ValueError("prune_interval must be >= 1")
        if self.max_footprint_age < 0:
            raise ValueError("max_footprint_age must be >= 0")
        if self.population < 1:
            raise ValueError("population must be >= 1")
        if self.tail_length < 1:
            raise ValueError("tail_length must be >= 1")

    @property
    def canvas(self):
        """(width, height) of the drawing surface."""
        return self.width, self.height

    def toggle(self, name: str) -> bool:
        """Flip a boolean setting and return its new value."""
        types = {f.name: f.type for f in fields(self)}
        if types.get(name) not in (bool, 'bool'):
            raise ValueError(f"'{name}' is not a boolean setting")
        value = not getattr(self, name)
        setattr(self, name, value)
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SimulationConfig':
        """
        Build a config from FOOTFALL_<FIELD> environment variables.

        Args:
            environ: Mapping to read (default: os.environ)
        """
        environ = os.environ if environ is None else environ
        kwargs = {}
        for f in fields(cls):
            raw = environ.get(f"FOOTFALL_{f.name.upper()}")
            if raw is None:
                continue
            if f.type in (bool, 'bool'):
                kwargs[f.name] = _env_bool(raw)
            elif f.type in (int, 'int'):
                kwargs[f.name] = int(raw)
            else:
                kwargs[f.name] = float(raw)
        return cls(**kwargs)
