"""Simulation orchestration."""

from .simulation import SimulationWorld
