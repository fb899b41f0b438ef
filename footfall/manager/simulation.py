"""
SimulationWorld - owns the creature population and the footprint ledger.

All simulation state lives on a SimulationWorld instance; renderers read
snapshots and callers drive it with advance(tick, cursor) once per frame.
Randomness comes from an injected numpy Generator and the wander noise
from an injected SmoothNoise, so a seeded world is fully reproducible.
"""

from typing import Dict, List, Optional, Tuple
import numpy as np

from ..core.config import SimulationConfig
from ..core.noise import SmoothNoise
from ..creature.creature import Creature, create_creature
from ..creature.locomotion import NoiseFn, update_creature
from ..world.footprints import Footprint, FootprintLedger
from ..events.logger import EventLogger, event_log
from ..events.console_log import console_log


class SimulationWorld:
    """
    A population of creatures and the footprints they leave.

    Per advance():
    - every creature steers, moves its head, drags its tail, steps its feet
    - then every footprint ages by one tick
    - every prune_interval ticks, expired footprints are dropped
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        seed: Optional[int] = None,
        noise: Optional[NoiseFn] = None,
        events: Optional[EventLogger] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize an empty world. Call regenerate() to populate it.

        Args:
            config: Tunables (default: SimulationConfig())
            seed: Seeds both the random source and the noise
            noise: Wander noise function (default: SmoothNoise(seed))
            events: Event logger (default: the global event_log())
            rng: Random source (default: default_rng(seed))
        """
        self.config = config or SimulationConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.noise = noise if noise is not None else SmoothNoise(seed)
        self.events = events if events is not None else event_log()

        self._creatures: List[Creature] = []
        self.ledger = FootprintLedger()
        self.last_tick = 0
        self.total_footprints = 0

    # === Snapshots ===

    @property
    def creatures(self) -> Tuple[Creature, ...]:
        return tuple(self._creatures)

    @property
    def footprints(self) -> Tuple[Footprint, ...]:
        return self.ledger.snapshot()

    # === Commands ===

    def regenerate(self, count: Optional[int] = None):
        """
        Discard everything and spawn a fresh population.

        Creates count - 1 wanderers followed by one cursor-following
        creature, which is always last.

        Args:
            count: Population size (default: config.population)
        """
        count = self.config.population if count is None else count
        if count < 1:
            raise ValueError(f"Population must be at least 1, got {count}")

        self.ledger.clear()
        self._creatures = []

        for i in range(count - 1):
            self._creatures.append(self._spawn(i, follows_target=False))
        self._creatures.append(self._spawn(count, follows_target=True))

        sizes = [c.head.size for c in self._creatures]
        console_log().log(
            f"[World] Regenerated {count} creatures "
            f"(head sizes: {', '.join(f'{s:.0f}' for s in sizes)})",
            self.last_tick)
        self.events.log_regenerate(self.last_tick, count, sizes,
                                   follower_id=self._creatures[-1].id)

    def _spawn(self, creature_id: int, follows_target: bool) -> Creature:
        cfg = self.config
        return create_creature(
            creature_id,
            rng=self.rng,
            follows_target=follows_target,
            canvas=cfg.canvas,
            tail_length=cfg.tail_length,
            foot_multiplier=cfg.max_foot_dist_multiplier,
        )

    def advance(self, tick: int, cursor: Optional[np.ndarray] = None):
        """
        Step the simulation by one tick.

        Args:
            tick: Monotonically increasing tick counter
            cursor: Target position for the following creature (None = hold)
        """
        cfg = self.config
        self.last_tick = tick
        before = len(self.ledger)

        for creature in self._creatures:
            update_creature(
                creature, tick, cursor, self.noise,
                ledger=self.ledger,
                canvas=cfg.canvas,
                foot_multiplier=cfg.max_foot_dist_multiplier,
                push_apart=cfg.push_segments_apart,
            )
        self.total_footprints += len(self.ledger) - before

        self.ledger.age_all()

        if tick % cfg.prune_interval == 0:
            removed = self.ledger.prune(cfg.max_footprint_age)
            if removed:
                console_log().log(
                    f"[Footprints] Pruned {removed}, {len(self.ledger)} remain", tick)
                self.events.log_prune(tick, removed, len(self.ledger))

    def toggle_continuous_shape_mode(self) -> bool:
        """Flip between outline and per-segment rendering."""
        return self.toggle_setting('draw_continuous_shape')

    def toggle_setting(self, name: str) -> bool:
        """Flip a boolean config setting and log it."""
        value = self.config.toggle(name)
        console_log().log(f"[Config] {name}: {'ON' if value else 'OFF'}", self.last_tick)
        self.events.log_toggle(self.last_tick, name, value)
        return value

    # === Statistics ===

    def get_statistics(self) -> Dict[str, int]:
        """Counts for status lines and population snapshots."""
        return {
            'creatures': len(self._creatures),
            'followers': sum(1 for c in self._creatures if c.follows_target),
            'feet': sum(len(c.feet) for c in self._creatures),
            'footprints': len(self.ledger),
            'total_footprints': self.total_footprints,
            'tick': self.last_tick,
        }
