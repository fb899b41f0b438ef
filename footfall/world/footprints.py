"""
Footprints - marks left behind when a foot snaps to a new position.

The ledger owns every footprint in the world. Ages tick up once per
simulation step; expired prints are filtered out in batches rather
than every step, since the filter is a full scan.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple
import numpy as np


@dataclass(eq=False)
class Footprint:
    """A single footprint. Only the age changes after creation."""
    pos: np.ndarray
    size: float
    facing: float
    age: int = 0

    def __post_init__(self):
        self.pos = np.array(self.pos, dtype=float)


class FootprintLedger:
    """
    Collection of footprints with aging and batched expiry.

    Insertion order is kept so the renderer draws older prints first,
    but carries no other meaning.
    """

    def __init__(self):
        self._prints: List[Footprint] = []

    def add(self, footprint: Footprint) -> Footprint:
        """Append a new footprint, starting its age at zero."""
        footprint.age = 0
        self._prints.append(footprint)
        return footprint

    def age_all(self):
        """Advance every footprint's age by one tick."""
        for fp in self._prints:
            fp.age += 1

    def prune(self, max_age: int) -> int:
        """
        Drop footprints whose age has reached *max_age*.

        Returns:
            Number of footprints removed
        """
        before = len(self._prints)
        self._prints = [fp for fp in self._prints if fp.age < max_age]
        return before - len(self._prints)

    def clear(self):
        self._prints.clear()

    def snapshot(self) -> Tuple[Footprint, ...]:
        return tuple(self._prints)

    def __len__(self) -> int:
        return len(self._prints)

    def __iter__(self) -> Iterator[Footprint]:
        return iter(self._prints)
