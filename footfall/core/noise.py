"""
SmoothNoise - deterministic 1D value noise for wandering steering.

A periodic lattice of random values is blurred with a wrapping Gaussian
so neighbouring samples are correlated, then sampled with Hermite
interpolation. The result is continuous in x and spans [0, 1], which is
what the steering map in locomotion expects.
"""

from typing import Optional
import numpy as np
from scipy.ndimage import gaussian_filter1d


def smooth_step(t):
    """
    Hermite interpolation weight for t in [0, 1].

    Args:
        t: Fractional position between two lattice points

    Returns:
        3t² - 2t³, which has zero slope at both ends
    """
    t = np.clip(t, 0.0, 1.0)
    return t * t * (3 - 2 * t)


class SmoothNoise:
    """
    Seedable smooth noise, sampled as noise(x) -> float in [0, 1].

    Args:
        seed: Seed for numpy's default_rng (None = nondeterministic)
        lattice_size: Number of lattice points before the pattern repeats
        smoothing: Gaussian sigma, in lattice cells
    """

    def __init__(self, seed: Optional[int] = None, lattice_size: int = 256,
                 smoothing: float = 1.5):
        if lattice_size < 2:
            raise ValueError(f"lattice_size must be >= 2, got {lattice_size}")
        rng = np.random.default_rng(seed)
        raw = rng.random(lattice_size)
        if smoothing > 0:
            raw = gaussian_filter1d(raw, sigma=smoothing, mode='wrap')

        lo, hi = raw.min(), raw.max()
        self.lattice = (raw - lo) / (hi - lo + 1e-12)
        self.size = lattice_size

    def _lerp(self, a, b, t):
        return a + t * (b - a)

    def noise(self, x: float) -> float:
        """Get noise value at x."""
        x0 = np.floor(x)
        i0 = int(x0) % self.size
        i1 = (i0 + 1) % self.size
        return float(self._lerp(self.lattice[i0], self.lattice[i1], smooth_step(x - x0)))

    def __call__(self, x: float) -> float:
        return self.noise(x)
