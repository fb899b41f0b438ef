import numpy as np
import pytest

from footfall.core.constants import EPSILON
from footfall.core.vector import (
    distance, from_polar, heading, lerp, magnitude, map_range, rotate,
    safe_distance, set_mag, vec,
)


def test_magnitude_and_distance():
    assert magnitude(vec(3, 4)) == pytest.approx(5.0)
    assert distance(vec(1, 1), vec(4, 5)) == pytest.approx(5.0)


def test_safe_distance_floors_coincident_points():
    p = vec(2.0, 2.0)
    assert distance(p, p) == 0.0
    assert safe_distance(p, p) == EPSILON


def test_heading_quadrants():
    assert heading(vec(1, 0)) == pytest.approx(0.0)
    assert heading(vec(0, 1)) == pytest.approx(np.pi / 2)
    assert heading(vec(-1, 0)) == pytest.approx(np.pi)


def test_from_polar_matches_heading_and_radius():
    v = from_polar(7.0, 1.1)
    assert magnitude(v) == pytest.approx(7.0)
    assert heading(v) == pytest.approx(1.1)


def test_rotate_preserves_magnitude():
    v = vec(3, -2)
    r = rotate(v, 0.73)
    assert magnitude(r) == pytest.approx(magnitude(v))
    assert heading(r) == pytest.approx(heading(v) + 0.73)


def test_set_mag():
    assert set_mag(vec(10, 0), 3) == pytest.approx(np.array([3.0, 0.0]))
    assert np.all(set_mag(vec(0, 0), 3) == 0.0)


def test_lerp_returns_new_array():
    a = vec(0, 0)
    out = lerp(a, vec(10, 20), 0.1)
    assert out == pytest.approx(np.array([1.0, 2.0]))
    assert np.all(a == 0.0)


def test_map_range_and_clamp():
    assert map_range(0.5, 0, 1, 10, 20) == pytest.approx(15.0)
    assert map_range(2.0, 0, 1, 10, 20) == pytest.approx(30.0)
    assert map_range(2.0, 0, 1, 10, 20, clamp=True) == pytest.approx(20.0)
    # Descending output range clamps too
    assert map_range(-1.0, 0, 1, 50, 0, clamp=True) == pytest.approx(50.0)
    assert map_range(5.0, 0, 1, 50, 0, clamp=True) == pytest.approx(0.0)
