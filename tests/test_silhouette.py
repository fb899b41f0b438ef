import numpy as np
import pytest

from conftest import make_creature
from footfall.core.vector import distance, from_polar
from footfall.creature.creature import create_creature
from footfall.creature.silhouette import (
    build_outline, head_cap_points, side_points, tail_cap_points,
)


@pytest.mark.parametrize('n', [1, 3, 10])
def test_outline_point_count(n):
    cr = make_creature(n=n)
    assert build_outline(cr).shape == (2 + 2 * n + 3 + 3, 2)


def test_side_points_are_symmetric():
    cr = create_creature(0, rng=np.random.default_rng(2))
    for part in [cr.head] + cr.tail:
        left, right = side_points(part)
        assert distance(part.pos, left) == pytest.approx(part.size / 2)
        assert distance(part.pos, right) == pytest.approx(part.size / 2)
        assert distance(left, right) == pytest.approx(part.size)


def test_outline_ordering():
    cr = make_creature(n=3, head_size=20.0, seg_size=10.0)
    pts = build_outline(cr)
    n = 3
    head_left, head_right = side_points(cr.head)
    pairs = [side_points(seg) for seg in cr.tail]

    assert pts[0] == pytest.approx(head_left)
    for i in range(n):
        assert pts[1 + i] == pytest.approx(pairs[i][0])
    assert pts[1 + n:4 + n] == pytest.approx(tail_cap_points(cr.tail[-1]))
    for i in range(n):
        assert pts[4 + n + i] == pytest.approx(pairs[n - 1 - i][1])
    assert pts[4 + 2 * n] == pytest.approx(head_right)
    assert pts[5 + 2 * n:] == pytest.approx(head_cap_points(cr.head))


def test_head_left_is_a_quarter_turn_clockwise():
    cr = make_creature(head_size=20.0)
    left, right = side_points(cr.head)
    assert left == pytest.approx(np.array([0.0, -10.0]))
    assert right == pytest.approx(np.array([0.0, 10.0]))


def test_caps_fan_out_front_and_back():
    cr = make_creature(n=2, head_size=20.0, seg_size=10.0)
    nose = head_cap_points(cr.head)
    assert nose[1] == pytest.approx(cr.head.pos + from_polar(10.0, 0.0))
    last = cr.tail[-1]
    tip = tail_cap_points(last)
    assert tip[1] == pytest.approx(last.pos + from_polar(5.0, np.pi))
    assert all(distance(last.pos, p) == pytest.approx(5.0) for p in tip)


def test_outline_requires_tail():
    cr = make_creature(n=1)
    cr.tail.clear()
    with pytest.raises(ValueError):
        build_outline(cr)
