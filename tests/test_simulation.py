import json

import numpy as np
import pytest

from footfall.core.config import SimulationConfig
from footfall.manager.simulation import SimulationWorld
from footfall.world.footprints import Footprint


@pytest.fixture
def world(isolated_logs):
    return SimulationWorld(seed=1234, events=isolated_logs)


def test_regenerate_builds_population(world):
    world.regenerate(8)
    creatures = world.creatures
    assert len(creatures) == 8
    assert [c.follows_target for c in creatures] == [False] * 7 + [True]
    assert [c.id for c in creatures] == [0, 1, 2, 3, 4, 5, 6, 8]
    for c in creatures:
        assert c.tail_length == 10
        legged = [i for i, seg in enumerate(c.tail) if seg.feet]
        assert legged == [1, 5, 9]
        assert all(len(c.tail[i].feet) == 2 for i in legged)


def test_regenerate_single_creature_is_the_follower(world):
    world.regenerate(1)
    assert len(world.creatures) == 1
    assert world.creatures[0].follows_target


def test_regenerate_rejects_empty_population(world):
    with pytest.raises(ValueError):
        world.regenerate(0)


def test_regenerate_clears_footprints(world):
    world.regenerate()
    world.ledger.add(Footprint(pos=np.zeros(2), size=1.0, facing=0.0))
    world.regenerate()
    assert len(world.footprints) == 0


def test_advance_ages_footprints_once_per_tick(world):
    fp = world.ledger.add(Footprint(pos=np.zeros(2), size=1.0, facing=0.0))
    world.advance(1)
    world.advance(2)
    assert fp.age == 2


def test_prune_only_on_cadence(world):
    old = world.ledger.add(Footprint(pos=np.zeros(2), size=1.0, facing=0.0))
    old.age = 199
    world.advance(59)
    assert old in world.footprints
    assert old.age == 200
    world.advance(60)
    assert old not in world.footprints


def test_prune_keeps_young_footprints(world):
    young = world.ledger.add(Footprint(pos=np.zeros(2), size=1.0, facing=0.0))
    young.age = 50
    world.advance(60)
    assert young in world.footprints


def test_walking_leaves_footprints_that_expire(world):
    world.regenerate()
    for tick in range(1, 200):
        world.advance(tick, cursor=np.array([600.0, 400.0]))
    assert world.total_footprints > 0
    assert all(fp.age < 200 + 60 for fp in world.footprints)


def test_seeded_worlds_are_reproducible(isolated_logs):
    a = SimulationWorld(seed=7, events=isolated_logs)
    b = SimulationWorld(seed=7, events=isolated_logs)
    a.regenerate()
    b.regenerate()
    for tick in range(1, 120):
        a.advance(tick)
        b.advance(tick)
    for ca, cb in zip(a.creatures, b.creatures):
        assert np.array_equal(ca.head.pos, cb.head.pos)
        for sa, sb in zip(ca.tail, cb.tail):
            assert np.array_equal(sa.pos, sb.pos)
    assert len(a.footprints) == len(b.footprints)


def test_follower_idles_without_cursor(world):
    world.regenerate(2)
    follower = world.creatures[-1]
    start = follower.head.pos.copy()
    world.advance(1, cursor=None)
    assert np.array_equal(follower.head.pos, start)


def test_toggle_continuous_shape_mode(world):
    assert world.config.draw_continuous_shape is True
    assert world.toggle_continuous_shape_mode() is False
    assert world.config.draw_continuous_shape is False
    assert world.toggle_continuous_shape_mode() is True


def test_snapshots_are_read_only_copies(world):
    world.regenerate(3)
    snap = world.creatures
    assert isinstance(snap, tuple)
    world.regenerate(2)
    assert len(snap) == 3


def test_statistics(world):
    world.regenerate(4)
    world.advance(5)
    stats = world.get_statistics()
    assert stats['creatures'] == 4
    assert stats['followers'] == 1
    assert stats['feet'] == 4 * 6
    assert stats['tick'] == 5


def test_config_population_and_tail_length(isolated_logs):
    cfg = SimulationConfig(population=3, tail_length=6)
    world = SimulationWorld(config=cfg, seed=0, events=isolated_logs)
    world.regenerate()
    assert len(world.creatures) == 3
    assert all(c.tail_length == 6 for c in world.creatures)


def test_push_apart_mode_runs(isolated_logs):
    cfg = SimulationConfig(push_segments_apart=True)
    world = SimulationWorld(config=cfg, seed=3, events=isolated_logs)
    world.regenerate()
    for tick in range(1, 30):
        world.advance(tick)
    for c in world.creatures:
        assert all(np.all(np.isfinite(seg.pos)) for seg in c.tail)


def test_regenerate_is_logged(world, isolated_logs):
    world.regenerate(5)
    isolated_logs.flush()
    with open(isolated_logs.filepath) as f:
        events = [json.loads(line) for line in f]
    regen = [e for e in events if e['type'] == 'regenerate']
    assert regen and regen[-1]['count'] == 5
    assert regen[-1]['follower_id'] == 5
