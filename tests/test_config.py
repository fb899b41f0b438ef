import pytest

from footfall.core.config import SimulationConfig


def test_defaults():
    cfg = SimulationConfig()
    assert cfg.max_footprint_age == 200
    assert cfg.max_foot_dist_multiplier == 2.5
    assert cfg.prune_interval == 60
    assert cfg.tail_length == 10
    assert cfg.population == 8
    assert cfg.use_squares and cfg.draw_continuous_shape
    assert not cfg.push_segments_apart


def test_toggle_boolean():
    cfg = SimulationConfig()
    assert cfg.toggle('use_squares') is False
    assert cfg.use_squares is False


def test_toggle_rejects_non_boolean():
    cfg = SimulationConfig()
    with pytest.raises(ValueError):
        cfg.toggle('population')
    with pytest.raises(ValueError):
        cfg.toggle('no_such_setting')


def test_from_env_overlays_values():
    cfg = SimulationConfig.from_env({
        'FOOTFALL_POPULATION': '12',
        'FOOTFALL_MAX_FOOT_DIST_MULTIPLIER': '3.0',
        'FOOTFALL_DRAW_CONTINUOUS_SHAPE': '0',
        'FOOTFALL_WIDTH': '640',
        'UNRELATED': 'x',
    })
    assert cfg.population == 12
    assert cfg.max_foot_dist_multiplier == 3.0
    assert cfg.draw_continuous_shape is False
    assert cfg.width == 640.0
    assert cfg.height == 800.0


@pytest.mark.parametrize('kwargs', [
    {'width': 0},
    {'height': -1},
    {'tail_length': 0},
    {'population': 0},
    {'max_foot_dist_multiplier': 0},
    {'prune_interval': 0},
])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        SimulationConfig(**kwargs)
