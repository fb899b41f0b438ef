from types import SimpleNamespace

import numpy as np
import pytest

from footfall.manager.simulation import SimulationWorld
from footfall.visualization.main_vis import FootfallVisualization


@pytest.fixture
def viz(isolated_logs):
    world = SimulationWorld(seed=5, events=isolated_logs)
    world.regenerate(3)
    v = FootfallVisualization(world, interactive=False)
    yield v
    v.close()


def _key(k):
    return SimpleNamespace(key=k)


def test_update_draws_then_advances(viz):
    viz.update()
    viz.update()
    assert viz.tick == 2
    assert viz.world.last_tick == 2
    assert len(viz.ax.patches) > 0


def test_pause_stops_ticks(viz):
    viz._on_key(_key(' '))
    viz.update()
    assert viz.tick == 0
    viz._on_key(_key(' '))
    viz.update()
    assert viz.tick == 1


def test_keys_map_to_world_commands(viz):
    first = viz.world.creatures
    viz._on_key(_key('r'))
    assert viz.world.creatures[0] is not first[0]

    viz._on_key(_key('c'))
    assert viz.world.config.draw_continuous_shape is False
    viz._on_key(_key('s'))
    assert viz.world.config.use_squares is False
    viz.update()


def test_mouse_tracks_cursor(viz):
    viz._on_motion(SimpleNamespace(inaxes=viz.ax, xdata=100.0, ydata=50.0))
    assert viz.cursor == pytest.approx(np.array([100.0, 50.0]))
    viz._on_leave(SimpleNamespace())
    assert viz.cursor is None


def test_continuous_toggle_reports_once(viz, capsys):
    capsys.readouterr()
    viz._on_key(_key('c'))
    out = capsys.readouterr().out
    assert out.count('draw_continuous_shape') == 1
    assert '[Config] draw_continuous_shape: OFF' in out
