import importlib
import json

import pytest

footfall_main = importlib.import_module('footfall.main')


@pytest.fixture(autouse=True)
def no_data_dir(monkeypatch):
    monkeypatch.delenv('FOOTFALL_POPULATION', raising=False)
    monkeypatch.setattr(footfall_main, 'ensure_dirs', lambda: None)


def test_headless_run_stops_after_ticks(isolated_logs):
    world = footfall_main.main_headless(ticks=120, seed=1)
    assert world.last_tick == 120
    assert len(world.creatures) == 8
    with open(isolated_logs.filepath) as f:
        types = [json.loads(line)['type'] for line in f]
    assert types[0] == 'regenerate'
    assert types[1] == 'session_start'
    assert types[-1] == 'session_end'


def test_main_dispatches_headless(monkeypatch):
    calls = {}
    monkeypatch.setattr(footfall_main, 'main_headless',
                        lambda ticks=None, seed=None: calls.update(ticks=ticks, seed=seed))
    footfall_main.main(['--headless', '--ticks', '5', '--seed', '9'])
    assert calls == {'ticks': 5, 'seed': 9}


def test_help_prints_docstring(capsys):
    footfall_main.main(['--help'])
    assert 'FOOTFALL' in capsys.readouterr().out.upper()


def test_bad_flag_value_exits(capsys):
    with pytest.raises(SystemExit):
        footfall_main.main(['--headless', '--ticks'])
    assert '[Error]' in capsys.readouterr().out


def test_arg_value():
    assert footfall_main._arg_value(['--seed', '3'], '--seed') == 3
    assert footfall_main._arg_value([], '--seed') is None
