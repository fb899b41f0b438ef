"""Shared fixtures: offscreen matplotlib and isolated loggers."""

import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from footfall.body.segments import Head, Segment
from footfall.creature.creature import Creature
from footfall.events.console_log import ConsoleLogger
from footfall.events.logger import EventLogger


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path):
    """Point the event log at a temp file and start each test with fresh loggers."""
    logger = EventLogger(str(tmp_path / 'events.jsonl'))
    EventLogger.reset(logger)
    ConsoleLogger.reset()
    yield logger
    EventLogger.reset()
    ConsoleLogger.reset()


def make_creature(n=3, head_size=20.0, follows_target=False, spacing=10.0,
                  seg_size=10.0, creature_id=0):
    """Straight creature along +x: head at origin, segments trailing to -x."""
    head = Head(pos=np.array([0.0, 0.0]), size=head_size, facing=0.0)
    tail = [
        Segment(pos=np.array([-(i + 1) * spacing, 0.0]), size=seg_size, facing=0.0)
        for i in range(n)
    ]
    return Creature(id=creature_id, phase=0.0, follows_target=follows_target,
                    head=head, tail=tail)


def constant_noise(value=0.5):
    return lambda x: value
