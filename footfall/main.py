#!/usr/bin/env python3
"""
Footfall - Procedural Creature Locomotion
=========================================

A small population of segmented creatures wander the canvas, dragging
elastic tails and planting footprints as their legs step. The last
creature follows the mouse.

Usage:
    python -m footfall                         # Visual mode
    python -m footfall --headless              # No window, status lines only
    python -m footfall --headless --ticks 600  # Stop after N ticks
    python -m footfall --seed 42               # Reproducible run
    python -m footfall --help                  # Show help

Controls (in visualization):
    R: Regenerate creatures
    C: Toggle continuous shape
    S: Toggle square/round segments
    Space: Pause/resume
    V: Cycle log verbosity
    ?: Show controls

Environment:
    FOOTFALL_<SETTING> overrides any SimulationConfig field, e.g.
    FOOTFALL_POPULATION=12 or FOOTFALL_DRAW_CONTINUOUS_SHAPE=0.
"""

import sys
import time
from typing import List, Optional

from .core.config import SimulationConfig
from .core.constants import DATA_DIR, ensure_dirs
from .manager.simulation import SimulationWorld
from .events.logger import event_log
from .events.console_log import console_log

STATUS_INTERVAL = 100
SNAPSHOT_INTERVAL = 1000


def _arg_value(argv: List[str], flag: str) -> Optional[int]:
    """Integer following *flag* in argv, or None if absent."""
    if flag not in argv:
        return None
    idx = argv.index(flag)
    if idx + 1 >= len(argv):
        raise ValueError(f"{flag} needs a value")
    return int(argv[idx + 1])


def print_banner(mode: str = 'visual'):
    """Print startup banner."""
    print("=" * 60)
    print("FOOTFALL - Procedural Creature Locomotion")
    print("=" * 60)
    if mode == 'headless':
        print("HEADLESS MODE")
        print("Running without visualization. Press Ctrl+C to stop.")
    else:
        print("Move the mouse to lead the last creature.")
    print("=" * 60)


def status_line(world: SimulationWorld) -> str:
    stats = world.get_statistics()
    return (f"[Status] tick {stats['tick']:6d} | creatures {stats['creatures']} | "
            f"footprints {stats['footprints']:4d} (total {stats['total_footprints']})")


def build_world(seed: Optional[int] = None,
                config: Optional[SimulationConfig] = None) -> SimulationWorld:
    """Create and populate a world from config (default: environment)."""
    config = config or SimulationConfig.from_env()
    world = SimulationWorld(config=config, seed=seed)
    world.regenerate()
    return world


def main_visual(seed: Optional[int] = None):
    """Main loop with visualization."""
    from .visualization.main_vis import FootfallVisualization

    print_banner('visual')
    ensure_dirs()
    console_log().log(f"[Init] Data directory: {DATA_DIR}")

    world = build_world(seed)
    viz = FootfallVisualization(world)
    event_log().log_session(0, 'start', 'visual')

    try:
        while True:
            viz.update()
            if viz.tick and viz.tick % STATUS_INTERVAL == 0 and not viz.paused:
                console_log().log(status_line(world), viz.tick)
    except KeyboardInterrupt:
        print("\n[Shutdown] Stopping...")
    finally:
        event_log().log_session(world.last_tick, 'end', 'visual')
        event_log().flush()
        viz.close()


def main_headless(ticks: Optional[int] = None, seed: Optional[int] = None) -> SimulationWorld:
    """
    Headless mode - no visualization.

    Args:
        ticks: Stop after this many ticks (None = run until Ctrl+C)
        seed: Seed for a reproducible run

    Returns:
        The world, in its final state
    """
    print_banner('headless')
    ensure_dirs()

    world = build_world(seed)
    event_log().log_session(0, 'start', 'headless')
    started = time.time()
    tick = 0

    try:
        while ticks is None or tick < ticks:
            tick += 1
            world.advance(tick)

            if tick % STATUS_INTERVAL == 0:
                console_log().log(status_line(world), tick)
                summary = console_log().get_summary(tick)
                if summary:
                    console_log().log(summary, tick, force=True)

            if tick % SNAPSHOT_INTERVAL == 0:
                event_log().log_population(tick, world.get_statistics())
                event_log().flush()
    except KeyboardInterrupt:
        print("\n[Shutdown] Stopping...")
    finally:
        elapsed = time.time() - started
        console_log().log(f"[Headless] {tick} ticks in {elapsed:.1f}s")
        event_log().log_session(tick, 'end', 'headless')
        event_log().flush()

    return world


def main(argv: Optional[List[str]] = None):
    """Entry point - choose mode based on arguments."""
    argv = sys.argv[1:] if argv is None else argv
    if '--help' in argv or '-h' in argv:
        print(__doc__)
        return

    try:
        seed = _arg_value(argv, '--seed')
        ticks = _arg_value(argv, '--ticks')
    except ValueError as e:
        print(f"[Error] {e}")
        sys.exit(2)

    if '--headless' in argv:
        main_headless(ticks=ticks, seed=seed)
    else:
        main_visual(seed=seed)


if __name__ == "__main__":
    main()
