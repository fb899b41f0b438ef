"""
Console Logger - Configurable verbosity for terminal output.

Verbosity levels:
- MINIMAL: Only startup, shutdown and errors
- NORMAL: Plus regenerations, toggles and periodic status lines
- FULL: Everything (per-prune footprint reports, view changes)

Toggle with 'V' key during simulation.
"""

from enum import IntEnum
from typing import Optional
from collections import defaultdict


class Verbosity(IntEnum):
    MINIMAL = 0   # Just the essentials
    NORMAL = 1    # Simulation-level events
    FULL = 2      # Everything


class ConsoleLogger:
    """
    Manages console output verbosity.

    Filters bracket-prefixed messages based on the current verbosity
    level. Suppressed messages are counted for a periodic summary.
    """

    _instance: Optional['ConsoleLogger'] = None

    def __init__(self):
        self.verbosity = Verbosity.NORMAL
        self.enabled = True

        # Event counting for summaries
        self.event_counts = defaultdict(int)
        self.last_summary_step = 0
        self.summary_interval = 600  # Ticks between summaries

        self.categories = {
            'essential': [
                '[Init]', '[Shutdown]', '[Error]', '[EventLog]', '[Headless]',
            ],
            'normal': [
                '[World]', '[Status]', '[Config]',
            ],
            'full': [
                '[Footprints]', '[Viz]',
            ],
        }

        self.verbosity_names = {
            Verbosity.MINIMAL: "MINIMAL (essentials only)",
            Verbosity.NORMAL: "NORMAL",
            Verbosity.FULL: "FULL (everything)",
        }

    @classmethod
    def get(cls) -> 'ConsoleLogger':
        if cls._instance is None:
            cls._instance = ConsoleLogger()
        return cls._instance

    @classmethod
    def reset(cls):
        cls._instance = None

    def cycle_verbosity(self) -> str:
        """Cycle to next verbosity level."""
        self.verbosity = Verbosity((self.verbosity + 1) % len(Verbosity))
        return self.verbosity_names[self.verbosity]

    def set_verbosity(self, level: Verbosity):
        """Set verbosity level directly."""
        self.verbosity = level

    def should_print(self, message: str) -> bool:
        """Determine if message should be printed at current verbosity."""
        if not self.enabled:
            return False

        for prefix in self.categories['essential']:
            if message.startswith(prefix):
                return True

        for prefix in self.categories['normal']:
            if message.startswith(prefix):
                return self.verbosity >= Verbosity.NORMAL

        for prefix in self.categories['full']:
            if message.startswith(prefix):
                return self.verbosity >= Verbosity.FULL

        # Unlisted bracketed messages are treated as FULL
        if message.startswith('['):
            return self.verbosity >= Verbosity.FULL

        # Non-bracketed messages (banners, help text) always show
        return True

    def count_event(self, message: str):
        """Count suppressed event for later summary."""
        if message.startswith('['):
            end = message.find(']')
            if end > 0:
                self.event_counts[message[1:end]] += 1

    def get_summary(self, step: int) -> Optional[str]:
        """Get summary of suppressed events if interval passed."""
        if step - self.last_summary_step < self.summary_interval:
            return None

        if not self.event_counts:
            return None

        self.last_summary_step = step

        parts = [f"{category}:{count}"
                 for category, count in sorted(self.event_counts.items(), key=lambda x: -x[1])
                 if count > 0]
        self.event_counts.clear()

        if parts:
            return f"[Summary] {', '.join(parts[:8])}"
        return None

    def log(self, message: str, step: int = 0, force: bool = False) -> bool:
        """
        Log a message respecting verbosity.

        Args:
            message: The message to log
            step: Current simulation tick
            force: If True, always print regardless of verbosity

        Returns True if message was printed.
        """
        if force or self.should_print(message):
            print(message)
            return True
        self.count_event(message)
        return False


# Global instance
def console_log() -> ConsoleLogger:
    """Get singleton ConsoleLogger."""
    return ConsoleLogger.get()
