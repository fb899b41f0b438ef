"""
Event Logger for the Footfall simulation.

Logs key simulation events to a JSONL file for easy parsing.
Each line is a self-contained JSON object.
"""

import json
import os
import time
from typing import Optional

from ..core.constants import EVENT_LOG_FILE


class EventLogger:
    """
    Logs key simulation events to a JSONL file for easy parsing.
    Each line is a self-contained JSON object.

    Event types:
    - session_start / session_end: A run began or ended
    - regenerate: The population was rebuilt
    - prune: Expired footprints were filtered out
    - population: Periodic snapshot of counts
    - toggle: A rendering setting was flipped
    """

    _instance: Optional['EventLogger'] = None

    def __init__(self, filepath: str = None):
        """
        Initialize event logger.

        Args:
            filepath: Path to JSONL log file (default: EVENT_LOG_FILE from constants)
        """
        self.filepath = filepath or EVENT_LOG_FILE
        self.enabled = True
        self.buffer = []
        self.buffer_size = 10  # Flush every N events

    @classmethod
    def get(cls) -> 'EventLogger':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = EventLogger()
        return cls._instance

    @classmethod
    def reset(cls, instance: Optional['EventLogger'] = None):
        """Reset singleton, optionally installing *instance* (useful for testing)."""
        cls._instance = instance

    def log(self, event_type: str, step: int = 0, **data):
        """
        Log an event.

        Args:
            event_type: Type of event (e.g., 'regenerate', 'prune')
            step: Simulation tick when the event occurred
            **data: Additional event data
        """
        if not self.enabled:
            return

        event = {
            'type': event_type,
            'step': step,
            'time': time.strftime('%Y-%m-%d %H:%M:%S'),
            **data
        }

        self.buffer.append(event)

        if len(self.buffer) >= self.buffer_size:
            self.flush()

    def flush(self):
        """Write buffered events to file."""
        if not self.buffer:
            return

        try:
            directory = os.path.dirname(self.filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.filepath, 'a') as f:
                for event in self.buffer:
                    f.write(json.dumps(event) + '\n')
            self.buffer.clear()
        except OSError as e:
            print(f"[EventLog] Write failed: {e}")

    # === Convenience methods for specific event types ===

    def log_session(self, step: int, phase: str, mode: str):
        """Log the start or end of a run."""
        self.log(f'session_{phase}', step, mode=mode)

    def log_regenerate(self, step: int, count: int, head_sizes: list,
                       follower_id: int = None):
        """Log a population rebuild."""
        self.log('regenerate', step, count=count,
                 head_sizes=[float(s) for s in head_sizes],
                 follower_id=follower_id)

    def log_prune(self, step: int, removed: int, remaining: int):
        """Log a footprint expiry pass."""
        self.log('prune', step, removed=removed, remaining=remaining)

    def log_population(self, step: int, counts: dict):
        """Log periodic population snapshot."""
        self.log('population', step, counts=counts)

    def log_toggle(self, step: int, setting: str, value: bool):
        """Log a rendering setting change."""
        self.log('toggle', step, setting=setting, value=value)


# Global accessor function
def event_log() -> EventLogger:
    """Get the singleton EventLogger instance."""
    return EventLogger.get()
