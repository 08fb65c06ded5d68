"""Stdout logging adapter."""

from datetime import datetime

from .. import config

LEVELS = {'debug': 10, 'info': 20, 'warn': 30, 'error': 40}


class StdoutAdapter:
    """Adapter for stdout logging."""

    def __init__(self, min_level: str = config.LOG_LEVEL):
        self.min_level = LEVELS.get(min_level.lower(), LEVELS['info'])

    def log(self, level: str, message: str) -> None:
        """Write log entry to stdout."""
        if LEVELS.get(level.lower(), LEVELS['error']) < self.min_level:
            return
        timestamp = datetime.now().isoformat()
        print(f"[{timestamp}] {level.upper()}: {message}")
