"""Logging configuration data structure."""
from dataclasses import dataclass

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str = ""  # empty logs to stderr

    def __post_init__(self):
        """Fix invalid values."""
        self.level = str(self.level).upper()
        if self.level not in _LEVELS:
            self.level = "INFO"
        self.file = self.file or ""
