"""
Configuration for the CarWorks demo runner.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DemoConfig:
    """Runtime settings for the demonstration scenario.

    The scenario itself is fixed; only logging is configurable.
    """

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)

    def __post_init__(self):
        """Validate and normalize configuration."""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {self.log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
