"""
Progress Configuration Module

Configuration dataclass for the progress bar glyphs and cursor handling.
"""

import logging
from dataclasses import dataclass
from threading import RLock

logger = logging.getLogger(__name__)


@dataclass
class ProgressConfig:
    """Configuration settings for progress bars."""

    # Cyclic spinner animation, one glyph per render
    spinner_chars: str = "⠁⠁⠉⠙⠚⠒⠂⠂⠒⠲⠴⠤⠄⠄⠤⠠⠠⠤⠦⠖⠒⠐⠐⠒⠓⠋⠉⠈⠈ "

    # Filled, partial and empty bar glyphs (partial is unused)
    progress_chars: str = "▰▱▱"

    # Hide the cursor while a bar is on screen
    hide_cursor: bool = True

    def __post_init__(self) -> None:
        if not self.spinner_chars:
            raise ValueError("spinner_chars must not be empty")
        if len(self.progress_chars) != 3:
            raise ValueError(
                f"progress_chars must have exactly 3 glyphs, got {len(self.progress_chars)}"
            )

    @property
    def filled_char(self) -> str:
        return self.progress_chars[0]

    @property
    def empty_char(self) -> str:
        return self.progress_chars[2]


# Global configuration instance
_config = ProgressConfig()
_config_lock = RLock()


def get_config() -> ProgressConfig:
    """Get the current global progress configuration."""
    with _config_lock:
        return _config


def set_config(config: ProgressConfig) -> None:
    """Set the global progress configuration."""
    global _config
    with _config_lock:
        _config = config


def update_config(**kwargs) -> None:
    """Update specific configuration values."""
    global _config
    with _config_lock:
        values = dict(_config.__dict__)
        for key, value in kwargs.items():
            if key not in values:
                raise ValueError(f"Unknown configuration option: {key}")
            values[key] = value
        # Rebuild so the glyph checks run on the new values
        _config = ProgressConfig(**values)
        logger.debug(f"Progress configuration updated: {sorted(kwargs)}")
