"""
Logging Module - Progress-Aware Logging System

Keeps console logging from tearing the in-place progress bar. While a bar is
attached, console records are printed above it through the bar's own
write_line, and the bar is redrawn on its next update.

Usage:
    from stakeholder.logging import LoggingManager

    manager = LoggingManager.get_instance()
    manager.setup(log_file, console_level)

    with manager.progress_mode(bar):
        # Console records appear above the bar
        pass
"""

from stakeholder.logging.manager import LoggingManager
from stakeholder.logging.handlers import ProgressAwareConsoleHandler

__all__ = [
    'LoggingManager',
    'ProgressAwareConsoleHandler',
]
