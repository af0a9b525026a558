"""
Progress-Aware Console Handler

Custom logging handler that writes through the active progress bar so log
output never tears the bar line.
"""

import logging
import sys
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from stakeholder.progress.core.bar import ProgressBar


class ProgressAwareConsoleHandler(logging.StreamHandler):
    """
    Console handler that respects the active progress bar.

    When a progress bar is attached:
    - Records are written with the bar's write_line, which blanks the bar
      line first; the bar is redrawn on its next update

    When no bar is attached:
    - Normal console logging behavior
    """

    def __init__(self, stream=None) -> None:
        """
        Initialize progress-aware console handler.

        Args:
            stream: Output stream (default: sys.stdout)
        """
        super().__init__(stream or sys.stdout)
        self._bar: Optional["ProgressBar"] = None

    @property
    def bar(self) -> Optional["ProgressBar"]:
        return self._bar

    def set_bar(self, bar: Optional["ProgressBar"]) -> None:
        """Attach a progress bar, or detach with None."""
        self._bar = bar

    def emit(self, record: logging.LogRecord) -> None:
        """
        Emit a log record with progress-aware handling.

        Args:
            record: LogRecord to emit
        """
        bar = self._bar
        if bar is None or bar.is_finished:
            super().emit(record)
            return

        try:
            bar.write_line(self.format(record))
        except Exception:
            self.handleError(record)
