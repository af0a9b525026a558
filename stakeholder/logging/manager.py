"""
Logging Manager - Core Handler Management

Main LoggingManager class that installs the file and console handlers and
coordinates console logging with progress bars.
"""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from threading import RLock
from typing import Iterator, List, Optional, TYPE_CHECKING

from stakeholder.logging.handlers import ProgressAwareConsoleHandler

if TYPE_CHECKING:
    from stakeholder.progress.core.bar import ProgressBar

logger = logging.getLogger(__name__)


class LoggingManager:
    """
    Logging manager with progress bar coordination.

    Installs an optional DEBUG file handler and a progress-aware console
    handler on the root logger. While a progress bar is attached, console
    records are written above the bar through the bar itself.

    Features:
    - Optional file logging at DEBUG level
    - Console level chosen from the command line
    - Nested progress bars (the innermost one receives console output)
    - Context manager support with guaranteed detach
    """

    # Class-level lock for thread safety across instances
    _global_lock = RLock()
    _instance: Optional['LoggingManager'] = None

    def __init__(self) -> None:
        """Initialize logging manager state."""
        self._lock = RLock()
        self._console_handler: Optional[ProgressAwareConsoleHandler] = None
        self._file_handler: Optional[logging.FileHandler] = None
        self._original_handlers: List[logging.Handler] = []
        self._original_level: Optional[int] = None
        self._bars: List['ProgressBar'] = []

    @classmethod
    def get_instance(cls) -> 'LoggingManager':
        """Get or create singleton instance (thread-safe)."""
        if cls._instance is None:
            with cls._global_lock:
                if cls._instance is None:
                    cls._instance = LoggingManager()
        return cls._instance

    @property
    def console_handler(self) -> Optional[ProgressAwareConsoleHandler]:
        return self._console_handler

    def setup(self, log_file: Optional[Path] = None, console_level: int = logging.WARNING) -> None:
        """
        Configure logging to console and, optionally, to a file.

        Args:
            log_file: Optional path to a log file; written at DEBUG level
            console_level: Logging level for console output (default: WARNING)
                          - WARNING: Only errors and warnings (minimal output)
                          - INFO: Session steps (--verbose)
                          - DEBUG: All technical details (--debug)
        """
        with self._lock:
            root_logger = logging.getLogger()

            # Store original state before the first replacement
            if self._original_level is None:
                self._original_handlers = root_logger.handlers.copy()
                self._original_level = root_logger.level

            self._close_handlers()
            root_logger.handlers.clear()

            console_formatter = logging.Formatter(
                '%(levelname)s - %(message)s' if console_level >= logging.INFO
                else '%(name)s - %(levelname)s - %(message)s'
            )
            self._console_handler = ProgressAwareConsoleHandler(stream=sys.stdout)
            self._console_handler.setLevel(console_level)
            self._console_handler.setFormatter(console_formatter)
            root_logger.addHandler(self._console_handler)

            if log_file is not None:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._file_handler = logging.FileHandler(log_file, encoding='utf-8')
                self._file_handler.setLevel(logging.DEBUG)
                self._file_handler.setFormatter(logging.Formatter(
                    '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                ))
                root_logger.addHandler(self._file_handler)

            root_logger.setLevel(logging.DEBUG if log_file is not None else console_level)

            logger.debug("Logging manager setup complete")

    def attach_bar(self, bar: 'ProgressBar') -> None:
        """Route console logging through a progress bar."""
        with self._lock:
            self._bars.append(bar)
            if self._console_handler:
                self._console_handler.set_bar(bar)

    def detach_bar(self, bar: 'ProgressBar') -> None:
        """Stop routing console logging through a progress bar."""
        with self._lock:
            if bar in self._bars:
                self._bars.remove(bar)
            if self._console_handler:
                self._console_handler.set_bar(self._bars[-1] if self._bars else None)

    @contextmanager
    def progress_mode(self, bar: 'ProgressBar') -> Iterator['ProgressBar']:
        """
        Context manager for progress mode with guaranteed cleanup.

        Usage:
            with logging_manager.progress_mode(bar):
                # Console logging appears above the bar
                pass
            # Console logging goes straight to the stream again
        """
        self.attach_bar(bar)
        try:
            yield bar
        finally:
            self.detach_bar(bar)

    def is_progress_mode_active(self) -> bool:
        """Check if a progress bar is currently attached."""
        with self._lock:
            return bool(self._bars)

    def _close_handlers(self) -> None:
        if self._file_handler:
            self._file_handler.close()
            self._file_handler = None
        self._console_handler = None

    def cleanup(self) -> None:
        """
        Clean up logging manager resources.

        Restores original handlers and closes the file handler.
        """
        with self._lock:
            self._bars.clear()
            root_logger = logging.getLogger()
            self._close_handlers()
            root_logger.handlers.clear()
            root_logger.handlers.extend(self._original_handlers)
            if self._original_level is not None:
                root_logger.setLevel(self._original_level)
            self._original_handlers = []
            self._original_level = None
