"""
Session Context

Bundles the configuration, terminal and random source every activity uses.
"""

import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from stakeholder.logging import LoggingManager
from stakeholder.progress import Color, ProgressBar, Terminal
from stakeholder.rng import Rng
from stakeholder.session.config import SessionConfig

logger = logging.getLogger(__name__)


class Session:
    """Everything an activity needs to produce output."""

    def __init__(
        self,
        config: SessionConfig,
        terminal: Terminal,
        rng: Rng,
        logging_manager: Optional[LoggingManager] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize session.

        Args:
            config: Session configuration
            terminal: Terminal all output goes to
            rng: Session-wide random source
            logging_manager: Manager that routes console logging around bars
            clock: Monotonic clock in seconds
        """
        self.config = config
        self.terminal = terminal
        self.rng = rng
        self.logging_manager = logging_manager
        self.clock = clock

    def echo(self, text: str = "", color: Optional[Color] = None, newline: bool = True) -> None:
        """Write text, dropping the color in minimal output mode."""
        if self.config.minimal_output:
            color = None
        self.terminal.echo(text, color, newline)

    def echo_colored(self, text: str, color: Color, newline: bool = True) -> None:
        """Write text in a color even in minimal output mode."""
        self.terminal.echo(text, color, newline)

    @contextmanager
    def progress_bar(self, max_value: int, template: str) -> Iterator[ProgressBar]:
        """
        Create a progress bar on the session terminal.

        The bar is finished when the block exits, and console logging is
        routed through it while the block runs.
        """
        bar = ProgressBar(max_value, template, terminal=self.terminal, clock=self.clock)
        try:
            if self.logging_manager is None:
                yield bar
            else:
                with self.logging_manager.progress_mode(bar):
                    yield bar
        finally:
            bar.finish()

    def pause(self, seconds: float) -> None:
        self.rng.pause(seconds)
