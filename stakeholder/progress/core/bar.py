"""
Core Progress Bar Module

The in-place, template-driven progress bar.
"""

import logging
import time
from enum import Enum
from typing import Callable, Optional, Tuple

from stakeholder.progress.config import ProgressConfig, get_config
from stakeholder.progress.core.state import ProgressState
from stakeholder.progress.core.template import Field, parse_template
from stakeholder.progress.display.line_renderer import LineRenderer
from stakeholder.progress.display.terminal import RichTerminal, Terminal

logger = logging.getLogger(__name__)


class BarStatus(Enum):
    """Lifecycle of a progress bar."""
    CREATED = "created"
    ACTIVE = "active"
    FINISHED = "finished"


class ProgressBar:
    """
    Progress bar that redraws itself on a fixed terminal line.

    Positions are reported as the index of the item just started; the bar
    shows that item as done. Log lines written through ``write_line`` appear
    above the bar, which is redrawn on the next ``set_position``. Reaching
    the maximum finishes the bar automatically.

    Not thread-safe: one bar instance belongs to one thread.

    Usage:
        bar = ProgressBar(10, "{spinner:.green} [{bar:20.cyan/blue}] {pos}/{len}")
        for i in range(10):
            bar.set_position(i)
            if i == 5:
                bar.write_line("halfway")
    """

    def __init__(
        self,
        max_value: int,
        template: str,
        terminal: Optional[Terminal] = None,
        config: Optional[ProgressConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize progress bar.

        Args:
            max_value: Positive maximum value
            template: Template string, parsed on first render
            terminal: Terminal to draw on (default: a new RichTerminal)
            config: Progress configuration (default: global configuration)
            clock: Monotonic clock in seconds, used for elapsed/eta
        """
        self.config = config or get_config()
        self.template = template
        self.terminal = terminal or RichTerminal()
        self.state = ProgressState(max_value, len(self.config.spinner_chars), clock)
        self.status = BarStatus.CREATED
        self._fields: Optional[Tuple[Field, ...]] = None
        self._renderer = LineRenderer(self.terminal, self.config)

    @property
    def value(self) -> int:
        return self.state.value

    @property
    def max_value(self) -> int:
        return self.state.max_value

    @property
    def is_finished(self) -> bool:
        return self.status is BarStatus.FINISHED

    @property
    def fields(self) -> Tuple[Field, ...]:
        """Parsed template, computed once."""
        if self._fields is None:
            self._fields = parse_template(self.template)
            logger.debug(f"Parsed template into {len(self._fields)} fields: {self.template!r}")
        return self._fields

    def render(self) -> None:
        """Draw the bar at its current value."""
        if self.is_finished:
            return

        fields = self.fields
        if self.config.hide_cursor:
            self.terminal.show_cursor(False)
        self._renderer.render(fields, self.state)
        self.status = BarStatus.ACTIVE

    def set_position(self, pos: int) -> None:
        """
        Report the index of the item just started and redraw.

        Args:
            pos: Zero-based index; the bar shows pos + 1 items done
        """
        if self.is_finished:
            logger.debug(f"Ignoring position {pos} on finished progress bar")
            return

        self.state.set_value(min(self.state.max_value, pos + 1))
        self.render()

        if self.state.is_complete:
            self.finish()

    def write_line(self, text: str) -> None:
        """Print a line above the bar without leaving bar residue behind."""
        self.clear_line()
        self.terminal.write_line(text)

    def clear_line(self) -> None:
        """Blank the bar line up to the widest line drawn so far."""
        self.terminal.write(" " * self.state.max_rendered_width)
        self.terminal.move_to_column(0)

    def finish(self) -> None:
        """Clear the bar and restore the cursor."""
        if self.is_finished:
            return

        self.clear_line()
        if self.config.hide_cursor:
            self.terminal.show_cursor(True)
        self.status = BarStatus.FINISHED

    def finish_and_clear(self) -> None:
        """Same as finish(); the bar line is always cleared."""
        self.finish()

    def __enter__(self) -> "ProgressBar":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.finish()
