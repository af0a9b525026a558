"""
Terminal Capability Module

The small set of terminal operations progress bars and activities rely on:
cursor column control on the current row, scoped foreground color, cursor
visibility, and writing text with or without a newline.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, Optional

from rich.cells import cell_len
from rich.console import Console
from rich.control import Control

from stakeholder.progress.core.template import Color

logger = logging.getLogger(__name__)


class Terminal(ABC):
    """Abstract base class for terminal backends."""

    def __init__(self) -> None:
        self._color = Color.DEFAULT

    @property
    def color(self) -> Color:
        """Current ambient foreground color."""
        return self._color

    @contextmanager
    def foreground(self, color: Optional[Color]) -> Iterator[None]:
        """
        Scoped foreground color.

        The previous color is restored when the block exits, including
        exits by exception. ``None`` keeps the ambient color.
        """
        previous = self._color
        if color is not None:
            self._color = color
        try:
            yield
        finally:
            self._color = previous

    def echo(self, text: str = "", color: Optional[Color] = None, newline: bool = True) -> None:
        """Write text in a color, optionally ending the line."""
        with self.foreground(color):
            if newline:
                self.write_line(text)
            else:
                self.write(text)

    @property
    @abstractmethod
    def column(self) -> int:
        """Cursor column on the current row (0-based)."""
        pass

    @abstractmethod
    def move_to_column(self, column: int) -> None:
        """Move the cursor to a column on the current row."""
        pass

    @abstractmethod
    def show_cursor(self, visible: bool) -> None:
        """Show or hide the cursor."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear the screen and home the cursor."""
        pass

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text in the current color without a newline."""
        pass

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Write text in the current color followed by a newline."""
        pass


class RichTerminal(Terminal):
    """
    Terminal backend built on a Rich console.

    Rich does not report the cursor position, so the column is tracked from
    the cell width of everything written through this object.
    """

    def __init__(self, console: Optional[Console] = None, no_color: bool = False) -> None:
        """
        Initialize Rich terminal.

        Args:
            console: Optional Rich console instance
            no_color: Strip colors from all output (ignored if console is given)
        """
        super().__init__()
        self.console = console or Console(highlight=False, no_color=no_color)
        self._column = 0

    @property
    def column(self) -> int:
        return self._column

    def move_to_column(self, column: int) -> None:
        self.console.control(Control.move_to_column(column))
        self._column = column

    def show_cursor(self, visible: bool) -> None:
        self.console.show_cursor(visible)

    def clear(self) -> None:
        self.console.clear()
        self._column = 0

    def write(self, text: str) -> None:
        if not text:
            return
        self._print(text, end="")
        if "\n" in text:
            self._column = cell_len(text.rsplit("\n", 1)[1])
        else:
            self._column += cell_len(text)

    def write_line(self, text: str = "") -> None:
        self._print(text, end="\n")
        self._column = 0

    def _print(self, text: str, end: str) -> None:
        self.console.print(
            text,
            style=self._color.value,
            end=end,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
