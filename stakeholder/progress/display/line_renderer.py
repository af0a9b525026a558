"""
Line Renderer

Draws a parsed template on a single terminal line, in place.
"""

import logging
from typing import Callable, Dict, Sequence, Tuple

from stakeholder.progress.config import ProgressConfig
from stakeholder.progress.core.state import ProgressState, format_duration
from stakeholder.progress.core.template import Field, FieldKind
from stakeholder.progress.display.terminal import Terminal

logger = logging.getLogger(__name__)


def bar_segments(value: int, max_value: int, width: int) -> Tuple[int, int]:
    """
    Split a bar of the given width into (filled, remaining) cells.

    filled + remaining == width for every value in [0, max_value].
    """
    filled = value * width // max_value
    return filled, width - filled


class LineRenderer:
    """
    Draws fields on the current terminal row.

    Each call starts at the cursor's current column and leaves the cursor
    back at that column, on the same row, with the ambient color unchanged.
    """

    def __init__(self, terminal: Terminal, config: ProgressConfig) -> None:
        self.terminal = terminal
        self.config = config
        self._handlers: Dict[FieldKind, Callable[[Field, ProgressState], None]] = {
            FieldKind.TEXT: self._render_text,
            FieldKind.SPINNER: self._render_spinner,
            FieldKind.ELAPSED: self._render_elapsed,
            FieldKind.ETA: self._render_eta,
            FieldKind.POS: self._render_pos,
            FieldKind.LEN: self._render_len,
            FieldKind.BAR: self._render_bar,
        }

    def render(self, fields: Sequence[Field], state: ProgressState) -> None:
        """
        Draw one line from fields and state.

        Args:
            fields: Parsed template fields
            state: Progress state to read values from
        """
        origin = self.terminal.column
        try:
            spun = False
            for field in fields:
                self._handlers[field.kind](field, state)
                spun = spun or field.kind is FieldKind.SPINNER
            if spun:
                state.advance_spinner()
            state.record_width(self.terminal.column)
        finally:
            self.terminal.move_to_column(origin)

    def _render_text(self, field: Field, state: ProgressState) -> None:
        self.terminal.write(field.literal)

    def _render_spinner(self, field: Field, state: ProgressState) -> None:
        glyph = self.config.spinner_chars[state.spinner_frame % len(self.config.spinner_chars)]
        with self.terminal.foreground(field.primary_color):
            self.terminal.write(glyph)

    def _render_elapsed(self, field: Field, state: ProgressState) -> None:
        self.terminal.write(format_duration(state.elapsed()))

    def _render_eta(self, field: Field, state: ProgressState) -> None:
        self.terminal.write(format_duration(state.eta()))

    def _render_pos(self, field: Field, state: ProgressState) -> None:
        self.terminal.write(str(state.value))

    def _render_len(self, field: Field, state: ProgressState) -> None:
        self.terminal.write(str(state.max_value))

    def _render_bar(self, field: Field, state: ProgressState) -> None:
        filled, remaining = bar_segments(state.value, state.max_value, field.width or 0)

        with self.terminal.foreground(field.primary_color):
            self.terminal.write(self.config.filled_char * filled)

        if remaining > 0:
            with self.terminal.foreground(field.secondary_color):
                self.terminal.write(self.config.empty_char * remaining)
