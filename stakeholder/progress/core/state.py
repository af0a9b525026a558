"""
Core Progress State Module

Holds the mutable value, clock and spinner data a progress bar renders from.
"""

import time
from datetime import timedelta
from typing import Callable


def format_duration(duration: timedelta) -> str:
    """
    Format a duration as hh:mm:ss.

    Hours are not wrapped at 24, and sub-second parts are truncated.
    """
    total_seconds = max(0, int(duration.total_seconds()))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class ProgressState:
    """
    Value, maximum, start clock and spinner cursor of one progress bar.

    Invariant: 0 <= value <= max_value.
    """

    def __init__(
        self,
        max_value: int,
        spinner_length: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize progress state.

        Args:
            max_value: Positive maximum value
            spinner_length: Number of glyphs in the spinner cycle
            clock: Monotonic clock returning seconds
        """
        if max_value <= 0:
            raise ValueError(f"max_value must be positive, got {max_value}")
        if spinner_length <= 0:
            raise ValueError(f"spinner_length must be positive, got {spinner_length}")

        self.max_value = max_value
        self.value = 0
        self.spinner_frame = 0
        self.max_rendered_width = 0
        self._spinner_length = spinner_length
        self._clock = clock
        self.start_time = clock()

    def set_value(self, value: int) -> None:
        """Set the current value, clamped to [0, max_value]."""
        self.value = max(0, min(self.max_value, value))

    @property
    def is_complete(self) -> bool:
        return self.value >= self.max_value

    def advance_spinner(self) -> None:
        """Move the spinner cursor one step, wrapping at the cycle length."""
        self.spinner_frame = (self.spinner_frame + 1) % self._spinner_length

    def elapsed(self) -> timedelta:
        """Time since the state was created."""
        return timedelta(seconds=self._clock() - self.start_time)

    def eta(self) -> timedelta:
        """
        Estimated remaining time by linear projection.

        Zero when nothing is done yet or everything is done.
        """
        if self.value == 0 or self.value >= self.max_value:
            return timedelta(0)

        elapsed_ms = self.elapsed() / timedelta(milliseconds=1)
        estimated_total = elapsed_ms * self.max_value / self.value
        return timedelta(milliseconds=estimated_total - elapsed_ms)

    def record_width(self, width: int) -> None:
        """Raise the high-water mark of rendered line width."""
        self.max_rendered_width = max(self.max_rendered_width, width)
