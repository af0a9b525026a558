from typing import List, Tuple

import pytest

from stakeholder.logging import LoggingManager
from stakeholder.progress import Color, Terminal
from stakeholder.rng import Rng
from stakeholder.session import Session, SessionConfig


class FakeTerminal(Terminal):
    """In-memory terminal that models one editable row plus finished lines."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: List[str] = []
        self.segments: List[Tuple[str, Color]] = []
        self.cursor_visible = True
        self.clears = 0
        self._row: List[str] = []
        self._column = 0

    @property
    def column(self) -> int:
        return self._column

    @property
    def current_line(self) -> str:
        return "".join(self._row)

    def move_to_column(self, column: int) -> None:
        self._column = column

    def show_cursor(self, visible: bool) -> None:
        self.cursor_visible = visible

    def clear(self) -> None:
        self.clears += 1
        self._row = []
        self._column = 0

    def write(self, text: str) -> None:
        if text:
            self.segments.append((text, self.color))
        for char in text:
            if self._column < len(self._row):
                self._row[self._column] = char
            else:
                self._row.extend(" " * (self._column - len(self._row)))
                self._row.append(char)
            self._column += 1

    def write_line(self, text: str = "") -> None:
        self.write(text)
        self.lines.append(self.current_line)
        self._row = []
        self._column = 0

    def plain_lines(self) -> List[str]:
        return [line.rstrip() for line in self.lines]


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TickingClock(FakeClock):
    """Clock that moves forward a fixed step on every reading."""

    def __init__(self, step: float = 1.0) -> None:
        super().__init__(0.0)
        self.step = step

    def __call__(self) -> float:
        self.now += self.step
        return self.now


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def rng(sleeps):
    return Rng(seed=1234, sleep=sleeps.append)


@pytest.fixture
def logging_manager():
    manager = LoggingManager()
    yield manager
    manager.cleanup()


@pytest.fixture
def make_session(terminal, rng, clock):
    def factory(**overrides):
        return Session(
            config=SessionConfig(**overrides),
            terminal=terminal,
            rng=rng,
            clock=clock,
        )
    return factory
