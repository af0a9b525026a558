"""
Random Helpers

One random generator per session, seeded once and passed to everything that
needs randomness.
"""

import logging
import random
import time
from typing import Callable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Rng:
    """
    Session-wide random source.

    Ranges are half-open: ``randint(5, 25)`` returns 5..24.
    """

    def __init__(self, seed: Optional[int] = None, sleep: Callable[[float], None] = time.sleep) -> None:
        """
        Initialize random source.

        Args:
            seed: Optional seed for reproducible sessions
            sleep: Sleep function taking seconds (replaced in tests)
        """
        self.seed = seed
        self._random = random.Random(seed)
        self._sleep = sleep
        logger.debug(f"Random source initialized (seed={seed})")

    def randint(self, low: int, high: int) -> int:
        """Random integer in [low, high); returns low when the range is empty."""
        if high <= low:
            return low
        return self._random.randrange(low, high)

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self._random.random() <= probability

    def choice(self, items: Sequence[T]) -> T:
        return self._random.choice(items)

    def choice_between(self, primary: Sequence[T], probability: float, secondary: Sequence[T]) -> T:
        """Pick from primary with the given probability, otherwise from secondary."""
        return self.choice(primary if self.chance(probability) else secondary)

    def weighted_choice(self, items: Sequence[T], weights: Sequence[int]) -> T:
        if len(items) != len(weights):
            raise ValueError("items and weights must have the same length")
        return self._random.choices(items, weights=weights, k=1)[0]

    def shuffled(self, items: Sequence[T]) -> List[T]:
        """Shuffled copy of items."""
        result = list(items)
        self._random.shuffle(result)
        return result

    def sleep_ms(self, low: int, high: int) -> None:
        """Sleep a random number of milliseconds in [low, high)."""
        self._sleep(self.randint(low, high) / 1000)

    def pause(self, seconds: float) -> None:
        """Fixed pause, routed through the same sleep function."""
        self._sleep(seconds)
