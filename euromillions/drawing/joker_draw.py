"""Frequency-weighted draw over a flat history of values."""

import random
from collections import Counter

from euromillions.config import settings
from euromillions.drawing.base import BaseDrawingAlgorithm
from euromillions.errors import InvalidNumberRangeError


class JokerWeightedHistoryAlgorithm(BaseDrawingAlgorithm):
    strategy = "joker-weighted-history"
    name = "Weighted history draw"
    description = "Random draw weighted by how often each value appears in the history"

    def __init__(
        self,
        history: list[int],
        rng: random.Random | None = None,
        default_range: tuple[int, int] = (1, 10),
    ):
        super().__init__(rng)
        self.history = list(history)
        self.default_range = default_range
        self.frequencies = Counter(self.history)

    def _weighted_choice(self, frequencies: dict[int, int]) -> int | None:
        total = sum(frequencies.values())
        if total <= 0:
            return None

        target = self.rng.randrange(total)
        cumulative = 0
        for value in sorted(frequencies):
            cumulative += frequencies[value]
            if target < cumulative:
                return value
        return None

    def draw_one(self) -> int:
        """One value, weighted by frequency.

        Falls back to a uniform choice over the history, then over
        ``default_range`` when the history is empty.
        """
        value = self._weighted_choice(self.frequencies)
        if value is not None:
            return value
        if self.history:
            return self.rng.choice(self.history)
        low, high = self.default_range
        return self.rng.randint(low, high)

    def draw(self, count: int = settings.DRAW_SIZE) -> list[int]:
        """``count`` distinct values by repeated weighted choice without replacement."""
        if not self.history or count > len(self.frequencies):
            raise InvalidNumberRangeError(
                description=f"History holds {len(self.frequencies)} distinct values, {count} needed"
            )

        remaining = dict(self.frequencies)
        drawn = []
        for _ in range(count):
            value = self._weighted_choice(remaining)
            if value is None:
                value = self.rng.choice(sorted(remaining))
            drawn.append(value)
            del remaining[value]
        return sorted(drawn)
