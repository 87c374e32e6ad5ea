"""Uniform draw without replacement from a candidate list."""

import random

from euromillions.config import settings
from euromillions.drawing.base import BaseDrawingAlgorithm
from euromillions.errors import InsufficientCandidatesError


def default_numbers() -> list[int]:
    """Main numbers 1-50."""
    return list(range(1, settings.MAX_NUMBER + 1))


def default_stars() -> list[int]:
    """Stars 1-12."""
    return list(range(1, settings.MAX_STAR + 1))


class ListDrawingAlgorithm(BaseDrawingAlgorithm):
    """Draws from a caller-supplied list (numbers or stars)."""

    strategy = "simple-list"
    name = "List draw"
    description = "Random draw from a list of numbers"

    def __init__(self, candidates: list[int], rng: random.Random | None = None):
        super().__init__(rng)
        self.candidates = sorted(set(candidates))

    def draw(self, count: int = settings.DRAW_SIZE) -> list[int]:
        if len(self.candidates) < count:
            raise InsufficientCandidatesError(len(self.candidates), count)
        return sorted(self.rng.sample(self.candidates, count))
