"""Base class for drawing algorithms."""

import random
from abc import ABC, abstractmethod

from euromillions.config import settings


class BaseDrawingAlgorithm(ABC):
    """Abstract base for all drawing algorithms."""

    strategy: str = ""
    name: str = ""
    description: str = ""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    @abstractmethod
    def draw(self, count: int = settings.DRAW_SIZE) -> list[int]:
        """Draw ``count`` distinct numbers.

        Returns:
            The drawn numbers, sorted ascending.

        Raises:
            DrawingError or InputValidationError when the algorithm's
            constraints cannot be satisfied.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} strategy={self.strategy}>"
