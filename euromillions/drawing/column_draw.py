"""Column-based drawing algorithms.

Each algorithm draws one number per column (position) of a sorted
historical table, every pick strictly greater than the previous one, so
the result is ascending by construction. Frequent values of a column are
proportionally more likely to be picked.
"""

import random

import numpy as np
from loguru import logger

from euromillions.config import settings
from euromillions.drawing.base import BaseDrawingAlgorithm
from euromillions.errors import InvalidNumberRangeError


class FullHistoryColumnAlgorithm(BaseDrawingAlgorithm):
    """Full-history column draw; base for the other column variants."""

    strategy = "full-history-column"
    name = "Column draw on full history"
    description = "Random draw of one number per column of the sorted draw table"

    def __init__(self, table: list[list[int]], rng: random.Random | None = None):
        super().__init__(rng)
        self.table = table

    def _check_table(self, count: int) -> None:
        if not self.table or len(self.table[0]) < count:
            raise InvalidNumberRangeError(
                description=f"Draw table cannot provide {count} columns"
            )

    def column(self, index: int) -> list[int]:
        return [row[index] for row in self.table]

    def candidates(self, index: int, previous: int | None) -> list[int]:
        """Values of column ``index`` that may follow ``previous``."""
        values = self.column(index)
        if previous is None:
            return values
        return [v for v in values if v > previous]

    def draw(self, count: int = settings.DRAW_SIZE) -> list[int]:
        self._check_table(count)
        drawn: list[int] = []
        previous = None

        for index in range(count):
            candidates = self.candidates(index, previous)
            if not candidates:
                raise InvalidNumberRangeError(
                    description=f"No number above {previous} in column {index}"
                )
            previous = self.rng.choice(candidates)
            drawn.append(previous)

        logger.debug("[{}] drew {}", self.strategy, drawn)
        return drawn


class ReducedHistoryColumnAlgorithm(FullHistoryColumnAlgorithm):
    """Same draw, fed with the reduced table (every number seen once)."""

    strategy = "reduced-history-column"
    name = "Column draw on reduced history"
    description = (
        "Random draw of one number per column of the reduced draw table, "
        "truncated once every number has been drawn"
    )


def column_spread(column: list[int]) -> int:
    """Shortest prefix length holding every distinct value of ``column``."""
    remaining = set(column)
    for index, value in enumerate(column):
        remaining.discard(value)
        if not remaining:
            return index + 1
    return len(column)


class SpreadColumnAlgorithm(FullHistoryColumnAlgorithm):
    """Column draw limited, per column, to its spread prefix."""

    strategy = "spread-based-column"
    name = "Column draw on column spread"
    description = (
        "Random draw of one number per column, restricted to the recent draws "
        "needed to see every value of that column"
    )

    def candidates(self, index: int, previous: int | None) -> list[int]:
        values = self.column(index)
        prefix = values[:column_spread(values)]
        if previous is None:
            return prefix
        return [v for v in prefix if v > previous]


def preceding_values(column: list[int]) -> list[int]:
    """Values found right before each later occurrence of ``column[0]``."""
    if not column:
        return []
    reference = column[0]
    return [column[i - 1] for i in range(1, len(column)) if column[i] == reference]


class PredecessorHistoryColumnAlgorithm(FullHistoryColumnAlgorithm):
    """Column draw from the history of the values preceding the latest one.

    For every column but the last, candidates are kept only if they stay
    under ``min(median, max * max_ratio)`` of the next column; they are
    scored by how many next-column values remain above them and the best
    ``top_fraction`` share is sampled. Both thresholds are empirical.
    """

    strategy = "predecessor-history-column"
    name = "Column draw on predecessor history"
    description = (
        "Random draw from the numbers historically drawn before the latest "
        "number of each column"
    )

    def __init__(
        self,
        table: list[list[int]],
        rng: random.Random | None = None,
        top_fraction: float = settings.PREDECESSOR_TOP_FRACTION,
        max_ratio: float = settings.PREDECESSOR_MAX_RATIO,
    ):
        super().__init__(table, rng)
        self.top_fraction = top_fraction
        self.max_ratio = max_ratio

    def candidates(self, index: int, previous: int | None) -> list[int]:
        history = preceding_values(self.column(index))
        if previous is not None:
            history = [v for v in history if v > previous]
        return history

    def draw(self, count: int = settings.DRAW_SIZE) -> list[int]:
        self._check_table(count)
        drawn: list[int] = []
        previous = None

        for index in range(count):
            available = self.candidates(index, previous)
            if index < count - 1:
                available = self._best_candidates(available, self.column(index + 1))
            if not available:
                raise InvalidNumberRangeError(
                    description=f"No predecessor candidate above {previous} in column {index}"
                )
            previous = self.rng.choice(available)
            drawn.append(previous)

        logger.debug("[{}] drew {}", self.strategy, drawn)
        return drawn

    def _best_candidates(self, available: list[int], next_column: list[int]) -> list[int]:
        next_sorted = np.sort(np.asarray(next_column, dtype=np.int64))
        median = int(next_sorted[len(next_sorted) // 2])
        upper = min(median, int(int(next_sorted[-1]) * self.max_ratio))

        kept = [v for v in available if v < upper]
        if not kept:
            return []

        # score = next-column values strictly above the candidate
        scores = len(next_sorted) - np.searchsorted(next_sorted, kept, side="right")
        ranked = sorted(zip(kept, scores.tolist()), key=lambda x: x[1], reverse=True)
        keep = max(1, int(len(ranked) * self.top_fraction))
        return [number for number, _ in ranked[:keep]]
