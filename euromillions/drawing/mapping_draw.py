"""Draw restricted by the number mapping table (latest distance and weight)."""

import random

from loguru import logger

from euromillions.config import settings
from euromillions.drawing.base import BaseDrawingAlgorithm
from euromillions.drawing.list_draw import ListDrawingAlgorithm
from euromillions.errors import InvalidNumberRangeError


class MappingTableAlgorithm(BaseDrawingAlgorithm):
    """Keeps the numbers whose latest distance and weight fall in the
    configured ranges, then draws uniformly among them.

    Ranges are half-open on the left: ``low < value <= high``.
    """

    strategy = "mapping-table-filtered"
    name = "Mapping table draw"
    description = "Random draw among numbers filtered on their latest distance and weight"

    def __init__(
        self,
        mapping_table: list[list[int]],
        rng: random.Random | None = None,
        distance_range: tuple[int, int] = (5, 100),
        weight_range: tuple[int, int] = (1, 4),
    ):
        super().__init__(rng)
        self.mapping_table = mapping_table
        self.distance_range = distance_range
        self.weight_range = weight_range

    def eligible_numbers(self) -> list[int]:
        if len(self.mapping_table) < 3:
            return []

        numbers, distances, weights = self.mapping_table[:3]
        d_low, d_high = self.distance_range
        w_low, w_high = self.weight_range
        return [
            number
            for number, distance, weight in zip(numbers, distances, weights)
            if number != 0
            and d_low < distance <= d_high
            and w_low < weight <= w_high
        ]

    def draw(self, count: int = settings.DRAW_SIZE) -> list[int]:
        eligible = self.eligible_numbers()
        if len(eligible) < count:
            raise InvalidNumberRangeError(
                description=f"Only {len(eligible)} numbers pass the mapping filter, {count} needed"
            )
        logger.debug("[{}] {} eligible numbers", self.strategy, len(eligible))
        return ListDrawingAlgorithm(eligible, self.rng).draw(count)
