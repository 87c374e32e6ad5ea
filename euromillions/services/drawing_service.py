"""Drawing service — picks the algorithm for a strategy and draws once."""

import random

from loguru import logger

from euromillions.config import settings
from euromillions.data.store import DataStore
from euromillions.drawing import (
    BaseDrawingAlgorithm,
    DrawingStrategy,
    FullHistoryColumnAlgorithm,
    JokerWeightedHistoryAlgorithm,
    ListDrawingAlgorithm,
    MappingTableAlgorithm,
    PredecessorHistoryColumnAlgorithm,
    ReducedHistoryColumnAlgorithm,
    SpreadColumnAlgorithm,
)
from euromillions.drawing.list_draw import default_numbers
from euromillions.errors import (
    InsufficientCandidatesError,
    InvalidPreferredNumbersError,
    ServiceNotReadyError,
)


class DrawingService:
    def __init__(self, store: DataStore, rng: random.Random | None = None):
        self.store = store
        self.rng = rng or random.Random()
        self.simple = ListDrawingAlgorithm(default_numbers(), self.rng)
        self.algorithms: dict[DrawingStrategy, BaseDrawingAlgorithm] = {}
        self.rebuild()

    def rebuild(self) -> None:
        """Re-create the history algorithms from the current store tables."""
        self.algorithms = {}
        if not self.store.is_ready:
            return

        store = self.store
        self.algorithms = {
            DrawingStrategy.FULL_HISTORY_COLUMN: FullHistoryColumnAlgorithm(
                store.sorted_draws, self.rng
            ),
            DrawingStrategy.REDUCED_HISTORY_COLUMN: ReducedHistoryColumnAlgorithm(
                store.reduced_draws, self.rng
            ),
            DrawingStrategy.PREDECESSOR_HISTORY_COLUMN: PredecessorHistoryColumnAlgorithm(
                store.sorted_draws,
                self.rng,
                top_fraction=settings.PREDECESSOR_TOP_FRACTION,
                max_ratio=settings.PREDECESSOR_MAX_RATIO,
            ),
            DrawingStrategy.SPREAD_BASED_COLUMN: SpreadColumnAlgorithm(
                store.sorted_draws, self.rng
            ),
            DrawingStrategy.MAPPING_TABLE_FILTERED: MappingTableAlgorithm(
                store.mapping_table, self.rng
            ),
            DrawingStrategy.JOKER_WEIGHTED_HISTORY: JokerWeightedHistoryAlgorithm(
                store.flat_numbers, self.rng
            ),
        }
        logger.debug("Drawing algorithms rebuilt: {}", len(self.algorithms))

    def _history_algorithm(self, strategy: DrawingStrategy) -> BaseDrawingAlgorithm:
        """Algorithm for a history strategy; simple list when no history."""
        if not self.store.has_data:
            logger.warning("No draw history loaded, {} falls back to simple list", strategy.value)
            return self.simple
        if strategy not in self.algorithms:
            raise ServiceNotReadyError()
        return self.algorithms[strategy]

    @staticmethod
    def _preferred_list(preferred_numbers: list[int] | None) -> list[int]:
        if not preferred_numbers:
            raise InvalidPreferredNumbersError("Preferred numbers are required for a user list draw")
        invalid = [n for n in preferred_numbers if not 1 <= n <= settings.MAX_NUMBER]
        if invalid:
            raise InvalidPreferredNumbersError(
                f"Preferred numbers out of range 1-{settings.MAX_NUMBER}: {invalid}"
            )
        return preferred_numbers

    def generate_draw(
        self,
        strategy: DrawingStrategy | str,
        preferred_numbers: list[int] | None = None,
        count: int = settings.DRAW_SIZE,
    ) -> list[int]:
        strategy = DrawingStrategy(strategy)

        match strategy:
            case DrawingStrategy.SIMPLE_LIST:
                algorithm = self.simple
            case DrawingStrategy.USER_CONSTRAINED_LIST:
                algorithm = ListDrawingAlgorithm(self._preferred_list(preferred_numbers), self.rng)
            case (
                DrawingStrategy.FULL_HISTORY_COLUMN
                | DrawingStrategy.REDUCED_HISTORY_COLUMN
                | DrawingStrategy.PREDECESSOR_HISTORY_COLUMN
                | DrawingStrategy.SPREAD_BASED_COLUMN
                | DrawingStrategy.MAPPING_TABLE_FILTERED
                | DrawingStrategy.JOKER_WEIGHTED_HISTORY
            ):
                algorithm = self._history_algorithm(strategy)

        return algorithm.draw(count)

    def validate_request(
        self,
        strategy: DrawingStrategy | str,
        preferred_numbers: list[int] | None = None,
        count: int = settings.DRAW_SIZE,
    ) -> None:
        """Fail fast on requests that no number of attempts could satisfy."""
        if DrawingStrategy(strategy) is not DrawingStrategy.USER_CONSTRAINED_LIST:
            return
        candidates = set(self._preferred_list(preferred_numbers))
        if len(candidates) < count:
            raise InsufficientCandidatesError(len(candidates), count)
