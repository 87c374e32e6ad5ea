"""In-memory data store holding the draw history and its derived tables.

The store is built once from the parsed history and injected into the
services. Derived tables are recomputed only through ``rebuild()``.
"""

from datetime import date
from pathlib import Path

from loguru import logger

from euromillions.analysis.distance_table import compute_distances
from euromillions.analysis.distributions import mapping_table, reduced_draws
from euromillions.analysis.weight_table import compute_weights
from euromillions.config import settings
from euromillions.data.parser import ParsedHistory, load_history_file, parse_history
from euromillions.errors import InvalidDistanceError


class DataStore:
    def __init__(
        self,
        draws: list[list[int]] | None = None,
        stars: list[list[int]] | None = None,
        dates: list[date] | None = None,
        distance_window: int = settings.DISTANCE_WINDOW,
    ):
        if distance_window <= 0:
            raise InvalidDistanceError(distance_window)

        self.draws = [list(d) for d in draws or []]
        self.stars = [list(s) for s in stars or []]
        self.dates = list(dates or [])
        self.distance_window = distance_window

        self.sorted_draws: list[list[int]] = []
        self.reduced_draws: list[list[int]] = []
        self.sorted_stars: list[list[int]] = []
        self.distance_table: list[list[int]] = []
        self.weight_table: list[list[int]] = []
        self.mapping_table: list[list[int]] = []
        self.is_ready = False

        if self.draws:
            self.rebuild()

    @classmethod
    def from_history(cls, history: ParsedHistory, **kwargs) -> "DataStore":
        return cls(history.draws, history.stars, history.dates, **kwargs)

    @classmethod
    def from_text(cls, content: str, **kwargs) -> "DataStore":
        return cls.from_history(parse_history(content), **kwargs)

    @classmethod
    def from_file(cls, path: Path, **kwargs) -> "DataStore":
        return cls.from_history(load_history_file(path), **kwargs)

    @property
    def has_data(self) -> bool:
        return bool(self.draws)

    @property
    def flat_numbers(self) -> list[int]:
        return [n for draw in self.draws for n in draw]

    @property
    def flat_stars(self) -> list[int]:
        return [s for row in self.stars for s in row]

    @property
    def date_range(self) -> tuple[date, date] | None:
        if not self.dates:
            return None
        return min(self.dates), max(self.dates)

    def rebuild(self) -> None:
        """Recompute every derived table from ``draws`` and ``stars``."""
        self.is_ready = False
        if not self.draws:
            self.sorted_draws = []
            self.reduced_draws = []
            self.sorted_stars = []
            self.distance_table = []
            self.weight_table = []
            self.mapping_table = []
            logger.warning("Data store rebuilt without any draw")
            return

        self.sorted_draws = [sorted(d) for d in self.draws]
        self.reduced_draws = reduced_draws(self.draws, settings.MAX_NUMBER)
        self.sorted_stars = [sorted(s) for s in self.stars]
        self.distance_table = compute_distances(self.draws, settings.MAX_NUMBER)
        self.weight_table = compute_weights(
            self.draws, self.distance_window, settings.MAX_NUMBER
        )
        self.mapping_table = mapping_table(
            self.draws, self.distance_table, self.weight_table, settings.MAX_NUMBER
        )
        self.is_ready = True
        logger.info(
            "Data store ready: {} draws, {} reduced, window {}",
            len(self.draws), len(self.reduced_draws), self.distance_window,
        )

    def with_distance_window(self, distance_window: int) -> "DataStore":
        """New store over the same history with another weight window."""
        return DataStore(self.draws, self.stars, self.dates, distance_window)
