"""Statistics service — tables and distributions served from the data store."""

from euromillions.analysis import distributions as dist
from euromillions.analysis.grid import GridType, analyze_grid
from euromillions.analysis.weight_table import compute_weights
from euromillions.config import settings
from euromillions.data.store import DataStore
from euromillions.errors import InvalidDistanceError
from euromillions.schemas.statistics import (
    ColumnDistributionResponse,
    DistributionResponse,
    GridAnalysisResponse,
    MaxDistanceResponse,
    MinMaxResponse,
    TableResponse,
    WeightTableResponse,
)

DISTRIBUTION_SOURCES = ("draws", "distances", "weights")


def get_distance_table(store: DataStore) -> TableResponse:
    return TableResponse(rows=len(store.distance_table), table=store.distance_table)


def get_weight_table(store: DataStore, window: int | None = None) -> WeightTableResponse:
    """Stored weight table, or one computed on the fly for another window."""
    if window is not None and window <= 0:
        raise InvalidDistanceError(window)
    if window is None or window == store.distance_window:
        table = store.weight_table
        window = store.distance_window
    elif store.has_data:
        table = compute_weights(store.draws, window, settings.MAX_NUMBER)
    else:
        table = []
    return WeightTableResponse(rows=len(table), table=table, window=window)


def get_column_distribution(store: DataStore) -> ColumnDistributionResponse:
    return ColumnDistributionResponse(
        draw_size=settings.DRAW_SIZE,
        max_number=settings.MAX_NUMBER,
        distribution=dist.column_distribution(
            store.sorted_draws, settings.DRAW_SIZE, settings.MAX_NUMBER
        ),
    )


def get_distribution(store: DataStore, source: str = "draws") -> DistributionResponse:
    tables = {
        "draws": store.draws,
        "distances": store.distance_table,
        "weights": store.weight_table,
    }
    if source not in tables:
        raise ValueError(f"Unknown source: {source}. Valid: {DISTRIBUTION_SOURCES}")
    distribution = dist.distribution_dict(tables[source])
    return DistributionResponse(source=source, distribution=dict(sorted(distribution.items())))


def get_grid_analysis(store: DataStore, grid_type: GridType) -> GridAnalysisResponse:
    rows, cols = analyze_grid(store.draws, grid_type)
    return GridAnalysisResponse(
        grid_type=grid_type.value,
        row_patterns={p.value: n for p, n in rows.items()},
        col_patterns={p.value: n for p, n in cols.items()},
    )


def get_min_max(store: DataStore) -> MinMaxResponse:
    minimums, maximums = dist.min_max_per_column(store.sorted_draws)
    return MinMaxResponse(minimums=minimums, maximums=maximums)


def get_max_distance(
    store: DataStore, percentage: int = settings.DISTANCE_PERCENTAGE
) -> MaxDistanceResponse:
    distribution = dist.max_distance_distribution(store.distance_table)
    return MaxDistanceResponse(
        percentage=percentage,
        distance=dist.distance_for_percentage(percentage, distribution),
        distribution=dict(sorted(distribution.items())),
    )


def get_reduced_draws(store: DataStore) -> TableResponse:
    return TableResponse(rows=len(store.reduced_draws), table=store.reduced_draws)
