"""Statistics API endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query

from euromillions.analysis.grid import GridType
from euromillions.api.deps import get_store, http_error
from euromillions.config import settings
from euromillions.data.store import DataStore
from euromillions.errors import EuroMillionsError
from euromillions.schemas.statistics import (
    ColumnDistributionResponse,
    DistributionResponse,
    GridAnalysisResponse,
    MaxDistanceResponse,
    MinMaxResponse,
    TableResponse,
    WeightTableResponse,
)
from euromillions.services import statistics_service as stats

router = APIRouter()


@router.get("/distance-table", response_model=TableResponse)
async def distance_table(store: DataStore = Depends(get_store)):
    """Slots until each drawn number is drawn again."""
    return stats.get_distance_table(store)


@router.get("/weight-table", response_model=WeightTableResponse)
async def weight_table(
    window: int | None = Query(None, description="Slots looked ahead of each row"),
    store: DataStore = Depends(get_store),
):
    try:
        return stats.get_weight_table(store, window)
    except EuroMillionsError as e:
        raise http_error(e)


@router.get("/column-distribution", response_model=ColumnDistributionResponse)
async def column_distribution(store: DataStore = Depends(get_store)):
    return stats.get_column_distribution(store)


@router.get("/distribution", response_model=DistributionResponse)
async def distribution(
    source: Literal["draws", "distances", "weights"] = Query("draws"),
    store: DataStore = Depends(get_store),
):
    """Value counts over every cell of the chosen table."""
    try:
        return stats.get_distribution(store, source)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/grid/{grid_type}", response_model=GridAnalysisResponse)
async def grid(grid_type: GridType, store: DataStore = Depends(get_store)):
    """Row and column pattern counts on a 10x5 or 5x10 grid."""
    return stats.get_grid_analysis(store, grid_type)


@router.get("/min-max", response_model=MinMaxResponse)
async def min_max(store: DataStore = Depends(get_store)):
    return stats.get_min_max(store)


@router.get("/max-distance", response_model=MaxDistanceResponse)
async def max_distance(
    percentage: int = Query(settings.DISTANCE_PERCENTAGE, ge=0, le=100),
    store: DataStore = Depends(get_store),
):
    """Distance reached by ``percentage`` % of the row maxima."""
    return stats.get_max_distance(store, percentage)


@router.get("/reduced-draws", response_model=TableResponse)
async def reduced_draws(store: DataStore = Depends(get_store)):
    return stats.get_reduced_draws(store)
