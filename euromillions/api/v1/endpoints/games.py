"""Game generation and saved combinations endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from euromillions.api.deps import get_db, get_drawing_service, http_error
from euromillions.db.crud import combination as crud
from euromillions.drawing.strategy import DrawingStrategy
from euromillions.errors import EuroMillionsError
from euromillions.schemas.combination import Combination
from euromillions.schemas.games import (
    CombinationCount,
    DeleteResult,
    GenerateRequest,
    GenerateResponse,
    StrategyInfo,
)
from euromillions.services import generation_service as generation
from euromillions.services.drawing_service import DrawingService

router = APIRouter()


@router.post("/games/generate", response_model=GenerateResponse)
async def generate_games(
    body: GenerateRequest,
    db: AsyncSession = Depends(get_db),
    service: DrawingService = Depends(get_drawing_service),
):
    """Generate and save ``count`` combinations with the chosen strategy."""
    try:
        result, combinations = await generation.generate_async(
            db,
            service,
            body.count,
            body.strategy,
            preferred_numbers=body.preferred_numbers,
            filter_config=body.filters,
            weighted_stars=body.weighted_stars,
        )
    except EuroMillionsError as e:
        raise http_error(e)

    return GenerateResponse(
        combinations=combinations,
        attempts=result.attempts,
        requested=result.requested,
        is_partial=result.is_partial,
        state=result.state.value,
    )


@router.get("/games", response_model=list[Combination])
async def list_games(
    strategy: DrawingStrategy | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    if strategy:
        return await crud.query_by_strategy(db, strategy.value)
    return await crud.load_combinations(db)


@router.get("/games/range", response_model=list[Combination])
async def games_in_range(
    start: datetime = Query(...),
    end: datetime = Query(...),
    db: AsyncSession = Depends(get_db),
):
    return await crud.query_by_date_range(db, start, end)


@router.get("/games/count", response_model=CombinationCount)
async def games_count(db: AsyncSession = Depends(get_db)):
    return CombinationCount(count=await crud.count(db))


@router.delete("/games", response_model=DeleteResult)
async def delete_games(db: AsyncSession = Depends(get_db)):
    return DeleteResult(deleted=await crud.delete_all(db))


@router.get("/strategies", response_model=list[StrategyInfo])
async def list_strategies():
    return [
        StrategyInfo(
            id=s.value,
            label=s.label,
            description=s.description,
            requires_history=s.requires_history,
        )
        for s in DrawingStrategy
    ]
