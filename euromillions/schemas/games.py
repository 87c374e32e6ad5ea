"""Pydantic schemas for game generation requests and responses."""

from pydantic import BaseModel, Field

from euromillions.drawing.strategy import DrawingStrategy
from euromillions.filters.draw_filters import FilterConfig
from euromillions.schemas.combination import Combination


class GenerateRequest(BaseModel):
    count: int = Field(5, ge=1, le=100)
    strategy: DrawingStrategy = DrawingStrategy.SIMPLE_LIST
    preferred_numbers: list[int] | None = None
    filters: FilterConfig | None = None
    weighted_stars: bool = False


class GenerateResponse(BaseModel):
    combinations: list[Combination]
    attempts: int
    requested: int
    is_partial: bool
    state: str


class StrategyInfo(BaseModel):
    id: str
    label: str
    description: str
    requires_history: bool


class CombinationCount(BaseModel):
    count: int


class DeleteResult(BaseModel):
    deleted: int
