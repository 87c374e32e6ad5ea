"""Pydantic schemas for statistics endpoints."""

from pydantic import BaseModel


class TableResponse(BaseModel):
    rows: int
    table: list[list[int]]


class WeightTableResponse(TableResponse):
    window: int


class ColumnDistributionResponse(BaseModel):
    draw_size: int
    max_number: int
    distribution: list[list[int]]


class DistributionResponse(BaseModel):
    source: str
    distribution: dict[int, int]


class GridAnalysisResponse(BaseModel):
    grid_type: str
    row_patterns: dict[str, int]
    col_patterns: dict[str, int]


class MinMaxResponse(BaseModel):
    minimums: list[int]
    maximums: list[int]


class MaxDistanceResponse(BaseModel):
    percentage: int
    distance: int
    distribution: dict[int, int]
