"""Drawing algorithms package."""

from euromillions.drawing.base import BaseDrawingAlgorithm
from euromillions.drawing.column_draw import (
    FullHistoryColumnAlgorithm,
    PredecessorHistoryColumnAlgorithm,
    ReducedHistoryColumnAlgorithm,
    SpreadColumnAlgorithm,
    column_spread,
)
from euromillions.drawing.joker_draw import JokerWeightedHistoryAlgorithm
from euromillions.drawing.list_draw import ListDrawingAlgorithm
from euromillions.drawing.mapping_draw import MappingTableAlgorithm
from euromillions.drawing.strategy import DrawingStrategy

__all__ = [
    "BaseDrawingAlgorithm",
    "DrawingStrategy",
    "FullHistoryColumnAlgorithm",
    "JokerWeightedHistoryAlgorithm",
    "ListDrawingAlgorithm",
    "MappingTableAlgorithm",
    "PredecessorHistoryColumnAlgorithm",
    "ReducedHistoryColumnAlgorithm",
    "SpreadColumnAlgorithm",
    "column_spread",
]
