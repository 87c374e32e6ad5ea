"""Closed set of drawing strategies."""

from enum import Enum


class DrawingStrategy(str, Enum):
    SIMPLE_LIST = "simple-list"
    USER_CONSTRAINED_LIST = "user-constrained-list"
    FULL_HISTORY_COLUMN = "full-history-column"
    REDUCED_HISTORY_COLUMN = "reduced-history-column"
    PREDECESSOR_HISTORY_COLUMN = "predecessor-history-column"
    SPREAD_BASED_COLUMN = "spread-based-column"
    MAPPING_TABLE_FILTERED = "mapping-table-filtered"
    JOKER_WEIGHTED_HISTORY = "joker-weighted-history"

    @property
    def label(self) -> str:
        return _LABELS[self][0]

    @property
    def description(self) -> str:
        return _LABELS[self][1]

    @property
    def requires_history(self) -> bool:
        return self not in (DrawingStrategy.SIMPLE_LIST, DrawingStrategy.USER_CONSTRAINED_LIST)


_LABELS = {
    DrawingStrategy.SIMPLE_LIST: (
        "Simple list",
        "Uniform draw of 5 numbers among 1-50",
    ),
    DrawingStrategy.USER_CONSTRAINED_LIST: (
        "User list",
        "Uniform draw of 5 numbers among the numbers picked by the user",
    ),
    DrawingStrategy.FULL_HISTORY_COLUMN: (
        "Full history",
        "One number per column of the whole sorted history",
    ),
    DrawingStrategy.REDUCED_HISTORY_COLUMN: (
        "Reduced history",
        "One number per column of the recent draws covering every number",
    ),
    DrawingStrategy.PREDECESSOR_HISTORY_COLUMN: (
        "Predecessor history",
        "Numbers that historically came right before the latest draw",
    ),
    DrawingStrategy.SPREAD_BASED_COLUMN: (
        "Column spread",
        "One number per column among the recent values of that column",
    ),
    DrawingStrategy.MAPPING_TABLE_FILTERED: (
        "Mapping table",
        "Numbers whose latest distance and weight are in range",
    ),
    DrawingStrategy.JOKER_WEIGHTED_HISTORY: (
        "Weighted history",
        "Numbers weighted by their frequency in the history",
    ),
}
