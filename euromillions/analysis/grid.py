"""Grid overlays (10x5 and 5x10) and the distribution patterns of a draw."""

from enum import Enum


class Pattern(str, Enum):
    """How 5 numbers spread across the lines of a grid."""

    FIVE = "5"
    FOUR_ONE = "4-1"
    THREE_TWO = "3-2"
    THREE_ONE_ONE = "3-1-1"
    TWO_TWO_ONE = "2-2-1"
    TWO_ONE_ONE_ONE = "2-1-1-1"
    ONE_ONE_ONE_ONE_ONE = "1-1-1-1-1"
    INVALID = "invalid"


_PATTERN_SHAPES = {
    (5,): Pattern.FIVE,
    (4, 1): Pattern.FOUR_ONE,
    (3, 2): Pattern.THREE_TWO,
    (3, 1, 1): Pattern.THREE_ONE_ONE,
    (2, 2, 1): Pattern.TWO_TWO_ONE,
    (2, 1, 1, 1): Pattern.TWO_ONE_ONE_ONE,
    (1, 1, 1, 1, 1): Pattern.ONE_ONE_ONE_ONE_ONE,
}


class GridType(str, Enum):
    GRID_10X5 = "10x5"
    GRID_5X10 = "5x10"

    @property
    def rows(self) -> int:
        return 10 if self is GridType.GRID_10X5 else 5

    @property
    def cols(self) -> int:
        return 5 if self is GridType.GRID_10X5 else 10

    def position_for(self, number: int) -> tuple[int, int]:
        """(row, col) of a ball number (1-50) on this grid."""
        return (number - 1) % self.rows, (number - 1) // self.rows


def identify_pattern(counts: list[int]) -> Pattern:
    """Match per-line counts against the known shapes.

    Zero counts are ignored; anything that matches no shape is INVALID.
    """
    shape = tuple(sorted((c for c in counts if c > 0), reverse=True))
    return _PATTERN_SHAPES.get(shape, Pattern.INVALID)


def grid_counts(numbers: list[int], grid_type: GridType) -> tuple[list[int], list[int]]:
    """Count numbers per row and per column of the grid."""
    row_counts = [0] * grid_type.rows
    col_counts = [0] * grid_type.cols
    for number in numbers:
        row, col = grid_type.position_for(number)
        row_counts[row] += 1
        col_counts[col] += 1
    return row_counts, col_counts


def classify(numbers: list[int], grid_type: GridType) -> tuple[Pattern, Pattern]:
    row_counts, col_counts = grid_counts(numbers, grid_type)
    return identify_pattern(row_counts), identify_pattern(col_counts)


def analyze_grid(
    draws: list[list[int]], grid_type: GridType
) -> tuple[dict[Pattern, int], dict[Pattern, int]]:
    """Pattern counts for rows and columns over a set of draws."""
    row_patterns = {pattern: 0 for pattern in Pattern}
    col_patterns = {pattern: 0 for pattern in Pattern}

    for draw in draws:
        row_pattern, col_pattern = classify(draw, grid_type)
        row_patterns[row_pattern] += 1
        col_patterns[col_pattern] += 1

    return row_patterns, col_patterns
