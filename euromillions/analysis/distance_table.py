"""Distance table: slots until each drawn number is drawn again.

The draw table is ordered most recent first. The scan walks rows top to
bottom and each row right to left, giving every visited cell a linear
index (1, 2, 3, ...). When a number is met again, the gap between the two
indices is written on its *previous* cell. Cells whose number never
reappears keep 0.
"""

from euromillions.config import settings
from euromillions.errors import (
    EmptyRowError,
    EmptyTableError,
    InvalidNumberRangeError,
    InvalidRowLengthError,
)


def validate_table(table: list[list[int]], max_number: int) -> int:
    """Check shape and value range of a draw table.

    Returns:
        The row width.
    """
    if not table:
        raise EmptyTableError()
    if not table[0]:
        raise EmptyRowError()

    width = len(table[0])
    for row_index, row in enumerate(table):
        if len(row) != width:
            raise InvalidRowLengthError(row_index, width, len(row))
        for number in row:
            if not 1 <= number <= max_number:
                raise InvalidNumberRangeError(number)
    return width


def compute_distances(
    table: list[list[int]], max_number: int = settings.MAX_NUMBER
) -> list[list[int]]:
    """Build the distance table for ``table``.

    The scan is stateful (last visit per number), so it must stay
    sequential.
    """
    width = validate_table(table, max_number)
    distances = [[0] * width for _ in table]

    # number -> (row, col, index) of its latest visit
    last_seen: dict[int, tuple[int, int, int]] = {}
    index = 1

    for row_index, row in enumerate(table):
        for col_index in reversed(range(width)):
            number = row[col_index]
            previous = last_seen.get(number)
            if previous is not None:
                prev_row, prev_col, prev_index = previous
                distances[prev_row][prev_col] = index - prev_index
            last_seen[number] = (row_index, col_index, index)
            index += 1

    return distances
