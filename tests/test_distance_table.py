import pytest

from euromillions.analysis.distance_table import compute_distances
from euromillions.errors import (
    EmptyRowError,
    EmptyTableError,
    InvalidNumberRangeError,
    InvalidRowLengthError,
)


def _scan_order(table):
    """(row, col) of every cell in scan order: rows top-down, right to left."""
    width = len(table[0])
    return [(r, c) for r in range(len(table)) for c in reversed(range(width))]


def test_small_table():
    assert compute_distances([[1, 2], [2, 3], [3, 1]]) == [[3, 3], [0, 3], [0, 0]]


def test_numbers_never_seen_again_stay_zero():
    assert compute_distances([[1, 2, 3]]) == [[0, 0, 0]]


def test_shape_matches_source(draws):
    distances = compute_distances(draws)
    assert len(distances) == len(draws)
    assert all(len(row) == 5 for row in distances)


def test_distance_points_to_next_occurrence(draws):
    distances = compute_distances(draws)
    order = _scan_order(draws)
    values = [draws[r][c] for r, c in order]

    for index, (r, c) in enumerate(order):
        distance = distances[r][c]
        number = draws[r][c]
        later = values[index + 1:]
        if distance == 0:
            assert number not in later
        else:
            assert later.index(number) + 1 == distance


@pytest.mark.parametrize(
    "table, error",
    [
        ([], EmptyTableError),
        ([[]], EmptyRowError),
        ([[1, 2], [3]], InvalidRowLengthError),
        ([[0, 1]], InvalidNumberRangeError),
        ([[1, 51]], InvalidNumberRangeError),
    ],
)
def test_invalid_tables(table, error):
    with pytest.raises(error):
        compute_distances(table)
