"""Distribution builders over draw, distance and weight tables."""

from collections import Counter

import numpy as np

from euromillions.analysis.distance_table import validate_table
from euromillions.config import settings


def column_distribution(
    table: list[list[int]],
    draw_size: int = settings.DRAW_SIZE,
    max_number: int = settings.MAX_NUMBER,
) -> list[list[int]]:
    """Count each value per column position.

    Returns shape: (draw_size, max_number + 1), ``d[col][value]``.
    """
    if not table:
        return [[0] * (max_number + 1) for _ in range(draw_size)]

    validate_table(table, max_number)
    arr = np.asarray(table, dtype=np.int64)
    distribution = []
    for col in range(draw_size):
        if col < arr.shape[1]:
            counts = np.bincount(arr[:, col], minlength=max_number + 1)
        else:
            counts = np.zeros(max_number + 1, dtype=np.int64)
        distribution.append([int(c) for c in counts])
    return distribution


def distribution_1d(values: list[int], max_value: int = 5) -> list[int]:
    """Index = value, element = occurrences. Out-of-range values are ignored.

    Example: [1, 2, 2, 3, 3, 3] -> [0, 1, 2, 3, 0, 0]
    """
    distribution = [0] * (max_value + 1)
    for value in values:
        if 0 <= value <= max_value:
            distribution[value] += 1
    return distribution


def distribution_dict(table: list[list[int]]) -> dict[int, int]:
    """value -> count across every cell of the table."""
    counter = Counter()
    for row in table:
        counter.update(row)
    return dict(counter)


def distribution_array(table: list[list[int]]) -> list[list[int]]:
    """Two-row form: ``[[0, 1, ..., max], [count_0, count_1, ...]]``."""
    cells = [value for row in table for value in row]
    if not cells:
        return [[0], [0]]
    counts = np.bincount(np.asarray(cells, dtype=np.int64))
    return [list(range(len(counts))), [int(c) for c in counts]]


def min_max_per_column(table: list[list[int]]) -> list[list[int]]:
    """``[[mins], [maxes]]`` for every column of the table."""
    if not table or not table[0]:
        return [[], []]
    arr = np.asarray(table, dtype=np.int64)
    return [arr.min(axis=0).tolist(), arr.max(axis=0).tolist()]


def reduced_draws(
    draws: list[list[int]], max_number: int = settings.MAX_NUMBER
) -> list[list[int]]:
    """Shortest prefix of ``draws`` in which every number 1..max_number has
    appeared, with each row sorted.

    The whole table is returned when coverage is never reached.
    """
    seen: set[int] = set()
    prefix_length = len(draws)
    for row_index, draw in enumerate(draws):
        seen.update(draw)
        if len(seen.intersection(range(1, max_number + 1))) == max_number:
            prefix_length = row_index + 1
            break
    return [sorted(draw) for draw in draws[:prefix_length]]


# ── distance analysis ────────────────────────────────────────────────

def max_distance_distribution(distance_table: list[list[int]]) -> dict[int, int]:
    """Distribution of the largest distance of each row (empty rows skipped)."""
    return dict(Counter(max(row) for row in distance_table if row))


def distance_for_percentage(percentage: int, distribution: dict[int, int]) -> int:
    """Smallest distance whose cumulative share reaches ``percentage`` %."""
    total = sum(distribution.values())
    if total == 0:
        return 0

    cumulative = 0
    for distance, count in sorted(distribution.items()):
        cumulative += count
        if cumulative / total * 100 >= percentage:
            return distance
    return max(distribution)


# ── comparison with history ──────────────────────────────────────────

def compare_to_table(numbers: list[int], table: list[list[int]]) -> list[int]:
    """Number of shared values between ``numbers`` and each row."""
    reference = set(numbers)
    return [len(reference.intersection(row)) for row in table]


def match_profile(
    numbers: list[int], table: list[list[int]], max_matches: int = settings.DRAW_SIZE
) -> list[int]:
    """How many rows share 0, 1, ..., ``max_matches`` values with ``numbers``."""
    return distribution_1d(compare_to_table(numbers, table), max_value=max_matches)


def mapping_table(
    draws: list[list[int]],
    distance_table: list[list[int]],
    weight_table: list[list[int]],
    max_number: int = settings.MAX_NUMBER,
) -> list[list[int]]:
    """Latest distance and weight of every number.

    Rows: ``[numbers 1..max_number], [distance], [weight]``. Values come from
    the most recent occurrence of the number (scan order of the distance
    table); numbers never drawn get 0 and 0.
    """
    latest: dict[int, tuple[int, int]] = {}
    for row_index, draw in enumerate(draws):
        for col_index in reversed(range(len(draw))):
            number = draw[col_index]
            if number not in latest:
                latest[number] = (
                    distance_table[row_index][col_index],
                    weight_table[row_index][col_index],
                )
        if len(latest) >= max_number:
            break

    numbers = list(range(1, max_number + 1))
    return [
        numbers,
        [latest.get(n, (0, 0))[0] for n in numbers],
        [latest.get(n, (0, 0))[1] for n in numbers],
    ]
