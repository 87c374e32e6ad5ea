"""Weight table: how often each drawn number comes back within a window."""

from collections import Counter

from euromillions.analysis.distance_table import validate_table
from euromillions.config import settings
from euromillions.errors import InvalidDistanceError


def compute_weights(
    table: list[list[int]],
    distance_window: int,
    max_number: int = settings.MAX_NUMBER,
) -> list[list[int]]:
    """Count, for every cell, the occurrences of its number in the next
    ``distance_window`` slots after the end of its row.

    The table is read as one sequence of slots (``row * width + col``).
    The window is clamped to the end of the table.

    Args:
        table: Draw table, most recent first.
        distance_window: Look-ahead length in slots (not draws).
        max_number: Highest valid number.

    Returns:
        Table of the same shape holding the counts.
    """
    width = validate_table(table, max_number)
    if distance_window <= 0:
        raise InvalidDistanceError(distance_window)

    slots = [number for row in table for number in row]
    last_slot = len(slots) - 1

    # Sliding window [low, high] over slots, advanced one row at a time
    window = Counter()
    low, high = 0, -1
    weights = []

    for row_index, row in enumerate(table):
        row_end = row_index * width + width - 1
        window_end = min(row_end + distance_window, last_slot)

        while high < window_end:
            high += 1
            window[slots[high]] += 1
        while low <= row_end:
            window[slots[low]] -= 1
            low += 1

        weights.append([window[number] for number in row])

    return weights
