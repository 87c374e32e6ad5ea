"""Validity filters applied to every generated draw.

Each predicate returns True when the draw passes. ``check_combination``
chains them in a fixed order; the session duplicate test always runs.
"""

import math
from collections.abc import Callable, Iterable

from pydantic import BaseModel

from euromillions.analysis.distributions import match_profile
from euromillions.analysis.grid import GridType, Pattern, classify

DrawFilter = Callable[[list[int]], bool]

# Max share of history rows allowed to share 0..5 numbers with a new draw
HISTORY_MATCH_PROFILE = [0.58, 0.37, 0.08, 0.01, 0.0, 0.0]

GRID_10X5_ROWS = {Pattern.ONE_ONE_ONE_ONE_ONE, Pattern.TWO_ONE_ONE_ONE}
GRID_10X5_COLS = {Pattern.TWO_ONE_ONE_ONE, Pattern.TWO_TWO_ONE, Pattern.THREE_ONE_ONE}
GRID_5X10_ROWS = GRID_10X5_COLS
GRID_5X10_COLS = GRID_10X5_ROWS


class FilterConfig(BaseModel):
    no_duplicate: bool = True
    odd_even: bool = True
    grid_10x5: bool = True
    grid_5x10: bool = True
    no_long_runs: bool = True


def is_not_in_session(numbers: list[int], accepted: Iterable[list[int]]) -> bool:
    candidate = sorted(numbers)
    return all(sorted(draw) != candidate for draw in accepted)


def matches_history_profile(numbers: list[int], history: list[list[int]]) -> bool:
    """Reject draws that overlap past draws more often than usual."""
    if not history:
        return True
    thresholds = [math.floor(share * len(history)) for share in HISTORY_MATCH_PROFILE]
    observed = match_profile(numbers, history, max_matches=len(thresholds) - 1)
    return all(count <= limit for count, limit in zip(observed, thresholds))


def has_odd_even_balance(numbers: list[int]) -> bool:
    evens = sum(1 for n in numbers if n % 2 == 0)
    return 1 <= evens <= 4


def is_grid_10x5_spread(numbers: list[int]) -> bool:
    rows, cols = classify(numbers, GridType.GRID_10X5)
    return rows in GRID_10X5_ROWS and cols in GRID_10X5_COLS


def is_grid_5x10_spread(numbers: list[int]) -> bool:
    rows, cols = classify(numbers, GridType.GRID_5X10)
    return rows in GRID_5X10_ROWS and cols in GRID_5X10_COLS


def has_no_long_runs(numbers: list[int], max_run: int = 2) -> bool:
    """False when more than ``max_run`` consecutive integers appear."""
    ordered = sorted(numbers)
    run = 1
    for previous, current in zip(ordered, ordered[1:]):
        run = run + 1 if current == previous + 1 else 1
        if run > max_run:
            return False
    return True


def check_combination(
    numbers: list[int],
    accepted: Iterable[list[int]],
    history: list[list[int]],
    config: FilterConfig | None = None,
    extra_filters: Iterable[DrawFilter] = (),
) -> bool:
    config = config or FilterConfig()

    if not is_not_in_session(numbers, accepted):
        return False
    if config.no_duplicate and not matches_history_profile(numbers, history):
        return False
    if config.odd_even and not has_odd_even_balance(numbers):
        return False
    if config.grid_10x5 and not is_grid_10x5_spread(numbers):
        return False
    if config.grid_5x10 and not is_grid_5x10_spread(numbers):
        return False
    if config.no_long_runs and not has_no_long_runs(numbers):
        return False
    return all(check(numbers) for check in extra_filters)
