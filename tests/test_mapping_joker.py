import random

import pytest

from euromillions.drawing.joker_draw import JokerWeightedHistoryAlgorithm
from euromillions.drawing.mapping_draw import MappingTableAlgorithm
from euromillions.errors import InvalidNumberRangeError

MAPPING = [
    [1, 2, 3, 4, 5, 6, 7],
    [6, 5, 100, 101, 50, 50, 10],
    [2, 2, 4, 2, 1, 3, 5],
]


def test_mapping_filter_bounds(rng):
    algorithm = MappingTableAlgorithm(MAPPING, rng)
    assert algorithm.eligible_numbers() == [1, 3, 6]
    assert algorithm.draw(3) == [1, 3, 6]


def test_mapping_not_enough_numbers(rng):
    with pytest.raises(InvalidNumberRangeError):
        MappingTableAlgorithm(MAPPING, rng).draw(5)


def test_mapping_requires_three_rows(rng):
    with pytest.raises(InvalidNumberRangeError):
        MappingTableAlgorithm(MAPPING[:2], rng).draw(1)


def test_mapping_on_store(store, rng):
    algorithm = MappingTableAlgorithm(store.mapping_table, rng)
    eligible = set(algorithm.eligible_numbers())
    drawn = algorithm.draw()
    assert len(drawn) == 5
    assert set(drawn) <= eligible


def test_joker_single_value_history(rng):
    algorithm = JokerWeightedHistoryAlgorithm([7, 7, 7, 7], rng)
    assert {algorithm.draw_one() for _ in range(20)} == {7}


def test_joker_empty_history_uses_default_range(rng):
    algorithm = JokerWeightedHistoryAlgorithm([], rng, default_range=(1, 10))
    assert all(1 <= algorithm.draw_one() <= 10 for _ in range(50))


def test_joker_follows_frequencies():
    algorithm = JokerWeightedHistoryAlgorithm([1] * 90 + [2] * 10, random.Random(3))
    ones = sum(1 for _ in range(1000) if algorithm.draw_one() == 1)
    assert ones > 800


def test_joker_draw_without_replacement(rng):
    algorithm = JokerWeightedHistoryAlgorithm([1, 1, 1, 2], rng)
    assert algorithm.draw(2) == [1, 2]


@pytest.mark.parametrize("history, count", [([1, 2], 3), ([], 1)])
def test_joker_draw_not_enough_values(rng, history, count):
    with pytest.raises(InvalidNumberRangeError):
        JokerWeightedHistoryAlgorithm(history, rng).draw(count)


def test_joker_numbers_from_history(store, rng):
    algorithm = JokerWeightedHistoryAlgorithm(store.flat_numbers, rng)
    drawn = algorithm.draw(5)
    assert drawn == sorted(set(drawn))
    assert len(drawn) == 5
