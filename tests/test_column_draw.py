import pytest

from euromillions.drawing.column_draw import (
    FullHistoryColumnAlgorithm,
    PredecessorHistoryColumnAlgorithm,
    ReducedHistoryColumnAlgorithm,
    SpreadColumnAlgorithm,
    column_spread,
    preceding_values,
)
from euromillions.errors import InvalidNumberRangeError


def _assert_column_draw(drawn, table, prefixes=None):
    assert len(drawn) == 5
    assert all(a < b for a, b in zip(drawn, drawn[1:]))
    for col, value in enumerate(drawn):
        column = [row[col] for row in table]
        if prefixes:
            column = column[:prefixes[col]]
        assert value in column


def test_full_history_draw(store, rng):
    algorithm = FullHistoryColumnAlgorithm(store.sorted_draws, rng)
    for _ in range(50):
        _assert_column_draw(algorithm.draw(), store.sorted_draws)


def test_reduced_history_draw(store, rng):
    algorithm = ReducedHistoryColumnAlgorithm(store.reduced_draws, rng)
    assert algorithm.strategy == "reduced-history-column"
    for _ in range(50):
        _assert_column_draw(algorithm.draw(), store.reduced_draws)


@pytest.mark.parametrize("table", [[], [[1, 2]]])
def test_table_too_small(table, rng):
    with pytest.raises(InvalidNumberRangeError):
        FullHistoryColumnAlgorithm(table, rng).draw(5)


def test_no_value_above_previous(rng):
    # every column 1 value is below every column 0 value
    table = [[10, 2], [9, 3]]
    with pytest.raises(InvalidNumberRangeError):
        FullHistoryColumnAlgorithm(table, rng).draw(2)


@pytest.mark.parametrize(
    "column, spread",
    [
        ([3, 1, 3, 2, 1], 4),
        ([7, 7, 7], 1),
        ([1, 2, 3], 3),
        ([], 0),
    ],
)
def test_column_spread(column, spread):
    assert column_spread(column) == spread


def test_spread_draw_stays_in_prefix(store, rng):
    table = store.sorted_draws
    prefixes = [column_spread([row[c] for row in table]) for c in range(5)]
    algorithm = SpreadColumnAlgorithm(table, rng)
    for _ in range(50):
        _assert_column_draw(algorithm.draw(), table, prefixes)


def test_preceding_values():
    assert preceding_values([5, 3, 5, 4, 5]) == [3, 4]
    assert preceding_values([5, 3, 4]) == []
    assert preceding_values([]) == []


def test_predecessor_draw(rng):
    table = [[5, 20], [3, 30], [5, 20], [4, 40], [5, 20], [2, 10]]
    algorithm = PredecessorHistoryColumnAlgorithm(table, rng)
    results = {tuple(algorithm.draw(2)) for _ in range(40)}
    # both 3 and 4 tie on score, only the first survives the 70% cut
    assert results <= {(3, 30), (3, 40)}
    assert results == {(3, 30), (3, 40)}


def test_predecessor_threshold_excludes_everything(rng):
    # predecessor 35 is above 80% of the next column maximum
    table = [[5, 40], [35, 36], [5, 40]]
    with pytest.raises(InvalidNumberRangeError):
        PredecessorHistoryColumnAlgorithm(table, rng).draw(2)


def test_predecessor_fraction_is_configurable(rng):
    table = [[5, 20], [3, 30], [5, 20], [4, 40], [5, 20], [2, 10]]
    algorithm = PredecessorHistoryColumnAlgorithm(table, rng, top_fraction=1.0)
    firsts = {algorithm.draw(2)[0] for _ in range(60)}
    assert firsts == {3, 4}
