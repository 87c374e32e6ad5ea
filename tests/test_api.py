import random

import pytest
from fastapi.testclient import TestClient

from euromillions.data.store import DataStore
from euromillions.main import app
from euromillions.services.drawing_service import DrawingService


def _use_store(store):
    app.state.store = store
    app.state.drawing_service = DrawingService(store, random.Random(7))


@pytest.fixture
def client(store):
    with TestClient(app) as client:
        _use_store(store)
        client.delete("/api/v1/games")
        yield client


def test_strategies(client):
    response = client.get("/api/v1/strategies")
    assert response.status_code == 200
    ids = [s["id"] for s in response.json()]
    assert len(ids) == 8
    assert "predecessor-history-column" in ids


def test_tables(client, store):
    distance = client.get("/api/v1/stats/distance-table").json()
    assert distance["rows"] == len(store.draws)
    assert distance["table"] == store.distance_table

    reduced = client.get("/api/v1/stats/reduced-draws").json()
    assert reduced["table"] == store.reduced_draws


def test_weight_table_window(client, store):
    default = client.get("/api/v1/stats/weight-table").json()
    assert default["window"] == 146
    assert default["table"] == store.weight_table

    narrow = client.get("/api/v1/stats/weight-table", params={"window": 10}).json()
    assert narrow["window"] == 10
    assert narrow["rows"] == len(store.draws)

    assert client.get("/api/v1/stats/weight-table", params={"window": 0}).status_code == 400


@pytest.mark.parametrize("window", [0, -1])
def test_weight_table_window_checked_without_data(client, window):
    _use_store(DataStore())
    response = client.get("/api/v1/stats/weight-table", params={"window": window})
    assert response.status_code == 400

    empty = client.get("/api/v1/stats/weight-table", params={"window": 5}).json()
    assert empty["rows"] == 0
    assert empty["table"] == []


def test_distributions(client):
    columns = client.get("/api/v1/stats/column-distribution").json()
    assert len(columns["distribution"]) == 5

    weights = client.get("/api/v1/stats/distribution", params={"source": "weights"})
    assert weights.status_code == 200
    assert weights.json()["source"] == "weights"

    bad = client.get("/api/v1/stats/distribution", params={"source": "stars"})
    assert bad.status_code == 422


def test_grid_min_max_and_max_distance(client, store):
    grid = client.get("/api/v1/stats/grid/5x10").json()
    assert grid["grid_type"] == "5x10"
    assert sum(grid["row_patterns"].values()) == len(store.draws)
    assert "2-1-1-1" in grid["col_patterns"]

    min_max = client.get("/api/v1/stats/min-max").json()
    assert len(min_max["minimums"]) == 5
    assert min_max["minimums"][0] >= 1

    max_distance = client.get("/api/v1/stats/max-distance", params={"percentage": 50}).json()
    assert max_distance["percentage"] == 50
    assert max_distance["distance"] > 0


def test_generate_and_list_games(client):
    response = client.post(
        "/api/v1/games/generate", json={"count": 2, "strategy": "simple-list"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["requested"] == 2
    assert not body["is_partial"]
    assert body["state"] == "completed"
    assert [c["order_index"] for c in body["combinations"]] == [0, 1]
    assert all(len(c["star_numbers"]) == 2 for c in body["combinations"])

    assert client.get("/api/v1/games/count").json() == {"count": 2}
    assert len(client.get("/api/v1/games").json()) == 2
    assert client.get("/api/v1/games", params={"strategy": "spread-based-column"}).json() == []

    in_range = client.get(
        "/api/v1/games/range",
        params={"start": "2000-01-01T00:00:00", "end": "2100-01-01T00:00:00"},
    )
    assert len(in_range.json()) == 2

    assert client.delete("/api/v1/games").json() == {"deleted": 2}


def test_generate_weighted_stars_with_history_strategy(client):
    response = client.post(
        "/api/v1/games/generate",
        json={"count": 1, "strategy": "full-history-column", "weighted_stars": True},
    )
    assert response.status_code == 200
    combination = response.json()["combinations"][0]
    assert combination["strategy"] == "full-history-column"
    assert len(combination["main_numbers"]) == 5


def test_generate_user_list_without_numbers(client):
    response = client.post(
        "/api/v1/games/generate", json={"count": 1, "strategy": "user-constrained-list"}
    )
    assert response.status_code == 400


def test_generate_max_attempts(client):
    # the only possible draw is a run of five
    response = client.post(
        "/api/v1/games/generate",
        json={
            "count": 1,
            "strategy": "user-constrained-list",
            "preferred_numbers": [1, 2, 3, 4, 5],
        },
    )
    assert response.status_code == 422


def test_generate_not_ready(client, draws):
    store = DataStore()
    store.draws = draws
    _use_store(store)
    response = client.post(
        "/api/v1/games/generate", json={"count": 1, "strategy": "spread-based-column"}
    )
    assert response.status_code == 503
