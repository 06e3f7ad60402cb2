"""
Tests for the Flight Planner HTTP API.

Tests cover:
- Health and readiness reporting
- Route finding, listing, sorting and saving
- Flight search
- Error mapping (409 before loading, 400/422 for bad options)
"""

import shutil
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.api.planner_api import create_app, load_planner_data
from src.flight_planner.application import FlightPlanner
from src.flight_planner.config import PlannerConfig
from src.flight_planner.exceptions import DataLoadError, InvalidSortOptionError

DATA_DIR = Path(__file__).resolve().parents[2] / "data"


@pytest.fixture
def config(tmp_path) -> PlannerConfig:
    for name in ("airports.csv", "flights.csv", "routes.csv"):
        shutil.copy(DATA_DIR / name, tmp_path / name)
    return PlannerConfig(data_dir=tmp_path)


@pytest.fixture
def planner(config) -> FlightPlanner:
    planner = FlightPlanner(config)
    load_planner_data(planner)
    return planner


@pytest.fixture
def client(planner) -> TestClient:
    return TestClient(create_app(planner, load_data=False))


@pytest.fixture
def empty_client(config) -> TestClient:
    return TestClient(create_app(FlightPlanner(config), load_data=False))


# =============================================================================
# HEALTH
# =============================================================================


class TestHealth:
    def test_loaded(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "ready": True,
            "airports": 10,
            "flights": 20,
            "routes": 7,
            "graph_nodes": 10,
            "graph_edges": 20,
        }

    def test_not_loaded(self, empty_client):
        body = empty_client.get("/health").json()
        assert body["ready"] is False
        assert body["graph_nodes"] == 0


# =============================================================================
# ROUTES
# =============================================================================


class TestFindRoute:
    def test_cheapest(self, client):
        response = client.post(
            "/routes/find", json={"origin": "VIE", "destination": "JFK", "criterion": 1}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["route"]["flight_ids"] == [2, 3]
        assert body["route"]["total_duration"] == 620
        assert body["route"]["formatted_duration"] == "10h 20m"
        assert [f["flight_number"] for f in body["flights"]] == ["BA701", "BA117"]
        assert body["flights"][0]["departure_time"] == "11:00:00"

    def test_no_route_is_404(self, client):
        response = client.post(
            "/routes/find", json={"origin": "VIE", "destination": "XXX", "criterion": 2}
        )
        assert response.status_code == 404

    def test_invalid_criterion_is_422(self, client):
        response = client.post(
            "/routes/find", json={"origin": "VIE", "destination": "JFK", "criterion": 9}
        )
        assert response.status_code == 422

    def test_not_loaded_is_409(self, empty_client):
        response = empty_client.post(
            "/routes/find", json={"origin": "VIE", "destination": "JFK", "criterion": 1}
        )
        assert response.status_code == 409


class TestRouteCollection:
    def test_list_routes(self, client):
        body = client.get("/routes").json()
        assert [r["route_id"] for r in body] == [1, 2, 3, 4, 5, 6, 7]

    def test_sort_by_price(self, client):
        response = client.post("/routes/sort", json={"algorithm": "stable", "comparator": 1})

        assert response.status_code == 200
        prices = [r["total_price"] for r in response.json()]
        assert prices == sorted(prices)

    def test_sort_selected_routes(self, client):
        response = client.post(
            "/routes/sort",
            json={"route_ids": [1, 3, 2], "algorithm": "unstable", "comparator": 2},
        )
        assert [r["route_id"] for r in response.json()] == [1, 2, 3]

    def test_sort_unknown_ids_is_404(self, client):
        response = client.post("/routes/sort", json={"route_ids": [999], "comparator": 1})
        assert response.status_code == 404

    def test_sort_bad_comparator_is_400(self, client):
        response = client.post("/routes/sort", json={"comparator": 5})
        assert response.status_code == 400

    def test_sort_bad_algorithm_is_400(self, client):
        response = client.post("/routes/sort", json={"algorithm": "bubble", "comparator": 1})
        assert response.status_code == 400
        assert "sort algorithm" in response.json()["detail"]

    def test_sort_error_from_planner_is_400(self):
        planner = MagicMock(spec=FlightPlanner)
        planner.sort_routes.side_effect = InvalidSortOptionError("comparator", 7)
        client = TestClient(create_app(planner, load_data=False))

        response = client.post("/routes/sort", json={"comparator": 1})

        assert response.status_code == 400
        assert "Invalid comparator" in response.json()["detail"]

    def test_save(self, client, config):
        response = client.post("/routes/save")

        assert response.status_code == 200
        assert response.json()["saved"] == 7
        assert config.routes_output_path.exists()

    def test_save_without_routes_is_409(self, empty_client):
        assert empty_client.post("/routes/save").status_code == 409


# =============================================================================
# FLIGHT SEARCH
# =============================================================================


class TestFlightSearch:
    def test_by_origin(self, client):
        response = client.get("/flights/search", params={"by": "origin", "q": "vie"})

        assert response.status_code == 200
        body = response.json()
        assert body["airport"]["iata"] == "VIE"
        assert body["result_count"] == len(body["flights"]) == 6

    def test_by_airline(self, client):
        body = client.get("/flights/search", params={"by": "airline", "q": "iberia"}).json()
        assert body["airport"] is None
        assert body["result_count"] == 3

    def test_unknown_field_is_422(self, client):
        response = client.get("/flights/search", params={"by": "price", "q": "100"})
        assert response.status_code == 422


# =============================================================================
# STARTUP LOADING
# =============================================================================


class TestLoadPlannerData:
    def test_missing_routes_file_is_not_fatal(self, config, caplog):
        config.routes_path.unlink()
        planner = FlightPlanner(config)

        load_planner_data(planner)

        assert planner.is_ready
        assert planner.routes == []
        assert "Routes not loaded" in caplog.text

    def test_missing_flights_file_is_fatal(self, config):
        config.flights_path.unlink()
        with pytest.raises(DataLoadError):
            load_planner_data(FlightPlanner(config))
