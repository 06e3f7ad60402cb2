"""
Pytest configuration shared by all flight planner tests.

Builder fixtures return factories, so tests can create as many
airports, flights, routes and graphs as they need.
"""

from datetime import time
from typing import Callable, Iterable, List

import pytest

from src.flight_planner.adapters.algorithms.graph_route_finder import (
    FlightGraph,
    build_flight_graph,
)
from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.flight import Flight
from src.flight_planner.schemas.route import Route


def _airport(iata: str, airport_id: int = 0, city: str = "") -> Airport:
    return Airport(iata=iata, airport_id=airport_id, city=city or iata, country="X")


def _flight(
    flight_id: int,
    origin: str,
    destination: str,
    duration: int = 60,
    price: float = 100.0,
    airline: str = "Test Air",
    flight_number: str = "",
) -> Flight:
    return Flight(
        flight_id=flight_id,
        origin=origin,
        destination=destination,
        airline=airline,
        flight_number=flight_number or f"TA{flight_id}",
        duration=duration,
        price=price,
        departure_time=time(10, 0),
    )


def _route(route_id: int, price: float, duration: int, stopovers: int) -> Route:
    return Route(
        route_id=route_id,
        flight_ids=tuple(range(1, stopovers + 2)),
        total_duration=duration,
        total_price=price,
        stopovers=stopovers,
    )


def _graph(codes: Iterable[str], flights: Iterable[Flight]) -> FlightGraph:
    return build_flight_graph([_airport(code) for code in codes], list(flights))


# -------------------------
# Builders
# -------------------------


@pytest.fixture
def make_airport() -> Callable[..., Airport]:
    return _airport


@pytest.fixture
def make_flight() -> Callable[..., Flight]:
    return _flight


@pytest.fixture
def make_route() -> Callable[..., Route]:
    """Route with stored aggregates and ids 1..stopovers+1."""
    return _route


@pytest.fixture
def graph_from() -> Callable[..., FlightGraph]:
    """Flight graph over airports built from bare codes."""
    return _graph


# -------------------------
# VIE -> JFK scenario
# -------------------------


@pytest.fixture
def vienna_flights() -> List[Flight]:
    """
    VIE -> JFK three ways:
    - direct: expensive, fast
    - VIE -> LHR -> JFK: cheaper, slower
    - VIE -> CDG -> LHR -> JFK: most legs, slowest
    """
    return [
        _flight(1, "VIE", "JFK", duration=540, price=800.0),
        _flight(2, "VIE", "LHR", duration=120, price=150.0),
        _flight(3, "LHR", "JFK", duration=480, price=400.0),
        _flight(4, "VIE", "CDG", duration=100, price=100.0),
        _flight(5, "CDG", "LHR", duration=60, price=80.0),
    ]


@pytest.fixture
def vienna_graph(vienna_flights) -> FlightGraph:
    return _graph(["VIE", "JFK", "LHR", "CDG"], vienna_flights)
