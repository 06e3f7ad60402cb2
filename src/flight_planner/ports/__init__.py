"""
Port interfaces for the Flight Planner.

Ports define the abstract interfaces the services use to reach data
sources, storage and algorithms (Ports and Adapters architecture).
"""

from src.flight_planner.ports.flight_data_provider import FlightDataProvider
from src.flight_planner.ports.route_finder import RouteFinder
from src.flight_planner.ports.route_store import RouteStore

__all__ = [
    "FlightDataProvider",
    "RouteFinder",
    "RouteStore",
]
