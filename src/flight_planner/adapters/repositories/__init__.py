"""
Repository adapters for route persistence.
"""

from src.flight_planner.adapters.repositories.csv_route_store import CsvRouteStore

__all__ = ["CsvRouteStore"]
