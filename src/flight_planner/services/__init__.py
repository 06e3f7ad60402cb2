"""
Domain services for the Flight Planner.

Services orchestrate the ports (data sources, storage, algorithms)
and the domain operations built on them.
"""

from src.flight_planner.services.flight_search_service import FlightSearchService, SearchResult
from src.flight_planner.services.route_finder_service import RouteFinderService
from src.flight_planner.services.route_sorting_service import RouteSortingService, SortAlgorithm

__all__ = [
    "FlightSearchService",
    "RouteFinderService",
    "RouteSortingService",
    "SearchResult",
    "SortAlgorithm",
]
