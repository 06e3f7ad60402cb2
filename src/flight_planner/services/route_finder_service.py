"""
Route Finder Service - domain orchestrator for route queries.

Coordinates the route finder adapter with the loaded flights so callers
get back both the route and the flights it is made of.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, List, Mapping, Optional

from src.flight_planner.schemas.criterion import RouteCriterion
from src.flight_planner.schemas.flight import Flight
from src.flight_planner.schemas.route import Route

if TYPE_CHECKING:
    from src.flight_planner.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for origin-to-destination route queries.

    Attributes:
        _route_finder: Algorithm adapter (e.g., GraphRouteFinder).
        _flights: Loaded flights by id, for resolving route legs.
    """

    def __init__(self, route_finder: RouteFinder, flights: Mapping[int, Flight]) -> None:
        self._route_finder = route_finder
        self._flights = flights

    def find_route(
        self,
        origin: Optional[str],
        destination: Optional[str],
        criterion: object,
    ) -> Optional[Route]:
        """
        Find the best route for a criterion, logging how long it took.

        Returns:
            Route, or None when there is no result (see RouteFinder).
        """
        start_time = time.perf_counter()
        route = self._route_finder.find_route(origin, destination, criterion)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        selected = RouteCriterion.parse(criterion)
        logger.info(
            "Route search %s -> %s (%s): %s in %.2fms",
            origin,
            destination,
            selected.name if selected is not None else criterion,
            "found" if route is not None else "no result",
            elapsed_ms,
        )
        return route

    def flights_for_route(self, route: Route) -> List[Flight]:
        """Flights of a route in order; ids with no loaded flight are left out."""
        return [self._flights[fid] for fid in route.flight_ids if fid in self._flights]

    @property
    def algorithm_name(self) -> str:
        return self._route_finder.name
