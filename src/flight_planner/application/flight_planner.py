"""
FlightPlanner - public API for the flight planner.

Facade over the data provider, route store, route finder and the
search/sort services. Data is loaded in stages (airports, then
flights, then routes); the flight graph is built once when flights
are loaded and is read-only afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from src.flight_planner.adapters.algorithms.graph_route_finder import (
    FlightGraph,
    GraphRouteFinder,
    build_flight_graph,
)
from src.flight_planner.adapters.data_providers.csv_provider import CsvFlightDataProvider
from src.flight_planner.adapters.repositories.csv_route_store import CsvRouteStore
from src.flight_planner.config import PlannerConfig
from src.flight_planner.exceptions import PlannerStateError
from src.flight_planner.ports.flight_data_provider import FlightDataProvider
from src.flight_planner.ports.route_store import RouteStore
from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.flight import Flight
from src.flight_planner.schemas.route import Route
from src.flight_planner.services.flight_search_service import FlightSearchService, SearchResult
from src.flight_planner.services.route_finder_service import RouteFinderService
from src.flight_planner.services.route_sorting_service import RouteSortingService, SortAlgorithm

logger = logging.getLogger(__name__)


class FlightPlanner:
    """
    Public API for route finding, sorting and flight search.

    Example usage:
        >>> planner = FlightPlanner(PlannerConfig(data_dir=Path("data")))
        >>> planner.load_airports()
        >>> planner.load_flights()
        >>> route = planner.find_route("VIE", "JFK", RouteCriterion.CHEAPEST)
        >>> planner.flights_for_route(route)

    Attributes:
        _provider: Source of airports and flights.
        _store: Route persistence.
        _airports: Loaded airports by IATA code.
        _flights: Loaded flights by id, in load order.
        _routes: Loaded routes by id, in load order.
    """

    def __init__(
        self,
        config: Optional[PlannerConfig] = None,
        data_provider: Optional[FlightDataProvider] = None,
        route_store: Optional[RouteStore] = None,
    ) -> None:
        """
        Initialize the planner with optional custom dependencies.

        Args:
            config: Settings; read from the environment when None.
            data_provider: Custom provider. If None, uses CsvFlightDataProvider.
            route_store: Custom store. If None, uses CsvRouteStore.
        """
        self._config = config or PlannerConfig.from_env()
        self._provider = data_provider or CsvFlightDataProvider(
            self._config.airports_path, self._config.flights_path
        )
        self._store = route_store or CsvRouteStore(
            self._config.routes_path, self._config.routes_output_path
        )
        self._sorter = RouteSortingService()

        self._airports: Dict[str, Airport] = {}
        self._flights: Dict[int, Flight] = {}
        self._routes: Dict[int, Route] = {}
        self._graph: Optional[FlightGraph] = None
        self._route_service: Optional[RouteFinderService] = None
        self._search: Optional[FlightSearchService] = None

    # ------------------------------------------------------------------
    # Loading and saving
    # ------------------------------------------------------------------

    def load_airports(self) -> Dict[str, Airport]:
        """Load airports, replacing any previously loaded ones."""
        self._airports = self._provider.get_airports()
        return dict(self._airports)

    def load_flights(self) -> List[Flight]:
        """
        Load flights and build the flight graph.

        Raises:
            PlannerStateError: If no airports are loaded.
        """
        if not self._airports:
            raise PlannerStateError("Load airports before flights")

        flights = self._provider.get_flights(self._airports)
        self._flights = {flight.flight_id: flight for flight in flights}
        self._graph = build_flight_graph(self._airports.values(), flights)
        self._route_service = RouteFinderService(GraphRouteFinder(self._graph), self._flights)
        self._search = FlightSearchService(flights, self._airports)

        logger.info("Graph built: %r", self._graph)
        return flights

    def load_routes(self) -> List[Route]:
        """
        Load stored routes, replacing any previously loaded ones.

        Raises:
            PlannerStateError: If no flights are loaded.
        """
        if not self._flights:
            raise PlannerStateError("Load flights before routes")

        routes = self._store.load_routes(self._flights)
        self._routes = {route.route_id: route for route in routes}
        return routes

    def save_routes(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Save the loaded routes.

        Raises:
            PlannerStateError: If there are no routes to save.
        """
        if not self._routes:
            raise PlannerStateError("No routes to save")
        return self._store.save_routes(
            list(self._routes.values()), Path(path) if path is not None else None
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_route(
        self,
        origin: Optional[str],
        destination: Optional[str],
        criterion: object,
    ) -> Optional[Route]:
        """
        Best route between two airports for a criterion (1-4).

        Returns:
            Route with id 0, or None for no result.

        Raises:
            PlannerStateError: If no flights are loaded.
        """
        return self._require_route_service().find_route(origin, destination, criterion)

    def flights_for_route(self, route: Route) -> List[Flight]:
        """Resolve a route's flight ids to loaded flights."""
        return self._require_route_service().flights_for_route(route)

    def sort_routes(
        self,
        route_ids: Optional[Iterable[int]],
        algorithm: Union[SortAlgorithm, str],
        comparator: int,
    ) -> List[Route]:
        """
        Sort loaded routes.

        Args:
            route_ids: Routes to sort, in this order; None sorts all.
                Unknown ids are skipped with a warning.
            algorithm: "stable" or "unstable".
            comparator: Selector 1-4.

        Raises:
            PlannerStateError: If no routes are loaded.
            InvalidSortOptionError: For an unknown algorithm or selector.
        """
        if not self._routes:
            raise PlannerStateError("No routes available, load routes first")

        if route_ids is None:
            selected = list(self._routes.values())
        else:
            selected = []
            for route_id in route_ids:
                route = self._routes.get(route_id)
                if route is None:
                    logger.warning("Route ID %s not found", route_id)
                    continue
                selected.append(route)

        return self._sorter.sort(selected, algorithm, comparator)

    def search_flights(self, search_field: str, term: str) -> SearchResult:
        """
        Linear flight search by origin, destination, airline or flight_number.

        Raises:
            PlannerStateError: If no flights are loaded.
            ValueError: For an unknown search field.
        """
        if self._search is None:
            raise PlannerStateError("Load flights before searching")
        return self._search.search(search_field, term)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def airports(self) -> Dict[str, Airport]:
        return dict(self._airports)

    @property
    def flights(self) -> Dict[int, Flight]:
        return dict(self._flights)

    @property
    def routes(self) -> List[Route]:
        return list(self._routes.values())

    @property
    def graph(self) -> Optional[FlightGraph]:
        return self._graph

    @property
    def is_ready(self) -> bool:
        """True once flights are loaded and routes can be searched."""
        return self._route_service is not None

    def _require_route_service(self) -> RouteFinderService:
        if self._route_service is None:
            raise PlannerStateError("Load airports and flights first")
        return self._route_service
