"""
Graph Route Finder - criterion dispatch over the routing core.

CHEAPEST, FASTEST and FEWEST_STOPOVERS share one Dijkstra routine and
differ only in the edge weight. SLOWEST runs the depth-bounded longest
simple path search scored by the route duration formula.
"""

import logging
from typing import Callable, Dict, Iterable, Optional, Sequence

from src.routing.graph import WeightedGraph
from src.routing.longest_path import longest_simple_path
from src.routing.shortest_path import dijkstra

from src.flight_planner.ports.route_finder import RouteFinder
from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.criterion import RouteCriterion
from src.flight_planner.schemas.flight import Flight
from src.flight_planner.schemas.route import STOPOVER_TIME, Route, total_duration

logger = logging.getLogger(__name__)

FlightGraph = WeightedGraph[Airport, Flight]

# Longest-path search is limited to this many connections (4 flights)
MAX_STOPOVERS = 3


def price_weight(flight: Flight) -> float:
    return flight.price


def duration_weight(flight: Flight) -> float:
    # Every leg is charged one connection time, the first one included;
    # the constant offset does not change which path is shortest.
    return float(flight.duration + STOPOVER_TIME)


def hop_weight(flight: Flight) -> float:
    return 1.0


EDGE_WEIGHTS: Dict[RouteCriterion, Callable[[Flight], float]] = {
    RouteCriterion.CHEAPEST: price_weight,
    RouteCriterion.FASTEST: duration_weight,
    RouteCriterion.FEWEST_STOPOVERS: hop_weight,
}


def build_flight_graph(airports: Iterable[Airport], flights: Iterable[Flight]) -> FlightGraph:
    """
    Build the flight graph: every airport is a node, every flight an
    edge on its origin airport.

    Raises:
        InvalidEdgeError: If a flight's origin airport is not among ``airports``.
    """
    graph: FlightGraph = WeightedGraph()
    for airport in airports:
        graph.add_node(airport)
    for flight in flights:
        graph.add_edge(flight, graph.lookup(flight.origin))
    return graph


class GraphRouteFinder(RouteFinder):
    """
    Route finder over an in-memory flight graph.

    The graph is read-only once handed over; queries do not mutate it.

    Attributes:
        _graph: Flight graph built during data loading.
        _max_stopovers: Connection limit for the SLOWEST search.
    """

    def __init__(self, graph: FlightGraph, max_stopovers: int = MAX_STOPOVERS) -> None:
        self._graph = graph
        self._max_stopovers = max_stopovers

    @property
    def name(self) -> str:
        return "Dijkstra + bounded longest path"

    @property
    def graph(self) -> FlightGraph:
        return self._graph

    def find_route(
        self,
        origin: Optional[str],
        destination: Optional[str],
        criterion: object,
    ) -> Optional[Route]:
        """
        Find the best route between two airports for a criterion.

        Codes are matched case-insensitively. A query from an airport to
        itself yields an empty route (all aggregates zero) for every
        criterion.

        Returns:
            Route with id 0, or None if an airport is unknown, the
            criterion is invalid or no route exists.
        """
        origin_airport = self._graph.lookup(_normalize(origin))
        destination_airport = self._graph.lookup(_normalize(destination))
        if origin_airport is None or destination_airport is None:
            logger.warning("Invalid origin or destination airport: %s -> %s", origin, destination)
            return None

        selected = RouteCriterion.parse(criterion)
        if selected is None:
            logger.warning("Invalid route criterion: %r", criterion)
            return None

        if origin_airport == destination_airport:
            return Route.from_flights(())

        if selected is RouteCriterion.SLOWEST:
            path = longest_simple_path(
                self._graph,
                origin_airport.code,
                destination_airport.code,
                score=_path_duration,
                max_edges=self._max_stopovers + 1,
            )
        else:
            path = dijkstra(
                self._graph,
                origin_airport.code,
                destination_airport.code,
                weight=EDGE_WEIGHTS[selected],
            )

        if path is None:
            logger.info(
                "No %s route from %s to %s",
                selected.name,
                origin_airport.code,
                destination_airport.code,
            )
            return None

        route = Route.from_flights(path)
        logger.debug("%s route %s -> %s: %s", selected.name, origin, destination, route)
        return route


def _normalize(code: Optional[str]) -> Optional[str]:
    if not isinstance(code, str):
        return None
    return code.strip().upper()


def _path_duration(path: Sequence[Flight]) -> float:
    return float(total_duration(path))
