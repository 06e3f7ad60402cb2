"""
Route Finder port interface.

Defines the abstract contract for routing algorithms.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.flight_planner.schemas.route import Route


class RouteFinder(ABC):
    """
    Abstract interface for origin-to-destination route finding.

    Implementations:
    - GraphRouteFinder: Dijkstra variants plus a bounded longest-path search
    """

    @abstractmethod
    def find_route(
        self,
        origin: Optional[str],
        destination: Optional[str],
        criterion: object,
    ) -> Optional[Route]:
        """
        Find the best route for a criterion.

        Args:
            origin: Origin airport IATA code.
            destination: Destination airport IATA code.
            criterion: RouteCriterion or its number (1-4).

        Returns:
            Route with id 0, or None when an airport is unknown, the
            criterion is invalid or no route exists. Never raises for these.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm identifier."""
        ...
