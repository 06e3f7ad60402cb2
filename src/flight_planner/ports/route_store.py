"""
Route Store port interface.

Defines the read/write contract for persisted routes.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from src.flight_planner.schemas.flight import Flight
from src.flight_planner.schemas.route import Route


class RouteStore(ABC):
    """
    Abstract interface for route persistence.

    Stored records carry pre-computed aggregates which are trusted on read.

    Implementations:
    - CsvRouteStore: routes CSV with hyphen-joined flight ids
    """

    @abstractmethod
    def load_routes(self, flights: Mapping[int, Flight]) -> List[Route]:
        """
        Read stored routes.

        Args:
            flights: Known flights by id, used only for records that
                carry no aggregates.
        """
        ...

    @abstractmethod
    def save_routes(self, routes: Sequence[Route], path: Optional[Path] = None) -> Path:
        """
        Write routes, replacing the target's contents.

        Returns:
            The path written to.
        """
        ...
