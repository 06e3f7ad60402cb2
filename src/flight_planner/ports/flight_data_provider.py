"""
Flight Data Provider port interface.

Defines the abstract contract for sources of airports and flights.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping

from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.flight import Flight


class FlightDataProvider(ABC):
    """
    Abstract interface for airport and flight sources.

    Providers validate at the boundary and skip malformed records with a
    warning, so callers only ever see well-typed Airport and Flight values.

    Implementations:
    - CsvFlightDataProvider: pandas + pandera over CSV files
    """

    @abstractmethod
    def get_airports(self) -> Dict[str, Airport]:
        """
        Return all valid airports keyed by upper-case IATA code.

        Raises:
            DataLoadError: If the source is missing or unusable as a whole.
        """
        ...

    @abstractmethod
    def get_flights(self, airports: Mapping[str, Airport]) -> List[Flight]:
        """
        Return all valid flights between known airports, in source order.

        Args:
            airports: Known airports; flights touching others are skipped.

        Raises:
            DataLoadError: If the source is missing or unusable as a whole.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name."""
        ...
