"""
Flight Search Service - linear search over loaded flights.

Every search is a single pass over the flight list, keeping the
flights' original order.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, Sequence

from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.flight import Flight


@dataclass(frozen=True)
class SearchResult:
    """Flights matching one search, with the airport searched for if any."""

    criteria: str
    flights: List[Flight] = field(default_factory=list)
    airport: Optional[Airport] = None

    @property
    def has_results(self) -> bool:
        return bool(self.flights)

    @property
    def result_count(self) -> int:
        return len(self.flights)


class FlightSearchService:
    """
    Linear flight search by origin, destination, airline or flight number.

    Attributes:
        _flights: Flights to search, in load order.
        _airports: Airports by IATA code, for resolving searched codes.
    """

    SEARCH_FIELDS = ("origin", "destination", "airline", "flight_number")

    def __init__(self, flights: Sequence[Flight], airports: Mapping[str, Airport]) -> None:
        self._flights = list(flights)
        self._airports = airports

    def _scan(self, matches: Callable[[Flight], bool]) -> List[Flight]:
        return [flight for flight in self._flights if matches(flight)]

    def by_origin(self, iata: str) -> SearchResult:
        """Flights departing from an airport (case-insensitive code)."""
        code = iata.strip().upper()
        return SearchResult(
            criteria=f"Origin: {iata}",
            flights=self._scan(lambda f: f.origin.upper() == code),
            airport=self._airports.get(code),
        )

    def by_destination(self, iata: str) -> SearchResult:
        """Flights arriving at an airport (case-insensitive code)."""
        code = iata.strip().upper()
        return SearchResult(
            criteria=f"Destination: {iata}",
            flights=self._scan(lambda f: f.destination.upper() == code),
            airport=self._airports.get(code),
        )

    def by_airline(self, airline: str) -> SearchResult:
        """Flights whose carrier contains the text (case-insensitive)."""
        needle = airline.lower()
        return SearchResult(
            criteria=f"Airline: {airline}",
            flights=self._scan(lambda f: needle in f.airline.lower()),
        )

    def by_flight_number(self, flight_number: str) -> SearchResult:
        """Flights with exactly this designator (case-insensitive)."""
        wanted = flight_number.strip().lower()
        return SearchResult(
            criteria=f"Flight Number: {flight_number}",
            flights=self._scan(lambda f: f.flight_number.lower() == wanted),
        )

    def search(self, search_field: str, term: str) -> SearchResult:
        """
        Dispatch to one of the searches by field name.

        Raises:
            ValueError: If ``search_field`` is not one of SEARCH_FIELDS.
        """
        if search_field not in self.SEARCH_FIELDS:
            raise ValueError(f"Unknown search field: {search_field}")
        return getattr(self, f"by_{search_field}")(term)
