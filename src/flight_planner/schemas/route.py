"""
Route schemas.

A route is an ordered list of flight ids plus three aggregates
computed once at construction: total price, total duration (flight
time plus a fixed connection time per stopover) and stopover count.
Routes read back from storage keep their stored aggregates.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import pandera as pa
from pandera.typing import Series

from src.flight_planner.schemas.flight import Flight

# Minimum connection time between two consecutive flights, in minutes
STOPOVER_TIME = 20

# Route id for computed routes that have not been stored
UNSAVED_ROUTE_ID = 0


def count_stopovers(flights: Sequence[Flight]) -> int:
    """Connections in a flight sequence."""
    return max(0, len(flights) - 1)


def total_duration(flights: Sequence[Flight]) -> int:
    """Flight time plus STOPOVER_TIME per connection; 0 for no flights."""
    return sum(f.duration for f in flights) + count_stopovers(flights) * STOPOVER_TIME


def total_price(flights: Sequence[Flight]) -> float:
    """Sum of ticket prices."""
    return float(sum(f.price for f in flights))


class RouteRecordSchema(pa.DataFrameModel):
    """
    Row contract for the routes CSV.

    The aggregate columns are optional: files without them get their
    aggregates derived from the loaded flights.
    """

    id: Series[int] = pa.Field(ge=0, description="Route identifier")
    flight_ids: Series[str] = pa.Field(
        nullable=False,
        str_matches=r"^\d+(-\d+)*$",
        description="Hyphen-joined flight ids in flight order",
    )
    total_duration: Optional[Series[int]] = pa.Field(ge=0, nullable=False)
    total_price: Optional[Series[float]] = pa.Field(ge=0, nullable=False)
    stopovers: Optional[Series[int]] = pa.Field(ge=0, nullable=False)

    class Config:
        strict = False
        coerce = True
        name = "RouteRecordSchema"


@dataclass(frozen=True)
class Route:
    """
    Immutable route. Use ``from_flights`` to compute the aggregates;
    calling the constructor directly stores them as given.
    """

    route_id: int
    flight_ids: Tuple[int, ...]
    total_duration: int
    total_price: float
    stopovers: int

    @classmethod
    def from_flights(
        cls,
        flights: Sequence[Flight],
        route_id: int = UNSAVED_ROUTE_ID,
    ) -> "Route":
        """Build a route from its flights, computing all aggregates."""
        return cls(
            route_id=route_id,
            flight_ids=tuple(f.flight_id for f in flights),
            total_duration=total_duration(flights),
            total_price=total_price(flights),
            stopovers=count_stopovers(flights),
        )

    @property
    def num_flights(self) -> int:
        return len(self.flight_ids)

    @property
    def formatted_duration(self) -> str:
        """Duration as e.g. '5h 30m'."""
        hours, minutes = divmod(self.total_duration, 60)
        return f"{hours}h {minutes}m"

    @property
    def flight_ids_label(self) -> str:
        """Hyphen-joined flight ids, the stored form."""
        return "-".join(str(fid) for fid in self.flight_ids)

    def __str__(self) -> str:
        return (
            f"Route {self.route_id}: Flights {list(self.flight_ids)} | "
            f"Duration: {self.formatted_duration} | Price: ${self.total_price:.2f} | "
            f"Stopovers: {self.stopovers}"
        )
