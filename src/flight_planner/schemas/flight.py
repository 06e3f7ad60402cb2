"""
Flight schemas.

Flights are the directed graph edges. Duration (minutes) and price
feed the route weights; carrier, designator and departure time are
for display only.
"""

from dataclasses import dataclass
from datetime import time

import pandera as pa
from pandera.typing import Series


class FlightRecordSchema(pa.DataFrameModel):
    """
    Row contract for the flights CSV after numeric coercion.

    ``departure_time`` is parsed separately and passes through as an
    extra column.
    """

    id: Series[int] = pa.Field(ge=0, description="Unique flight identifier")
    origin: Series[str] = pa.Field(
        nullable=False,
        str_matches=r"^[A-Z]{3}$",
        description="Origin airport IATA code",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        str_matches=r"^[A-Z]{3}$",
        description="Destination airport IATA code",
    )
    airline: Series[str] = pa.Field(nullable=False, description="Carrier name")
    flight_number: Series[str] = pa.Field(
        nullable=False, str_length={"min_value": 1}, description="Flight designator (e.g. 'OS1')"
    )
    duration: Series[int] = pa.Field(ge=0, description="Flight duration in minutes")
    price: Series[float] = pa.Field(ge=0, description="Ticket price")

    class Config:
        strict = False
        coerce = True
        name = "FlightRecordSchema"


@dataclass(frozen=True)
class Flight:
    """Immutable flight between two airports."""

    flight_id: int
    origin: str
    destination: str
    airline: str
    flight_number: str
    duration: int
    price: float
    departure_time: time

    @property
    def edge_id(self) -> int:
        """Edge identity used by the graph."""
        return self.flight_id

    def __str__(self) -> str:
        return (
            f"Flight {self.flight_number} [ID: {self.flight_id}] - "
            f"{self.origin} → {self.destination} | {self.airline} | "
            f"Duration: {self.duration} min | Price: ${self.price:.2f} | "
            f"Departs: {self.departure_time:%H:%M}"
        )
