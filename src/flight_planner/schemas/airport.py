"""
Airport schemas.

Airports are the graph nodes. Their identity is the IATA code; the
remaining attributes are display payload the routing logic never reads.
"""

from dataclasses import dataclass, field

import pandera as pa
from pandera.typing import Series


class AirportRecordSchema(pa.DataFrameModel):
    """
    Row contract for the airports CSV after numeric coercion.

    Rows failing a check are skipped by the loader, not the whole file.
    """

    id: Series[int] = pa.Field(ge=0, description="Numeric airport identifier")
    iata: Series[str] = pa.Field(
        nullable=False,
        str_matches=r"^[A-Z]{3}$",
        description="Three-letter IATA code, upper-cased",
    )
    city: Series[str] = pa.Field(nullable=False)
    country: Series[str] = pa.Field(nullable=False)
    latitude: Series[float] = pa.Field(ge=-90, le=90)
    longitude: Series[float] = pa.Field(ge=-180, le=180)

    class Config:
        strict = False
        coerce = True
        name = "AirportRecordSchema"


@dataclass(frozen=True)
class Airport:
    """
    Immutable airport. Equality and hashing use the IATA code only.
    """

    iata: str
    airport_id: int = field(default=0, compare=False)
    city: str = field(default="", compare=False)
    country: str = field(default="", compare=False)
    latitude: float = field(default=0.0, compare=False)
    longitude: float = field(default=0.0, compare=False)

    @property
    def code(self) -> str:
        """Node identity used by the graph."""
        return self.iata

    def __str__(self) -> str:
        return (
            f"{self.iata} ({self.city}) - {self.country} "
            f"[ID: {self.airport_id}, Coords: {self.latitude:.2f}, {self.longitude:.2f}]"
        )
