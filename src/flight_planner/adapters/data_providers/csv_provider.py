"""
CSV Data Provider - airports and flights from flat files.

Reads the airports and flights CSVs with pandas, validates them with
the pandera record schemas and turns each surviving row into an
Airport or Flight.
"""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Set, Union

import pandas as pd

from src.flight_planner.adapters.csv_records import (
    clean_records,
    drop_rows,
    line_number,
    read_csv_records,
    validate_rows,
)
from src.flight_planner.ports.flight_data_provider import FlightDataProvider
from src.flight_planner.schemas.airport import Airport, AirportRecordSchema
from src.flight_planner.schemas.flight import Flight, FlightRecordSchema

logger = logging.getLogger(__name__)

AIRPORT_COLUMNS = ["id", "iata", "city", "country", "latitude", "longitude"]
FLIGHT_COLUMNS = [
    "id",
    "origin",
    "destination",
    "airline",
    "flight_number",
    "duration",
    "price",
    "departure_time",
]
DEPARTURE_TIME_FORMAT = "%H:%M"


class CsvFlightDataProvider(FlightDataProvider):
    """
    Data provider for the airports and flights CSV files.

    Expected formats:
        airports: id,iata,city,country,latitude,longitude
        flights:  id,origin,destination,airline,flight_number,duration,price,departure_time

    Attributes:
        _airports_path: Path to the airports CSV.
        _flights_path: Path to the flights CSV.
    """

    def __init__(self, airports_path: Union[str, Path], flights_path: Union[str, Path]) -> None:
        self._airports_path = Path(airports_path)
        self._flights_path = Path(flights_path)

    @property
    def name(self) -> str:
        return "CSV files"

    def get_airports(self) -> Dict[str, Airport]:
        """
        Load airports keyed by IATA code.

        Codes are upper-cased; a repeated code keeps the last row.
        """
        df = read_csv_records(self._airports_path, AIRPORT_COLUMNS)
        df["iata"] = df["iata"].str.upper()
        df = clean_records(
            df,
            "airport",
            text_columns=["iata", "city", "country"],
            numeric_columns=["latitude", "longitude"],
            integer_columns=["id"],
        )
        df = validate_rows(df, AirportRecordSchema, self._airports_path, "airport")

        airports: Dict[str, Airport] = {}
        for row in df.itertuples(index=False):
            airports[row.iata] = Airport(
                iata=row.iata,
                airport_id=int(row.id),
                city=row.city,
                country=row.country,
                latitude=float(row.latitude),
                longitude=float(row.longitude),
            )

        logger.info("Loaded %d airports from %s", len(airports), self._airports_path)
        return airports

    def get_flights(self, airports: Mapping[str, Airport]) -> List[Flight]:
        """
        Load flights whose origin and destination are both known airports.

        Flights with an id seen earlier in the file are skipped.
        """
        df = read_csv_records(self._flights_path, FLIGHT_COLUMNS)
        df["origin"] = df["origin"].str.upper()
        df["destination"] = df["destination"].str.upper()
        df = clean_records(
            df,
            "flight",
            text_columns=["origin", "destination", "airline", "flight_number"],
            numeric_columns=["price"],
            integer_columns=["id", "duration"],
        )

        departures = pd.to_datetime(
            df["departure_time"], format=DEPARTURE_TIME_FORMAT, errors="coerce"
        )
        df = drop_rows(df, departures.isna(), "flight", "bad departure_time")
        df["departure_time"] = departures.loc[df.index].dt.time

        df = validate_rows(df, FlightRecordSchema, self._flights_path, "flight")

        flights: List[Flight] = []
        seen_ids: Set[int] = set()
        for index, row in zip(df.index, df.itertuples(index=False)):
            if row.origin not in airports:
                logger.warning(
                    "Origin airport %s not found for flight %d (line %d)",
                    row.origin,
                    row.id,
                    line_number(index),
                )
                continue
            if row.destination not in airports:
                logger.warning(
                    "Destination airport %s not found for flight %d (line %d)",
                    row.destination,
                    row.id,
                    line_number(index),
                )
                continue
            if row.id in seen_ids:
                logger.warning("Duplicate flight id %d at line %d", row.id, line_number(index))
                continue

            seen_ids.add(row.id)
            flights.append(
                Flight(
                    flight_id=int(row.id),
                    origin=row.origin,
                    destination=row.destination,
                    airline=row.airline,
                    flight_number=row.flight_number,
                    duration=int(row.duration),
                    price=float(row.price),
                    departure_time=row.departure_time,
                )
            )

        logger.info("Loaded %d flights from %s", len(flights), self._flights_path)
        return flights
