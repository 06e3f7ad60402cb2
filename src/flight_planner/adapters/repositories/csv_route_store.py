"""
CSV Route Store - persisted routes as flat records.

Record format: id,flight_ids,total_duration,total_price,stopovers
with flight ids hyphen-joined ("1-47-18"). Stored aggregates are
trusted as-is. Files holding only id,flight_ids are also read; their
aggregates are derived from the loaded flights.
"""

import dataclasses
import logging
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Union

import pandas as pd

from src.flight_planner.adapters.csv_records import (
    clean_records,
    line_number,
    read_csv_records,
    validate_rows,
)
from src.flight_planner.ports.route_store import RouteStore
from src.flight_planner.schemas.flight import Flight
from src.flight_planner.schemas.route import Route, RouteRecordSchema

logger = logging.getLogger(__name__)

ID_COLUMNS = ["id", "flight_ids"]
AGGREGATE_COLUMNS = ["total_duration", "total_price", "stopovers"]
ROUTE_COLUMNS = ID_COLUMNS + AGGREGATE_COLUMNS
FLIGHT_ID_SEPARATOR = "-"


def parse_flight_ids(value: str) -> tuple[int, ...]:
    """'1-47-18' -> (1, 47, 18)."""
    return tuple(int(part) for part in value.split(FLIGHT_ID_SEPARATOR))


class CsvRouteStore(RouteStore):
    """
    Route persistence in a CSV file.

    Attributes:
        _routes_path: File routes are read from.
        _output_path: Default file routes are written to.
    """

    def __init__(
        self,
        routes_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
    ) -> None:
        self._routes_path = Path(routes_path)
        self._output_path = Path(output_path) if output_path is not None else self._routes_path

    def load_routes(self, flights: Mapping[int, Flight]) -> List[Route]:
        """
        Read routes in file order.

        Args:
            flights: Known flights by id; only consulted when the file
                has no aggregate columns.

        Raises:
            DataLoadError: If the file is missing or lacks id/flight_ids.
        """
        df = read_csv_records(self._routes_path, ID_COLUMNS)
        has_aggregates = all(col in df.columns for col in AGGREGATE_COLUMNS)

        if has_aggregates:
            df = clean_records(
                df,
                "route",
                text_columns=["flight_ids"],
                numeric_columns=["total_price"],
                integer_columns=["id", "total_duration", "stopovers"],
            )
        else:
            df = clean_records(df, "route", text_columns=["flight_ids"], integer_columns=["id"])
        df = validate_rows(df, RouteRecordSchema, self._routes_path, "route")

        if has_aggregates:
            routes = [
                Route(
                    route_id=int(row.id),
                    flight_ids=parse_flight_ids(row.flight_ids),
                    total_duration=int(row.total_duration),
                    total_price=float(row.total_price),
                    stopovers=int(row.stopovers),
                )
                for row in df.itertuples(index=False)
            ]
        else:
            routes = self._derive_routes(df, flights)

        logger.info("Loaded %d routes from %s", len(routes), self._routes_path)
        return routes

    def _derive_routes(self, df: pd.DataFrame, flights: Mapping[int, Flight]) -> List[Route]:
        """
        Build routes from their known flights.

        Aggregates cover only the flights found; the route keeps every
        listed flight id.
        """
        routes: List[Route] = []
        for index, row in zip(df.index, df.itertuples(index=False)):
            route_flights: List[Flight] = []
            flight_ids = parse_flight_ids(row.flight_ids)
            for flight_id in flight_ids:
                flight = flights.get(flight_id)
                if flight is None:
                    logger.warning("Flight %d not found for route %d", flight_id, row.id)
                    continue
                route_flights.append(flight)

            if not route_flights:
                logger.warning(
                    "Skipping route %d at line %d: no known flights",
                    row.id,
                    line_number(index),
                )
                continue
            route = Route.from_flights(route_flights, route_id=int(row.id))
            routes.append(dataclasses.replace(route, flight_ids=flight_ids))
        return routes

    def save_routes(self, routes: Sequence[Route], path: Optional[Path] = None) -> Path:
        """Write all routes with their aggregates, replacing the file."""
        target = Path(path) if path is not None else self._output_path
        target.parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame(
            [
                {
                    "id": route.route_id,
                    "flight_ids": route.flight_ids_label,
                    "total_duration": route.total_duration,
                    "total_price": route.total_price,
                    "stopovers": route.stopovers,
                }
                for route in routes
            ],
            columns=ROUTE_COLUMNS,
        )
        df.to_csv(target, index=False)

        logger.info("Saved %d routes to %s", len(routes), target)
        return target
