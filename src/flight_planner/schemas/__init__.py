"""
Schema definitions for the Flight Planner.

Frozen dataclasses for airports, flights and routes, plus the
pandera record schemas validating the CSV files at the boundary.
"""

from .airport import Airport, AirportRecordSchema
from .criterion import RouteCriterion
from .flight import Flight, FlightRecordSchema
from .route import (
    STOPOVER_TIME,
    UNSAVED_ROUTE_ID,
    Route,
    RouteRecordSchema,
    count_stopovers,
    total_duration,
    total_price,
)

__all__ = [
    # Airport
    "Airport",
    "AirportRecordSchema",
    # Criteria
    "RouteCriterion",
    # Flight
    "Flight",
    "FlightRecordSchema",
    # Route
    "Route",
    "RouteRecordSchema",
    "STOPOVER_TIME",
    "UNSAVED_ROUTE_ID",
    "count_stopovers",
    "total_duration",
    "total_price",
]
