"""
Custom exceptions for the flight_planner package.

Route-finding misses (unknown airport, invalid criterion, no path)
are not errors and never raise; these cover data loading and
misuse of the planner.
"""


class FlightPlannerError(Exception):
    """Base exception for all flight planner errors."""

    pass


class DataLoadError(FlightPlannerError):
    """Raised when a data file cannot be read or lacks required columns."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load {path}: {reason}")


class PlannerStateError(FlightPlannerError):
    """Raised when an operation needs data that has not been loaded yet."""

    pass


class InvalidSortOptionError(FlightPlannerError):
    """Raised for an unknown sort algorithm or comparator selector."""

    def __init__(self, option: str, value: object) -> None:
        self.option = option
        self.value = value
        super().__init__(f"Invalid {option}: {value!r}")
