"""
Configuration for the Flight Planner.

Values come from environment variables, optionally loaded from a
.env file in the working directory.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "FLIGHT_PLANNER_"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class PlannerConfig:
    """
    Flight Planner settings.

    Attributes:
        data_dir: Directory holding the CSV files.
        airports_file: Airports CSV name inside data_dir.
        flights_file: Flights CSV name inside data_dir.
        routes_file: Routes CSV name inside data_dir.
        routes_output_file: File routes are saved to inside data_dir.
        log_level: Root logging level name.
        log_file: Optional log file; console only when None.
    """

    data_dir: Path = Path("data")
    airports_file: str = "airports.csv"
    flights_file: str = "flights.csv"
    routes_file: str = "routes.csv"
    routes_output_file: str = "routes_output.csv"
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """Build settings from FLIGHT_PLANNER_* environment variables."""
        log_file = _env("LOG_FILE")
        return cls(
            data_dir=Path(_env("DATA_DIR", "data")),
            airports_file=_env("AIRPORTS_FILE", "airports.csv"),
            flights_file=_env("FLIGHTS_FILE", "flights.csv"),
            routes_file=_env("ROUTES_FILE", "routes.csv"),
            routes_output_file=_env("ROUTES_OUTPUT_FILE", "routes_output.csv"),
            log_level=_env("LOG_LEVEL", "INFO"),
            log_file=Path(log_file) if log_file else None,
        )

    @property
    def airports_path(self) -> Path:
        return self.data_dir / self.airports_file

    @property
    def flights_path(self) -> Path:
        return self.data_dir / self.flights_file

    @property
    def routes_path(self) -> Path:
        return self.data_dir / self.routes_file

    @property
    def routes_output_path(self) -> Path:
        return self.data_dir / self.routes_output_file
