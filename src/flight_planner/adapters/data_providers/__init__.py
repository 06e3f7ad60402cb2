"""
Data provider adapters for flight data sources.
"""

from src.flight_planner.adapters.data_providers.csv_provider import CsvFlightDataProvider

__all__ = ["CsvFlightDataProvider"]
