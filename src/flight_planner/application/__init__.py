"""
Application layer for the Flight Planner.

Provides the public API, handling dependency initialization and
exposing a simple interface for consumers.
"""

from src.flight_planner.application.flight_planner import FlightPlanner

__all__ = ["FlightPlanner"]
