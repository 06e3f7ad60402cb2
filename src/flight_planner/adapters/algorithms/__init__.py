"""
Algorithm adapters for flight routing.
"""

from src.flight_planner.adapters.algorithms.graph_route_finder import (
    GraphRouteFinder,
    build_flight_graph,
)

__all__ = [
    "GraphRouteFinder",
    "build_flight_graph",
]
