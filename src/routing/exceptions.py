"""
Custom exceptions for the routing module.

Provides a hierarchy of exceptions for clear error handling
of graph construction. Search outcomes such as unknown
nodes or unreachable destinations are not exceptions: they
are reported to the caller as ``None``.
"""


class RoutingError(Exception):
    """Base exception for all routing module errors."""

    pass


class InvalidEdgeError(RoutingError):
    """Raised when an edge is added without a valid origin node."""

    def __init__(self, edge_id: object) -> None:
        self.edge_id = edge_id
        message = f"Origin node cannot be None for edge {edge_id}"
        super().__init__(message)
