"""
Weighted directed graph over named nodes.

Nodes are looked up by their code; every node added to the graph
gets an adjacency bucket holding its outgoing edges. Edges carry
arbitrary attributes - the graph only needs their destination.
"""

from typing import Dict, Generic, Hashable, Iterator, List, Optional, Protocol, Tuple, TypeVar, Union

from .exceptions import InvalidEdgeError


class GraphNode(Protocol):
    """Anything with a unique code can be a node."""

    @property
    def code(self) -> str: ...


class GraphEdge(Protocol):
    """Directed edge: identity plus the code of the node it leads to."""

    @property
    def edge_id(self) -> Hashable: ...

    @property
    def destination(self) -> str: ...


N = TypeVar("N", bound=GraphNode)
E = TypeVar("E", bound=GraphEdge)


class WeightedGraph(Generic[N, E]):
    """
    Adjacency-list graph: node -> outgoing edges, plus code -> node lookup.

    Invariant: every edge stored in a bucket originates at that bucket's node.

    Adding an edge creates a bucket for its origin node if needed, but an
    edge's destination never gets a bucket implicitly. A node that only
    appears as a destination is therefore not counted by ``node_count``
    and has no outgoing edges until it is added explicitly.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[N, List[E]] = {}
        self._nodes_by_code: Dict[str, N] = {}

    def add_node(self, node: N) -> None:
        """
        Insert a node if absent and register its code.

        Re-adding a code replaces the lookup entry (last write wins) but
        keeps the existing adjacency bucket.
        """
        self._adjacency.setdefault(node, [])
        self._nodes_by_code[node.code] = node

    def add_edge(self, edge: E, origin: Optional[N]) -> None:
        """
        Append an edge to its origin's bucket.

        The destination is not validated against the graph.

        Raises:
            InvalidEdgeError: If ``origin`` is None.
        """
        if origin is None:
            raise InvalidEdgeError(getattr(edge, "edge_id", None))
        self.add_node(origin)
        self._adjacency[origin].append(edge)

    def outgoing(self, node: Union[N, str, None]) -> Tuple[E, ...]:
        """Edges leaving a node (given as node or code); empty if unknown."""
        if node is None:
            return ()
        if isinstance(node, str):
            resolved = self._nodes_by_code.get(node)
            if resolved is None:
                return ()
            node = resolved
        return tuple(self._adjacency.get(node, ()))

    def lookup(self, code: Optional[str]) -> Optional[N]:
        """Node registered for a code, or None."""
        if code is None:
            return None
        return self._nodes_by_code.get(code)

    def node_count(self) -> int:
        """Number of nodes owning an adjacency bucket."""
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Total edges across all buckets, parallel edges included."""
        return sum(len(edges) for edges in self._adjacency.values())

    def edges(self) -> Iterator[E]:
        """Iterate over every edge in the graph."""
        for bucket in self._adjacency.values():
            yield from bucket

    def __contains__(self, code: object) -> bool:
        return code in self._nodes_by_code

    def __repr__(self) -> str:
        return f"WeightedGraph: {self.node_count()} nodes, {self.edge_count()} edges"
