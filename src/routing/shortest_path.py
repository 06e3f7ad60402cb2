"""
Single-criterion Dijkstra over a WeightedGraph.

The edge weight is pluggable, so one routine serves every
"minimise the sum of X" criterion (price, duration, hop count).
"""

import heapq
import itertools
from typing import Callable, Dict, List, Optional, Tuple

from .graph import E, N, WeightedGraph

WeightFunction = Callable[[E], float]


def dijkstra(
    graph: WeightedGraph[N, E],
    origin: str,
    destination: str,
    weight: WeightFunction,
) -> Optional[Tuple[E, ...]]:
    """
    Find the minimum-weight edge path from ``origin`` to ``destination``.

    Frontier entries carry (cumulative weight, node code, path so far).
    The destination is accepted the first time it is popped; entries
    heavier than the best recorded weight for their node are stale and
    skipped. Equal weights are popped in discovery order - the heap is
    keyed on an insertion counter after the weight, nothing else.

    Args:
        graph: Graph to search.
        origin: Code of the start node.
        destination: Code of the target node.
        weight: Non-negative weight of a single edge.

    Returns:
        Tuple of edges from first to last leg (empty when
        origin == destination), or None if the destination is unreachable.
    """
    counter = itertools.count()
    best: Dict[str, float] = {origin: 0.0}
    frontier: List[Tuple[float, int, str, Tuple[E, ...]]] = [
        (0.0, next(counter), origin, ())
    ]

    while frontier:
        current_weight, _, current, path = heapq.heappop(frontier)

        if current == destination:
            return path

        if current_weight > best.get(current, float("inf")):
            continue

        for edge in graph.outgoing(current):
            new_weight = current_weight + weight(edge)
            if new_weight < best.get(edge.destination, float("inf")):
                best[edge.destination] = new_weight
                heapq.heappush(
                    frontier,
                    (new_weight, next(counter), edge.destination, path + (edge,)),
                )

    return None
