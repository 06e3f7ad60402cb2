"""
Depth-bounded longest simple path search.

Longest path is NP-hard in general; the search stays tractable by
exploring only simple paths (no node revisited) of bounded length.
"""

from typing import Callable, List, Optional, Sequence, Set, Tuple

from .graph import E, N, WeightedGraph

PathScore = Callable[[Sequence[E]], float]


def longest_simple_path(
    graph: WeightedGraph[N, E],
    origin: str,
    destination: str,
    score: PathScore,
    max_edges: int,
) -> Optional[Tuple[E, ...]]:
    """
    Exhaustive DFS for the highest-scoring path of at most ``max_edges`` edges.

    Every simple path within the bound is explored; a path reaching the
    destination replaces the current best only if its score is strictly
    greater, so among equal scores the first one found wins. The path
    buffer and the visited set are mutated in place and restored on
    backtrack.

    Args:
        graph: Graph to search.
        origin: Code of the start node.
        destination: Code of the target node.
        score: Total score of a non-empty edge path.
        max_edges: Longest path length allowed.

    Returns:
        Best path found, or None if the destination cannot be reached
        within the bound.
    """
    path: List[E] = []
    visited: Set[str] = set()
    # best starts empty, not at score 0, so a zero-score path is still found
    best_path: Optional[Tuple[E, ...]] = None
    best_score = 0.0

    def explore(current: str, depth: int) -> None:
        nonlocal best_path, best_score

        # depth counts edges taken so far
        if depth > max_edges:
            return

        if current == destination and path:
            current_score = score(path)
            if best_path is None or current_score > best_score:
                best_path = tuple(path)
                best_score = current_score
            return

        visited.add(current)
        for edge in graph.outgoing(current):
            if edge.destination not in visited:
                path.append(edge)
                explore(edge.destination, depth + 1)
                path.pop()
        visited.discard(current)

    explore(origin, 0)
    return best_path
