"""
Single-pair shortest paths: Dijkstra.

Dijkstra's optimality needs non-negative edge weights. Negative weights are
not rejected: the search runs anyway, logs a warning and flags the result,
and may return a sub-optimal path. There is no Bellman-Ford fallback.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import itertools
from typing import Dict, Hashable, List, Tuple

from ..logging import get_logger
from .core import Graph
from .results import PathResult
from .utils import reconstruct_path

logger = get_logger(__name__)


def dijkstra(graph: Graph, start: Hashable, goal: Hashable) -> PathResult:
    """
    Dijkstra's algorithm from start to goal.

    Uses a binary heap without decrease-key: an improved vertex is pushed
    again and stale heap entries are skipped when popped, because the vertex
    is already finalized. The search stops the moment goal is finalized.

    Args:
        graph: Graph to search (directed or undirected).
        start: Start vertex.
        goal: Goal vertex.

    Returns:
        PathResult whose ``weight`` is the total path weight and ``cost`` the
        number of edges. ``negative_weights`` is True if a negative edge was
        traversed. PathResult.not_found(weighted=True) when goal is
        unreachable or an endpoint is absent.

    Complexity: O(E log E) with lazy deletion.

    Example:
        >>> G = Graph(directed=True)
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 2.0)
        >>> dijkstra(G, 'A', 'C').weight
        3.0
    """
    if start not in graph or goal not in graph:
        return PathResult.not_found(weighted=True)

    dist: Dict[Hashable, float] = {v: float("inf") for v in graph.vertices()}
    dist[start] = 0.0
    parent: Dict[Hashable, Hashable] = {}
    finalized: set = set()
    saw_negative = False

    # (distance, str(vertex), insertion counter, vertex) for deterministic ties
    counter = itertools.count()
    pq: List[Tuple[float, str, int, Hashable]] = [(0.0, str(start), next(counter), start)]

    while pq:
        d, _, _, u = heapq.heappop(pq)

        if u in finalized:
            continue
        finalized.add(u)

        if u == goal:
            if saw_negative:
                logger.warning(
                    "Negative edge weight encountered; Dijkstra may be sub-optimal. "
                    "Consider Bellman-Ford for graphs with negative weights."
                )
            result = reconstruct_path(start, goal, parent)
            result.weight = d
            result.negative_weights = saw_negative
            return result

        for edge in graph.edges_from(u):
            if edge.weight < 0:
                saw_negative = True
            v = edge.target
            if v in finalized:
                continue

            alt = d + edge.weight
            if alt < dist[v]:
                dist[v] = alt
                parent[v] = u
                heapq.heappush(pq, (alt, str(v), next(counter), v))

    if saw_negative:
        logger.warning("Negative edge weight encountered during Dijkstra search.")
    logger.debug(f"Dijkstra finalized {len(finalized)} vertices without reaching {goal!r}")
    result = PathResult.not_found(weighted=True)
    result.negative_weights = saw_negative
    return result
