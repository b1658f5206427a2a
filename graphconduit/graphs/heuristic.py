"""
Heuristic-guided search: Greedy Best-First and A*.

A heuristic is any callable ``h(vertex, goal) -> float`` returning a
non-negative estimate of the remaining cost. A* returns optimal paths when
edge weights are non-negative and the heuristic is admissible; neither
property is verified, violating them only degrades answer quality.

References:
    - Hart, Nilsson, Raphael. "A Formal Basis for the Heuristic
      Determination of Minimum Cost Paths", IEEE SSC 4(2), 1968.
    - Russell, Norvig. "Artificial Intelligence: A Modern Approach", 3rd ed.
      Chapter 3.5.
"""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Callable, Dict, Hashable, List, Mapping, Tuple

from ..logging import get_logger
from .core import Graph
from .results import PathResult
from .utils import path_weight, reconstruct_path

logger = get_logger(__name__)

Heuristic = Callable[[Hashable, Hashable], float]
Coordinates = Mapping[Hashable, Tuple[float, float]]


def _estimate(heuristic: Heuristic, vertex: Hashable, goal: Hashable) -> float:
    """Evaluate a heuristic, rejecting NaN and negative estimates."""
    value = float(heuristic(vertex, goal))
    if math.isnan(value) or value < 0:
        raise ValueError(
            f"Heuristic must return a non-negative number, got {value} "
            f"for ({vertex!r}, {goal!r})."
        )
    return value


def zero_heuristic(vertex: Hashable, goal: Hashable) -> float:
    """Heuristic that always estimates 0 (A* degenerates to Dijkstra)."""
    return 0.0


def euclidean_heuristic(coords: Coordinates) -> Heuristic:
    """
    Straight-line distance between vertex coordinates.

    Vertices without coordinates estimate 0, which keeps the heuristic
    admissible whenever edge weights are at least the geometric distance.

    Example:
        >>> h = euclidean_heuristic({'A': (0.0, 0.0), 'B': (3.0, 4.0)})
        >>> h('A', 'B')
        5.0
    """

    def heuristic(vertex: Hashable, goal: Hashable) -> float:
        if vertex not in coords or goal not in coords:
            return 0.0
        (x1, y1), (x2, y2) = coords[vertex], coords[goal]
        return math.hypot(x2 - x1, y2 - y1)

    return heuristic


def manhattan_heuristic(coords: Coordinates) -> Heuristic:
    """Taxicab distance between vertex coordinates; 0 when either is unknown."""

    def heuristic(vertex: Hashable, goal: Hashable) -> float:
        if vertex not in coords or goal not in coords:
            return 0.0
        (x1, y1), (x2, y2) = coords[vertex], coords[goal]
        return abs(x2 - x1) + abs(y2 - y1)

    return heuristic


def greedy_best_first(
    graph: Graph, start: Hashable, goal: Hashable, heuristic: Heuristic
) -> PathResult:
    """
    Greedy Best-First search.

    The frontier is ordered purely by ``heuristic(vertex, goal)``; path cost
    so far is ignored. Vertices are marked visited when first discovered, so
    none is expanded twice. No optimality guarantee.

    Args:
        graph: Graph to search.
        start: Start vertex.
        goal: Goal vertex.
        heuristic: Callable (vertex, goal) -> non-negative estimate.

    Returns:
        PathResult with ``weight`` set to the total weight of the path found.

    Raises:
        ValueError: If the heuristic returns a negative value or NaN.
    """
    if start not in graph or goal not in graph:
        return PathResult.not_found(weighted=True)

    counter = itertools.count()
    open_heap: List[Tuple[float, str, int, Hashable]] = [
        (_estimate(heuristic, start, goal), str(start), next(counter), start)
    ]
    visited = {start}
    parent: Dict[Hashable, Hashable] = {}

    while open_heap:
        _, _, _, u = heapq.heappop(open_heap)
        if u == goal:
            result = reconstruct_path(start, goal, parent)
            result.weight = path_weight(graph, result.path)
            return result

        for v in graph.neighbors(u):
            if v not in visited:
                visited.add(v)
                parent[v] = u
                heapq.heappush(
                    open_heap, (_estimate(heuristic, v, goal), str(v), next(counter), v)
                )

    logger.debug(f"Best-first search exhausted frontier without reaching {goal!r}")
    return PathResult.not_found(weighted=True)


def astar(
    graph: Graph, start: Hashable, goal: Hashable, heuristic: Heuristic = zero_heuristic
) -> PathResult:
    """
    A* search with priority f = g + h.

    ``g`` is the accumulated edge weight from start. Improvements re-push a
    vertex instead of decreasing its key; a closed set makes stale entries
    no-ops when popped. Terminates when goal is popped.

    Args:
        graph: Graph to search.
        start: Start vertex.
        goal: Goal vertex.
        heuristic: Callable (vertex, goal) -> non-negative estimate
            (default: zero_heuristic).

    Returns:
        PathResult with ``weight`` = g(goal) and ``cost`` = number of edges.
        ``negative_weights`` is True if a negative edge was traversed.

    Raises:
        ValueError: If the heuristic returns a negative value or NaN.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 1.0)
        >>> G.add_edge('A', 'C', 5.0)
        >>> astar(G, 'A', 'C').path
        ['A', 'B', 'C']
    """
    if start not in graph or goal not in graph:
        return PathResult.not_found(weighted=True)

    g_score: Dict[Hashable, float] = {v: float("inf") for v in graph.vertices()}
    g_score[start] = 0.0
    parent: Dict[Hashable, Hashable] = {}
    closed: set = set()
    saw_negative = False

    counter = itertools.count()
    open_heap: List[Tuple[float, str, int, Hashable]] = [
        (_estimate(heuristic, start, goal), str(start), next(counter), start)
    ]

    while open_heap:
        _, _, _, u = heapq.heappop(open_heap)

        if u in closed:
            continue

        if u == goal:
            if saw_negative:
                logger.warning("Negative edge weight encountered; A* may be sub-optimal.")
            result = reconstruct_path(start, goal, parent)
            result.weight = g_score[goal]
            result.negative_weights = saw_negative
            return result

        closed.add(u)

        for edge in graph.edges_from(u):
            if edge.weight < 0:
                saw_negative = True
            v = edge.target
            if v in closed:
                continue

            tentative = g_score[u] + edge.weight
            if tentative < g_score[v]:
                g_score[v] = tentative
                parent[v] = u
                f = tentative + _estimate(heuristic, v, goal)
                heapq.heappush(open_heap, (f, str(v), next(counter), v))

    logger.debug(f"A* closed {len(closed)} vertices without reaching {goal!r}")
    result = PathResult.not_found(weighted=True)
    result.negative_weights = saw_negative
    return result


__all__ = [
    "Heuristic",
    "zero_heuristic",
    "euclidean_heuristic",
    "manhattan_heuristic",
    "greedy_best_first",
    "astar",
]
