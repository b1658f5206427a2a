"""
Graph traversal algorithms: BFS and DFS.

Both searches mark a vertex visited and record its parent the moment it is
discovered, so no vertex enters the frontier twice. They stop as soon as
the goal leaves the frontier. Neighbors are expanded in adjacency
insertion order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Dict, Hashable, List

from ..logging import get_logger
from .core import Graph
from .results import PathResult
from .utils import reconstruct_path

logger = get_logger(__name__)


def bfs(graph: Graph, start: Hashable, goal: Hashable) -> PathResult:
    """
    Breadth-first search from start to goal.

    Returns a path with the minimum number of edges.

    Args:
        graph: Graph to search.
        start: Start vertex.
        goal: Goal vertex.

    Returns:
        PathResult with cost equal to the number of edges, or
        PathResult.not_found() if goal is unreachable or either endpoint is
        not in the graph.

    Complexity: O(V + E).

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        >>> G.add_edge('B', 'C')
        >>> bfs(G, 'A', 'C').path
        ['A', 'B', 'C']
    """
    if start not in graph or goal not in graph:
        return PathResult.not_found()
    if start == goal:
        return PathResult([start], 0, True)

    visited = {start}
    parent: Dict[Hashable, Hashable] = {}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        if u == goal:
            result = reconstruct_path(start, goal, parent)
            logger.debug(f"BFS reached {goal!r} after visiting {len(visited)} vertices")
            return result

        for v in graph.neighbors(u):
            if v not in visited:
                visited.add(v)
                parent[v] = u
                queue.append(v)

    logger.debug(f"BFS exhausted frontier without reaching {goal!r}")
    return PathResult.not_found()


def dfs(graph: Graph, start: Hashable, goal: Hashable) -> PathResult:
    """
    Depth-first search (iterative, explicit stack) from start to goal.

    Returns *a* path; it is not necessarily the shortest one.

    Args:
        graph: Graph to search.
        start: Start vertex.
        goal: Goal vertex.

    Returns:
        PathResult with cost equal to the number of edges, or
        PathResult.not_found().

    Complexity: O(V + E).
    """
    if start not in graph or goal not in graph:
        return PathResult.not_found()
    if start == goal:
        return PathResult([start], 0, True)

    visited = {start}
    parent: Dict[Hashable, Hashable] = {}
    stack: List[Hashable] = [start]

    while stack:
        u = stack.pop()
        if u == goal:
            result = reconstruct_path(start, goal, parent)
            logger.debug(f"DFS reached {goal!r} after visiting {len(visited)} vertices")
            return result

        for v in graph.neighbors(u):
            if v not in visited:
                visited.add(v)
                parent[v] = u
                stack.append(v)

    logger.debug(f"DFS exhausted frontier without reaching {goal!r}")
    return PathResult.not_found()
