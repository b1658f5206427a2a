"""
Hamiltonian cycle search by backtracking.

Worst-case exponential. Callers should bound the input size; there is no
timeout or cancellation.
"""

from typing import Dict, Hashable, List, Set

from ..logging import get_logger
from .core import Graph

logger = get_logger(__name__)


def hamiltonian_cycle(graph: Graph, order_by_degree: bool = True) -> List[Hashable]:
    """
    Find a Hamiltonian cycle with depth-first backtracking.

    The search starts from the first inserted vertex, extends the path with
    unused neighbors and, once every vertex is on the path, needs an arc
    from the last vertex back to the start. Dead ends undo the last
    extension and try the next candidate.

    Args:
        graph: Directed or undirected graph.
        order_by_degree: Try candidates with larger (in + out) degree first.
            Only affects search time, never correctness.

    Returns:
        The first cycle found as a vertex list that repeats the start at the
        end (length |V| + 1), or an empty list if none exists. Any vertex
        without outgoing arcs rejects immediately.

    Example:
        >>> G = Graph()
        >>> for u, v in [('A', 'B'), ('B', 'C'), ('C', 'D'), ('D', 'A')]:
        ...     G.add_edge(u, v)
        >>> hamiltonian_cycle(G)
        ['A', 'B', 'C', 'D', 'A']
    """
    vertices = graph.vertices()
    if not vertices:
        return []

    out_degree: Dict[Hashable, int] = {v: graph.out_degree(v) for v in vertices}
    if any(d == 0 for d in out_degree.values()):
        logger.debug("Hamiltonian search skipped: a vertex has no outgoing arcs")
        return []

    combined: Dict[Hashable, int] = dict(out_degree)
    for u in vertices:
        for v in graph.neighbors(u):
            combined[v] += 1

    start = vertices[0]
    path: List[Hashable] = [start]
    used: Set[Hashable] = {start}

    def candidates(u: Hashable) -> List[Hashable]:
        options = [v for v in dict.fromkeys(graph.neighbors(u)) if v not in used]
        if order_by_degree:
            options.sort(key=lambda v: -combined[v])
        return options

    def extend(u: Hashable) -> bool:
        if len(path) == len(vertices):
            return graph.has_edge(u, start)

        for v in candidates(u):
            used.add(v)
            path.append(v)
            if extend(v):
                return True
            path.pop()
            used.remove(v)
        return False

    if not extend(start):
        logger.debug("Hamiltonian search exhausted without a cycle")
        return []

    return path + [start]
