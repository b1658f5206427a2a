"""
Utility functions for graph algorithms.

Provides helpers for path reconstruction, path weights, node indexing and
adjacency matrices.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .core import Graph, canonical_pair, vertex_key
from .results import NOT_FOUND_COST, PathResult


def reconstruct_path(
    start: Hashable, goal: Hashable, parent: Mapping[Hashable, Hashable]
) -> PathResult:
    """
    Build a PathResult from a child -> parent map produced by a search.

    Walks from goal back to start through parent links and reverses. The
    reported cost is the number of edges on the path; weighted searches
    attach their accumulated weight separately.

    Args:
        start: Search start vertex.
        goal: Search goal vertex.
        parent: Dictionary mapping vertex -> predecessor on the search tree.

    Returns:
        PathResult. If start == goal, a length-1 path with cost 0 regardless
        of the parent map. If goal is not in the parent map, or the parent
        chain never reaches start, PathResult.not_found().

    Example:
        >>> result = reconstruct_path("A", "C", {"B": "A", "C": "B"})
        >>> result.path, result.cost
        (['A', 'B', 'C'], 2)
    """
    if start == goal:
        return PathResult([start], 0, True)

    if goal not in parent:
        return PathResult.not_found()

    path = [goal]
    seen = {goal}
    current = goal
    while current != start:
        if current not in parent:
            return PathResult.not_found()
        current = parent[current]
        # A cycle means the map was not produced by a tree search
        if current in seen:
            return PathResult.not_found()
        seen.add(current)
        path.append(current)

    path.reverse()
    return PathResult(path, len(path) - 1, True)


def path_weight(graph: Graph, path: Sequence[Hashable]) -> float:
    """
    Sum of edge weights along a vertex sequence.

    Each hop uses the cheapest stored arc between consecutive vertices, which
    is the arc a shortest-path search relaxes. Returns +inf when a hop has no
    arc, and 0.0 for paths shorter than two vertices.
    """
    total = 0.0
    for u, v in zip(path, path[1:]):
        weights = [e.weight for e in graph.adj.get(u, ()) if e.target == v]
        if not weights:
            return NOT_FOUND_COST
        total += min(weights)
    return total


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Nodes are sorted by vertex_key for deterministic ordering.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
    """
    sorted_nodes = sorted(set(nodes), key=vertex_key)
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


def adjacency_matrix(
    graph: Graph, order: Optional[Sequence[Hashable]] = None, weighted: bool = False
) -> Tuple[np.ndarray, List[Hashable]]:
    """
    Dense adjacency matrix of a graph.

    Rows are source vertices, columns are targets. Undirected graphs yield
    a symmetric matrix because both mirrored arcs are stored.

    Args:
        graph: Graph to convert.
        order: Vertex order for rows/columns (default: node_index_map order).
        weighted: If False, entries count stored arcs (parallel arcs add up,
            integer dtype). If True, entries hold the weight of the first
            stored arc and NaN where there is none.

    Returns:
        Tuple of (matrix, vertex order).
    """
    if order is None:
        _, order = node_index_map(graph.vertices())
    index = {v: i for i, v in enumerate(order)}
    n = len(order)

    if weighted:
        matrix = np.full((n, n), np.nan, dtype=float)
    else:
        matrix = np.zeros((n, n), dtype=np.int64)

    for u in order:
        i = index[u]
        for edge in graph.edges_from(u):
            j = index[edge.target]
            if weighted:
                if np.isnan(matrix[i, j]):
                    matrix[i, j] = edge.weight
            else:
                matrix[i, j] += 1

    return matrix, list(order)


__all__ = [
    "reconstruct_path",
    "path_weight",
    "node_index_map",
    "adjacency_matrix",
    "canonical_pair",
    "vertex_key",
]
