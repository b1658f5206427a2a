"""
Minimum spanning forest: Kruskal with union-find.

Every stored arc is viewed as an undirected edge, including arcs of a
directed graph. Self-loops are ignored. A disconnected graph produces a
minimum spanning forest.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 21.3 (disjoint-set forests) and 23.2 (Kruskal).
"""

from typing import Dict, Hashable, Iterable, List, Tuple

from ..logging import get_logger
from .core import Graph, canonical_pair, vertex_key
from .results import MSTResult

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by rank.

    Used by Kruskal's algorithm for efficient cycle detection.
    """

    def __init__(self, nodes: Iterable[Hashable]):
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

        for node in nodes:
            self.parent[node] = node
            self.rank[node] = 0

    def find(self, x: Hashable) -> Hashable:
        """Find root of x with path compression."""
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Union sets containing x and y using union by rank.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True


def _sorted_canonical_edges(graph: Graph) -> List[Tuple[Hashable, Hashable, float]]:
    """Canonical undirected edges, sorted by (weight, u, v) with exact repeats removed."""
    candidates = []
    for u in graph.vertices():
        for edge in graph.edges_from(u):
            if edge.target == u:
                continue
            a, b = canonical_pair(u, edge.target)
            candidates.append((a, b, edge.weight))

    candidates.sort(key=lambda e: (e[2], vertex_key(e[0]), vertex_key(e[1])))

    unique: List[Tuple[Hashable, Hashable, float]] = []
    for candidate in candidates:
        if not unique or unique[-1] != candidate:
            unique.append(candidate)
    return unique


def kruskal_mst(graph: Graph) -> MSTResult:
    """
    Kruskal's algorithm for a minimum spanning forest.

    Edges are scanned in ascending (weight, u, v) order, the vertex tie-break
    making the chosen tree reproducible on equal weights. An edge is accepted
    iff its endpoints lie in different components.

    Args:
        graph: Graph (directed graphs are treated as undirected).

    Returns:
        MSTResult with accepted edges in acceptance order and their total
        weight. The edge count is |V| minus the number of components.

    Complexity: O(E log E).

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B', 2.0)
        >>> G.add_edge('B', 'C', 3.0)
        >>> G.add_edge('C', 'A', 1.0)
        >>> kruskal_mst(G).total_weight
        3.0
    """
    uf = UnionFind(graph.vertices())
    result = MSTResult()

    for u, v, weight in _sorted_canonical_edges(graph):
        if uf.union(u, v):
            result.edges.append((u, v, weight))
            result.total_weight += weight

    logger.debug(
        f"Kruskal accepted {len(result.edges)} edges over {len(graph)} vertices "
        f"(total weight {result.total_weight})"
    )
    return result
