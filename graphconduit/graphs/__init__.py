"""
Graph algorithms package for graphconduit.

This package provides:
- Graph data structure (Graph, Edge)
- Unweighted traversal (BFS, DFS)
- Weighted and heuristic search (Dijkstra, Greedy Best-First, A*)
- Minimum spanning forest (Kruskal with union-find)
- Eulerian circuits (existence tests, Hierholzer construction)
- Hamiltonian cycles (backtracking)
- Graph isomorphism (degree-signature filtering + backtracking)

Algorithms never mutate the graph and return plain result objects. Ties are
broken deterministically so repeated runs give identical output.
"""

from .core import Edge, Graph, GraphKindError, canonical_pair, vertex_key
from .eulerian import (
    eulerian_circuit,
    has_eulerian_circuit,
    has_eulerian_circuit_directed,
    has_eulerian_circuit_undirected,
)
from .hamiltonian import hamiltonian_cycle
from .heuristic import (
    Heuristic,
    astar,
    euclidean_heuristic,
    greedy_best_first,
    manhattan_heuristic,
    zero_heuristic,
)
from .isomorphism import are_isomorphic, degree_signatures
from .mst import UnionFind, kruskal_mst
from .results import (
    NOT_FOUND_COST,
    EulerianResult,
    IsomorphismResult,
    MSTResult,
    PathResult,
)
from .shortest import dijkstra
from .traversal import bfs, dfs
from .utils import adjacency_matrix, node_index_map, path_weight, reconstruct_path

__all__ = [
    "Graph",
    "Edge",
    "GraphKindError",
    "vertex_key",
    "canonical_pair",
    "PathResult",
    "MSTResult",
    "EulerianResult",
    "IsomorphismResult",
    "NOT_FOUND_COST",
    "bfs",
    "dfs",
    "dijkstra",
    "greedy_best_first",
    "astar",
    "Heuristic",
    "zero_heuristic",
    "euclidean_heuristic",
    "manhattan_heuristic",
    "UnionFind",
    "kruskal_mst",
    "has_eulerian_circuit",
    "has_eulerian_circuit_undirected",
    "has_eulerian_circuit_directed",
    "eulerian_circuit",
    "hamiltonian_cycle",
    "are_isomorphic",
    "degree_signatures",
    "reconstruct_path",
    "path_weight",
    "node_index_map",
    "adjacency_matrix",
]

# Example usage:
# from graphconduit.graphs import Graph, dijkstra
#
# G = Graph(directed=True)
# G.add_edge('A', 'B', 1.0)
# G.add_edge('B', 'C', 2.0)
# result = dijkstra(G, 'A', 'C')
# result.path    # ['A', 'B', 'C']
# result.weight  # 3.0
