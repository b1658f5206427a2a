"""Graph Conduit - classic graph algorithms with a command line front end."""

__version__ = "0.1.0"

# Graph model and algorithms
from .graphs import (
    NOT_FOUND_COST,
    Edge,
    EulerianResult,
    Graph,
    GraphKindError,
    IsomorphismResult,
    MSTResult,
    PathResult,
    UnionFind,
    are_isomorphic,
    astar,
    bfs,
    canonical_pair,
    degree_signatures,
    dfs,
    dijkstra,
    euclidean_heuristic,
    eulerian_circuit,
    greedy_best_first,
    hamiltonian_cycle,
    has_eulerian_circuit,
    has_eulerian_circuit_directed,
    has_eulerian_circuit_undirected,
    kruskal_mst,
    manhattan_heuristic,
    vertex_key,
    zero_heuristic,
)

# Import / export
from .io import dump_json_graph, load_csv_graph, load_graph, load_json_graph

# Configuration and logging
from .config import SessionConfig
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
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
    "load_graph",
    "load_json_graph",
    "load_csv_graph",
    "dump_json_graph",
    "SessionConfig",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
