"""I/O modules: JSON/CSV graph import/export and result reporting."""

from .graph_io import (
    dump_json_graph,
    graph_to_json,
    json_to_graph,
    load_csv_graph,
    load_graph,
    load_json_graph,
)
from .report import (
    eulerian_to_dict,
    format_adjacency_list,
    format_adjacency_matrix,
    format_eulerian,
    format_graph_overview,
    format_hamiltonian,
    format_isomorphism,
    format_mst,
    format_path_result,
    graph_overview_to_dict,
    hamiltonian_to_dict,
    isomorphism_to_dict,
    mst_to_dict,
    path_result_to_dict,
    to_json,
)
from .schema import json_graph_schema, validate_json_graph

__all__ = [
    "load_graph",
    "load_json_graph",
    "load_csv_graph",
    "json_to_graph",
    "graph_to_json",
    "dump_json_graph",
    "json_graph_schema",
    "validate_json_graph",
    "to_json",
    "path_result_to_dict",
    "format_path_result",
    "mst_to_dict",
    "format_mst",
    "eulerian_to_dict",
    "format_eulerian",
    "hamiltonian_to_dict",
    "format_hamiltonian",
    "isomorphism_to_dict",
    "format_isomorphism",
    "graph_overview_to_dict",
    "format_graph_overview",
    "format_adjacency_list",
    "format_adjacency_matrix",
]
