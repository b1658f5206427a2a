"""Human-readable and JSON rendering of graphs and algorithm results."""

from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from ..graphs import (
    EulerianResult,
    Graph,
    IsomorphismResult,
    MSTResult,
    PathResult,
    adjacency_matrix,
    path_weight,
)


def _finite_or_none(value: Optional[float]) -> Optional[float]:
    if value is None or math.isinf(value) or math.isnan(value):
        return None
    return value


def to_json(obj: Any) -> str:
    """Serialize a report dict; non-JSON vertex identifiers are written with str."""
    return json.dumps(obj, indent=2, default=str, ensure_ascii=False)


def path_result_to_dict(
    algorithm: str,
    result: PathResult,
    graph: Optional[Graph] = None,
    include_weighted: bool = False,
) -> Dict[str, Any]:
    """
    Dictionary form of a path search outcome.

    ``weighted_cost`` is added when the result carries a weight or when
    ``include_weighted`` is set and a graph is supplied.
    """
    data: Dict[str, Any] = {"algorithm": algorithm}
    data.update(result.to_dict())
    weight = result.weight
    if weight is None and include_weighted and graph is not None and result.found:
        weight = path_weight(graph, result.path)
    if weight is not None or include_weighted:
        data["weighted_cost"] = _finite_or_none(weight) if result.found else None
    data.pop("weight", None)
    return data


def format_path_result(
    algorithm: str,
    result: PathResult,
    graph: Optional[Graph] = None,
    include_weighted: bool = False,
) -> str:
    """Multi-line text report of a path search outcome."""
    data = path_result_to_dict(algorithm, result, graph, include_weighted)
    lines = [
        f"Algorithm: {algorithm.upper()}",
        f"Found:     {result.found}",
        f"Path:      {' -> '.join(map(str, result.path)) if result.path else '-'}",
        f"Edges:     {result.cost if result.found else '-'}",
    ]
    if "weighted_cost" in data:
        weighted = data["weighted_cost"]
        lines.append(f"Weighted:  {weighted if weighted is not None else '-'}")
    if result.negative_weights:
        lines.append("Warning:   negative edge weights seen; result may be sub-optimal")
    return "\n".join(lines)


def mst_to_dict(result: MSTResult) -> Dict[str, Any]:
    data: Dict[str, Any] = {"algorithm": "kruskal"}
    data.update(result.to_dict())
    return data


def format_mst(result: MSTResult) -> str:
    """Text report of a minimum spanning forest."""
    lines = ["Algorithm: MST (Kruskal)", "Edges:"]
    lines.extend(f"  {u} -- {v}  (w={w:g})" for u, v, w in result.edges)
    lines.append(f"Total: {result.total_weight:g}")
    return "\n".join(lines)


def eulerian_to_dict(result: EulerianResult) -> Dict[str, Any]:
    data: Dict[str, Any] = {"algorithm": "eulerian"}
    data.update(result.to_dict())
    return data


def format_eulerian(result: EulerianResult) -> str:
    """Text report of an Eulerian circuit search."""
    circuit = " -> ".join(map(str, result.circuit)) if result.circuit else "-"
    return "\n".join(
        ["Algorithm: EULERIAN", f"Exists:    {result.exists}", f"Circuit:   {circuit}"]
    )


def hamiltonian_to_dict(cycle: Sequence[Any]) -> Dict[str, Any]:
    return {"algorithm": "hamiltonian", "found": bool(cycle), "cycle": list(cycle)}


def format_hamiltonian(cycle: Sequence[Any]) -> str:
    """Text report of a Hamiltonian cycle search."""
    return "\n".join(
        [
            "Algorithm: HAMILTONIAN",
            f"Found:     {bool(cycle)}",
            f"Cycle:     {' -> '.join(map(str, cycle)) if cycle else '-'}",
        ]
    )


def isomorphism_to_dict(result: IsomorphismResult) -> Dict[str, Any]:
    data: Dict[str, Any] = {"algorithm": "isomorphism"}
    data.update(result.to_dict())
    return data


def format_isomorphism(result: IsomorphismResult) -> str:
    """Text report of an isomorphism test."""
    lines = ["Algorithm: ISOMORPHISM", f"Isomorphic: {result.isomorphic}"]
    if result.mapping:
        lines.append("Mapping:")
        lines.extend(f"  {u} -> {v}" for u, v in result.mapping.items())
    return "\n".join(lines)


def graph_overview_to_dict(graph: Graph) -> Dict[str, Any]:
    return {
        "directed": graph.directed,
        "vertices": len(graph),
        "edges": graph.edge_count(),
    }


def format_graph_overview(graph: Graph) -> str:
    """Graph kind plus vertex and edge counts."""
    lines = [
        f"Graph: {'DIRECTED' if graph.directed else 'UNDIRECTED'}",
        f"Vertices: {len(graph)}",
        f"Edges:    {graph.edge_count()}",
    ]
    if not graph.directed:
        lines.append(f"Max degree: {graph.max_degree()}")
    return "\n".join(lines)


def format_adjacency_list(graph: Graph, show_weights: bool = True) -> str:
    """One line per vertex listing its outgoing arcs in insertion order."""
    arrow = "->" if graph.directed else "--"
    lines = ["Adjacency List:"]
    for u in graph.vertices():
        parts: List[str] = []
        for edge in graph.edges_from(u):
            if show_weights:
                parts.append(f"{arrow}{edge.target}(w={edge.weight:g})")
            else:
                parts.append(f"{arrow}{edge.target}")
        lines.append(f"  {u} {' '.join(parts)}".rstrip())
    return "\n".join(lines)


def format_adjacency_matrix(graph: Graph, show_weights: bool = True, width: int = 5) -> str:
    """
    Adjacency matrix with vertices in vertex_key order.

    Rows are FROM, columns are TO. Cells show the weight of the first stored
    arc (or 1 when weights are hidden) and ``.`` where there is no arc.
    """
    matrix, order = adjacency_matrix(graph, weighted=True)
    labels = [str(v) for v in order]

    lines = ["Adjacency Matrix:", " " * 5 + "".join(label.rjust(width) for label in labels)]
    for i, label in enumerate(labels):
        cells = []
        for value in matrix[i]:
            if np.isnan(value):
                cells.append(".".rjust(width))
            elif show_weights:
                cells.append(f"{value:.2f}".rstrip("0").rstrip(".").rjust(width))
            else:
                cells.append("1".rjust(width))
        lines.append(label.ljust(4) + " " + "".join(cells))
    lines.append(
        "rows are FROM, columns are TO" if graph.directed else "Undirected matrix (symmetric)."
    )
    return "\n".join(lines)


__all__ = [
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
