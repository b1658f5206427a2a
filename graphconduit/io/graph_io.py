"""JSON and CSV import/export for graphs.

Loaders return ``(graph, coords)`` where ``coords`` maps vertex name to an
``(x, y)`` pair for vertices that declare coordinates (JSON only). The
coordinates feed the geometric heuristics of A* and Best-First search.
"""

from __future__ import annotations

import csv
import json
import math
import os
from typing import Dict, Optional, Tuple

from ..graphs import Graph
from ..logging import get_logger
from .schema import validate_json_graph

logger = get_logger(__name__)

Coords = Dict[str, Tuple[float, float]]


def json_to_graph(obj: dict) -> Tuple[Graph, Coords]:
    """
    Convert a JSON graph object to a Graph.

    Parameters
    ----------
    obj : dict
        Decoded document following the format in schema.py.

    Returns
    -------
    tuple
        ``(graph, coords)``.

    Raises
    ------
    ValueError
        If the object is invalid.
    """
    validate_json_graph(obj)

    graph = Graph(directed=obj.get("directed", False))
    coords: Coords = {}

    for vertex in obj.get("vertices", []):
        name = vertex["name"]
        graph.add_vertex(name)
        if "x" in vertex:
            coords[name] = (float(vertex["x"]), float(vertex["y"]))

    for edge in obj.get("edges", []):
        graph.add_edge(edge["from"], edge["to"], float(edge.get("weight", 1.0)))

    return graph, coords


def graph_to_json(graph: Graph, coords: Optional[Coords] = None) -> dict:
    """
    Convert a Graph to the JSON graph format.

    Undirected edges are written once each. Vertex identifiers are written
    with ``str``.
    """
    coords = coords or {}
    vertices = []
    for v in graph.vertices():
        entry: dict = {"name": str(v)}
        if v in coords:
            entry["x"], entry["y"] = coords[v]
        vertices.append(entry)

    return {
        "directed": graph.directed,
        "vertices": vertices,
        "edges": [
            {"from": str(u), "to": str(v), "weight": w} for u, v, w in graph.edges()
        ],
    }


def load_json_graph(path: str, directed: Optional[bool] = None) -> Tuple[Graph, Coords]:
    """
    Load a graph from a JSON file.

    ``directed``, when given, overrides the document's own flag.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not valid JSON or violates the schema.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Graph file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in file {path}: {e}")

    if directed is not None and isinstance(obj, dict):
        obj["directed"] = directed
    return json_to_graph(obj)


def load_csv_graph(path: str, directed: bool = False) -> Tuple[Graph, Coords]:
    """
    Load a graph from a CSV edge list.

    The header must contain ``from`` and ``to`` columns and may contain a
    ``weight`` column (case-insensitive, any order). Blank rows are skipped;
    a missing or unparsable weight defaults to 1.0. CSV carries no
    directedness, so the caller decides.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is empty or the header lacks ``from``/``to``.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
    except FileNotFoundError:
        raise FileNotFoundError(f"Graph file not found: {path}")

    if not rows:
        raise ValueError(f"Empty CSV file: {path}")

    columns = [c.strip().lower() for c in rows[0]]
    if "from" not in columns or "to" not in columns:
        raise ValueError("CSV must have a 'from,to[,weight]' header.")
    idx_from = columns.index("from")
    idx_to = columns.index("to")
    idx_weight = columns.index("weight") if "weight" in columns else None

    graph = Graph(directed=directed)
    for line_no, row in enumerate(rows[1:], start=2):
        if not row or all(not cell.strip() for cell in row):
            continue
        if len(row) <= max(idx_from, idx_to):
            raise ValueError(f"{path}:{line_no}: expected 'from' and 'to' columns.")

        weight = 1.0
        if idx_weight is not None and idx_weight < len(row) and row[idx_weight].strip():
            try:
                weight = float(row[idx_weight])
            except ValueError:
                logger.warning(f"{path}:{line_no}: unparsable weight {row[idx_weight]!r}, using 1.0")
            if math.isnan(weight):
                weight = 1.0

        graph.add_edge(row[idx_from].strip(), row[idx_to].strip(), weight)

    return graph, {}


def load_graph(path: str, directed: Optional[bool] = None) -> Tuple[Graph, Coords]:
    """
    Load a graph, choosing the format from the file extension.

    Parameters
    ----------
    path : str
        ``.json`` or ``.csv`` file.
    directed : bool, optional
        Directedness for CSV input (default undirected). For JSON input the
        document's own flag wins unless this is given explicitly.

    Raises
    ------
    ValueError
        For unsupported extensions or invalid content.
    FileNotFoundError
        If the file does not exist.
    """
    ext = os.path.splitext(path)[1].lower()
    if ext == ".json":
        graph, coords = load_json_graph(path, directed=directed)
    elif ext == ".csv":
        graph, coords = load_csv_graph(path, directed=bool(directed))
    else:
        raise ValueError(f"Unsupported file type {ext!r}. Use .json or .csv")

    logger.info(
        f"Loaded {'directed' if graph.directed else 'undirected'} graph from {path}: "
        f"{len(graph)} vertices, {graph.edge_count()} edges"
    )
    return graph, coords


def dump_json_graph(graph: Graph, path: str, coords: Optional[Coords] = None) -> None:
    """Write a graph to a JSON file."""
    obj = graph_to_json(graph, coords)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)


__all__ = [
    "json_to_graph",
    "graph_to_json",
    "load_json_graph",
    "load_csv_graph",
    "load_graph",
    "dump_json_graph",
]
