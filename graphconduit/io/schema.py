"""JSON graph schema definition and validation.

Schema Structure:
    {
        "directed": <bool>,                        # optional, default false
        "vertices": [                              # optional
            {"name": <string>, "x": <number>, "y": <number>},   # x/y optional
            ...
        ],
        "edges": [                                 # optional
            {"from": <string>, "to": <string>, "weight": <number>},  # weight optional
            ...
        ]
    }

Edges may reference vertices that are not listed under "vertices"; they are
created on load.
"""

from __future__ import annotations

from typing import Any


def json_graph_schema() -> dict:
    """
    Return the structural schema (as a Python dict) for the JSON graph format.

    This is a field description, not a full JSON Schema validator.
    """
    return {
        "directed": {
            "type": "bool",
            "description": "Whether edges are one-way arcs",
            "required": False,
            "default": False,
        },
        "vertices": {
            "type": "list",
            "description": "Vertex declarations, optionally with coordinates",
            "required": False,
            "items": {
                "name": {"type": "string", "required": True},
                "x": {"type": "number", "required": False},
                "y": {"type": "number", "required": False},
            },
        },
        "edges": {
            "type": "list",
            "description": "Edge list",
            "required": False,
            "items": {
                "from": {"type": "string", "required": True},
                "to": {"type": "string", "required": True},
                "weight": {"type": "number", "required": False, "default": 1.0},
            },
        },
    }


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_json_graph(obj: Any) -> None:
    """
    Validate a JSON graph object against the schema.

    Parameters
    ----------
    obj : Any
        Decoded JSON document.

    Raises
    ------
    ValueError
        If the object does not conform to the schema.
    """
    if not isinstance(obj, dict):
        raise ValueError("JSON graph must be a dictionary object.")

    if "directed" in obj and not isinstance(obj["directed"], bool):
        raise ValueError("Field 'directed' must be a boolean.")

    vertices = obj.get("vertices", [])
    if not isinstance(vertices, list):
        raise ValueError("Field 'vertices' must be a list.")
    for i, vertex in enumerate(vertices):
        if not isinstance(vertex, dict):
            raise ValueError(f"Vertex at index {i} must be a dictionary object.")
        if not isinstance(vertex.get("name"), str):
            raise ValueError(f"Vertex at index {i} missing string field 'name'.")
        has_x, has_y = "x" in vertex, "y" in vertex
        if has_x != has_y:
            raise ValueError(f"Vertex at index {i}: 'x' and 'y' must be given together.")
        if has_x and not (_is_number(vertex["x"]) and _is_number(vertex["y"])):
            raise ValueError(f"Vertex at index {i}: coordinates must be numbers.")

    edges = obj.get("edges", [])
    if not isinstance(edges, list):
        raise ValueError("Field 'edges' must be a list.")
    for i, edge in enumerate(edges):
        if not isinstance(edge, dict):
            raise ValueError(f"Edge at index {i} must be a dictionary object.")
        for endpoint in ("from", "to"):
            if not isinstance(edge.get(endpoint), str):
                raise ValueError(f"Edge at index {i} missing string field '{endpoint}'.")
        if "weight" in edge and not _is_number(edge["weight"]):
            raise ValueError(
                f"Edge at index {i}: 'weight' must be a number, "
                f"got {type(edge['weight']).__name__}."
            )


__all__ = ["json_graph_schema", "validate_json_graph"]
