"""
Result objects returned by the graph algorithms.

Every result is a plain value created once per call. ``to_dict`` returns a
JSON-compatible structure for printing or persistence; vertex identifiers
are passed through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

NOT_FOUND_COST = float("inf")


@dataclass
class PathResult:
    """
    Outcome of a single start -> goal search.

    Attributes:
        path: Vertices from start to goal inclusive (empty if not found).
        cost: Number of edges on the path, or NOT_FOUND_COST.
        found: Whether a path was found.
        weight: Accumulated edge weight for weighted searches, None for
            unweighted traversals.
        negative_weights: True if a negative edge weight was traversed
            during a Dijkstra/A* run; the answer may then be sub-optimal.

    Invariants:
        - found is False  =>  path == [] and cost == NOT_FOUND_COST
        - found is True and len(path) == 1  =>  cost == 0
    """

    path: List[Hashable]
    cost: float
    found: bool
    weight: Optional[float] = None
    negative_weights: bool = False

    @classmethod
    def not_found(cls, weighted: bool = False) -> "PathResult":
        """Return the canonical negative result."""
        return cls([], NOT_FOUND_COST, False, NOT_FOUND_COST if weighted else None)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "path": list(self.path),
            "cost": self.cost if self.found else None,
            "found": self.found,
        }
        if self.weight is not None:
            data["weight"] = self.weight if self.found else None
        if self.negative_weights:
            data["negative_weights"] = True
        return data


@dataclass
class MSTResult:
    """
    Minimum spanning forest.

    A disconnected input yields one tree per component; callers must not
    assume the edges span every vertex.
    """

    edges: List[Tuple[Hashable, Hashable, float]] = field(default_factory=list)
    total_weight: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "edges": [{"from": u, "to": v, "weight": w} for u, v, w in self.edges],
            "total_weight": self.total_weight,
        }


@dataclass
class EulerianResult:
    """Existence flag plus the circuit (closed walk, first == last) when one exists."""

    exists: bool
    circuit: List[Hashable] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"exists": self.exists, "circuit": list(self.circuit)}


@dataclass
class IsomorphismResult:
    """Isomorphism verdict and a vertex bijection from the first graph to the second."""

    isomorphic: bool
    mapping: Dict[Hashable, Hashable] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isomorphic": self.isomorphic,
            "mapping": [{"from": u, "to": v} for u, v in self.mapping.items()],
        }


__all__ = [
    "NOT_FOUND_COST",
    "PathResult",
    "MSTResult",
    "EulerianResult",
    "IsomorphismResult",
]
