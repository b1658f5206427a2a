"""
Core graph data structure.

Provides a weighted Graph with an adjacency-list representation that can be
directed or undirected. Undirected edges are stored as two mirrored arcs
(u -> v and v -> u, same weight), except self-loops which are stored once.
Every algorithm in this package accounts for that symmetric storage.

Vertices keep their insertion order and neighbors keep adjacency insertion
order, so traversals are reproducible run to run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

Vertex = Hashable


def vertex_key(vertex: Vertex) -> Tuple[str, str]:
    """Total-order key for vertex identifiers: string form, then type name."""
    return (str(vertex), type(vertex).__name__)


def canonical_pair(u: Vertex, v: Vertex) -> Tuple[Any, Any]:
    """Order-independent key for an undirected edge between u and v."""
    return (u, v) if vertex_key(u) <= vertex_key(v) else (v, u)


class GraphKindError(ValueError):
    """Raised when a directed-only or undirected-only query hits the wrong graph kind."""


@dataclass(frozen=True)
class Edge:
    """Outgoing arc: target vertex plus weight (may be negative)."""

    target: Vertex
    weight: float = 1.0


@dataclass
class Graph:
    """
    Weighted graph with adjacency-list representation.

    Attributes:
        directed: If True, graph is directed; otherwise undirected. Fixed at
            construction.
        adj: Adjacency list mapping vertex -> list of outgoing Edge objects.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(1) amortized
        - neighbors / out_degree: O(deg(v))
        - in_degree: O(V + E)
        - edge_count: O(V + E)

    Example:
        >>> G = Graph()
        >>> G.add_edge("A", "B", 2.0)
        >>> G.neighbors("B")
        ['A']
        >>> G.edge_count()
        1
    """

    directed: bool = False
    adj: Dict[Vertex, List[Edge]] = field(default_factory=dict)

    def add_vertex(self, vertex: Vertex) -> None:
        """Add a vertex. Adding an existing vertex is a no-op."""
        if vertex not in self.adj:
            self.adj[vertex] = []

    def add_edge(self, u: Vertex, v: Vertex, weight: float = 1.0) -> None:
        """
        Add a weighted edge from u to v, creating missing endpoints.

        For undirected graphs the mirrored arc v -> u is stored too, unless
        the edge is a self-loop. Parallel edges are kept.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Edge weight (default 1.0). Negative weights are accepted.
        """
        self.add_vertex(u)
        self.add_vertex(v)
        weight = float(weight)
        self.adj[u].append(Edge(v, weight))
        if not self.directed and u != v:
            self.adj[v].append(Edge(u, weight))

    def vertices(self) -> List[Vertex]:
        """Return all vertices in insertion order."""
        return list(self.adj)

    def _require(self, vertex: Vertex) -> List[Edge]:
        if vertex not in self.adj:
            raise KeyError(f"Vertex {vertex!r} not in graph")
        return self.adj[vertex]

    def edges_from(self, vertex: Vertex) -> List[Edge]:
        """
        Return the outgoing edges of a vertex in insertion order.

        Raises:
            KeyError: If vertex is not in graph.
        """
        return list(self._require(vertex))

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        """
        Return target vertices of outgoing edges in adjacency insertion order.

        Parallel edges yield repeated neighbors.

        Raises:
            KeyError: If vertex is not in graph.
        """
        return [edge.target for edge in self._require(vertex)]

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        """Return True if an arc u -> v is stored."""
        return any(edge.target == v for edge in self.adj.get(u, ()))

    def weight(self, u: Vertex, v: Vertex) -> Optional[float]:
        """Return the weight of the first stored arc u -> v, or None."""
        for edge in self.adj.get(u, ()):
            if edge.target == v:
                return edge.weight
        return None

    def out_degree(self, vertex: Vertex) -> int:
        """Number of stored outgoing arcs of vertex."""
        return len(self._require(vertex))

    def in_degree(self, vertex: Vertex) -> int:
        """Number of stored arcs ending at vertex."""
        self._require(vertex)
        return sum(
            1 for edges in self.adj.values() for edge in edges if edge.target == vertex
        )

    def degree(self, vertex: Vertex) -> int:
        """
        Degree of a vertex in an undirected graph (a self-loop counts once).

        Raises:
            GraphKindError: If the graph is directed; use in_degree/out_degree.
            KeyError: If vertex is not in graph.
        """
        if self.directed:
            raise GraphKindError("Use in_degree/out_degree for directed graphs.")
        return len(self._require(vertex))

    def max_degree(self) -> int:
        """
        Maximum vertex degree of an undirected graph (0 for an empty graph).

        Raises:
            GraphKindError: If the graph is directed.
        """
        if self.directed:
            raise GraphKindError(
                "max_degree is defined for undirected graphs; use in/out degrees."
            )
        return max((len(edges) for edges in self.adj.values()), default=0)

    def loop_count(self) -> int:
        """Number of stored self-loops."""
        return sum(
            1 for u, edges in self.adj.items() for edge in edges if edge.target == u
        )

    def edge_count(self) -> int:
        """
        Number of edges.

        Directed graphs count arcs. Undirected graphs count each mirrored
        pair once and each self-loop once.
        """
        arcs = sum(len(edges) for edges in self.adj.values())
        if self.directed:
            return arcs
        loops = self.loop_count()
        return (arcs - loops) // 2 + loops

    def edges(self) -> List[Tuple[Vertex, Vertex, float]]:
        """
        Return all edges as (u, v, weight) tuples.

        Directed graphs list every arc. Undirected graphs list each edge once
        in canonical orientation (see canonical_pair); parallel edges appear
        once per parallel copy.
        """
        if self.directed:
            return [(u, e.target, e.weight) for u, edges in self.adj.items() for e in edges]

        result: List[Tuple[Vertex, Vertex, float]] = []
        for u, edges in self.adj.items():
            for e in edges:
                if u == e.target or canonical_pair(u, e.target) == (u, e.target):
                    result.append((u, e.target, e.weight))
        return result

    def has_negative_weights(self) -> bool:
        """Return True if any stored edge weight is negative."""
        return any(edge.weight < 0 for edges in self.adj.values() for edge in edges)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.adj

    def __len__(self) -> int:
        return len(self.adj)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.adj)
