"""
Eulerian circuits: existence tests and Hierholzer construction.

Degrees in the existence tests are the stored-arc degrees of the graph
model, so a self-loop counts once towards an undirected degree and once
towards both in- and out-degree of a directed vertex. Construction only
consumes non-loop edges; loops never appear in a circuit. Undirected edges
are counted once per mirrored pair; parallel edges keep their multiplicity
and are each traversed exactly once.

When several unused edges leave the current vertex, Hierholzer takes the
neighbor that is smallest by vertex_key, which makes circuits reproducible.

References:
    - Hierholzer, Wiener. "Ueber die Moeglichkeit, einen Linienzug ohne
      Wiederholung und ohne Unterbrechung zu umfahren", Math. Ann. 6, 1873.
"""

from collections import Counter
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Set, Tuple

from ..logging import get_logger
from .core import Graph, GraphKindError, canonical_pair, vertex_key
from .results import EulerianResult

logger = get_logger(__name__)


def _reachable(start: Hashable, successors: Dict[Hashable, List[Hashable]]) -> Set[Hashable]:
    seen = {start}
    stack = [start]
    while stack:
        u = stack.pop()
        for v in successors.get(u, ()):
            if v not in seen:
                seen.add(v)
                stack.append(v)
    return seen


def _successors(graph: Graph) -> Dict[Hashable, List[Hashable]]:
    return {u: graph.neighbors(u) for u in graph.vertices()}


def has_eulerian_circuit_undirected(graph: Graph) -> bool:
    """
    Test whether an undirected graph has an Eulerian circuit.

    True iff every vertex with non-zero degree has even degree and all such
    vertices are mutually reachable. A graph without edges is vacuously
    Eulerian.

    Raises:
        GraphKindError: If the graph is directed.
    """
    if graph.directed:
        raise GraphKindError("Use has_eulerian_circuit_directed for directed graphs.")

    successors = _successors(graph)
    active = [v for v, nbrs in successors.items() if nbrs]
    if not active:
        return True

    if any(len(successors[v]) % 2 for v in active):
        return False

    return len(_reachable(active[0], successors)) == len(active)


def has_eulerian_circuit_directed(graph: Graph) -> bool:
    """
    Test whether a directed graph has an Eulerian circuit.

    True iff every vertex with non-zero total degree has in-degree equal to
    out-degree and those vertices form one strongly connected component.

    Raises:
        GraphKindError: If the graph is undirected.
    """
    if not graph.directed:
        raise GraphKindError("Use has_eulerian_circuit_undirected for undirected graphs.")

    successors = _successors(graph)
    predecessors: Dict[Hashable, List[Hashable]] = {v: [] for v in successors}
    for u, nbrs in successors.items():
        for v in nbrs:
            predecessors[v].append(u)

    active = [v for v in successors if successors[v] or predecessors[v]]
    if not active:
        return True

    if any(len(successors[v]) != len(predecessors[v]) for v in active):
        return False

    # Strongly connected iff everything is reachable from one vertex both
    # forwards and in the transposed graph.
    root = active[0]
    if len(_reachable(root, successors)) != len(active):
        return False
    return len(_reachable(root, predecessors)) == len(active)


def has_eulerian_circuit(graph: Graph) -> bool:
    """Dispatch to the directed or undirected existence test."""
    if graph.directed:
        return has_eulerian_circuit_directed(graph)
    return has_eulerian_circuit_undirected(graph)


def _hierholzer(
    order: Iterable[Hashable],
    neighbors: Dict[Hashable, List[Hashable]],
    remaining: Counter,
    key: Callable[[Hashable, Hashable], Tuple[Hashable, Hashable]],
) -> List[Hashable]:
    """Consume every unit of ``remaining`` exactly once and return the closed walk."""
    cursor = {v: 0 for v in neighbors}

    def next_available(u: Hashable) -> Optional[Hashable]:
        options = neighbors[u]
        i = cursor[u]
        while i < len(options) and remaining[key(u, options[i])] == 0:
            i += 1
        cursor[u] = i
        return options[i] if i < len(options) else None

    start = next((v for v in order if next_available(v) is not None), None)
    if start is None:
        return []

    stack: List[Hashable] = []
    circuit: List[Hashable] = []
    current = start

    while True:
        nxt = next_available(current)
        if nxt is not None:
            stack.append(current)
            remaining[key(current, nxt)] -= 1
            current = nxt
        elif stack:
            circuit.append(current)
            current = stack.pop()
        else:
            break

    circuit.append(current)
    circuit.reverse()
    return circuit


def _arc(u: Hashable, v: Hashable) -> Tuple[Hashable, Hashable]:
    return (u, v)


def _build_circuit(graph: Graph) -> List[Hashable]:
    remaining: Counter = Counter()
    for u in graph.vertices():
        for v in graph.neighbors(u):
            if u == v:
                continue
            remaining[(u, v) if graph.directed else canonical_pair(u, v)] += 1

    key: Callable[[Hashable, Hashable], Tuple[Hashable, Hashable]] = _arc
    if not graph.directed:
        # Each undirected edge was counted from both endpoints
        for pair in remaining:
            remaining[pair] //= 2
        key = canonical_pair

    neighbors = {
        u: sorted({v for v in graph.neighbors(u) if v != u}, key=vertex_key)
        for u in graph.vertices()
    }
    return _hierholzer(graph.vertices(), neighbors, remaining, key)


def eulerian_circuit(graph: Graph) -> EulerianResult:
    """
    Test for and construct an Eulerian circuit (Hierholzer's algorithm).

    Args:
        graph: Directed or undirected graph.

    Returns:
        EulerianResult. When a circuit exists it starts and ends at the first
        vertex (insertion order) that has a non-loop edge and contains
        non-loop edge count + 1 vertices. Self-loops take part in the
        degree and connectivity tests but are never walked, so a graph
        whose only edges are loops can report exists=True with an empty
        circuit.

    Complexity: O(V + E log E) including neighbor sorting.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B'); G.add_edge('B', 'C'); G.add_edge('C', 'A')
        >>> eulerian_circuit(G).circuit
        ['A', 'B', 'C', 'A']
    """
    if not has_eulerian_circuit(graph):
        logger.debug("No Eulerian circuit: degree or connectivity condition fails")
        return EulerianResult(False, [])

    circuit = _build_circuit(graph)
    logger.debug(f"Hierholzer produced a circuit of {len(circuit)} vertices")
    return EulerianResult(True, circuit)


__all__ = [
    "has_eulerian_circuit",
    "has_eulerian_circuit_undirected",
    "has_eulerian_circuit_directed",
    "eulerian_circuit",
]
