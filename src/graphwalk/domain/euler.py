"""Eulerian circuit search — Hierholzer-style single pass.

The traversal follows each vertex's neighbors in insertion order, marks an
edge used in both directions as it crosses it, and emits a vertex once all
of its edges are exhausted (post-order). Reversing the post-order gives the
walk start-to-end.

Feasibility is never checked before the walk starts. On a graph that is not
connected or has odd-degree vertices the finder still terminates, returning
the partial walk it could build; :attr:`EulerianWalk.complete` reports this.
:func:`eulerian_report` is available for callers that want the reason.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import networkx as nx

from graphwalk.domain.graph import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EulerianWalk:
    """Vertex sequence produced by :func:`find_eulerian_circuit`."""

    vertices: tuple[int, ...]
    edge_total: int

    @property
    def edges_traversed(self) -> int:
        return max(0, len(self.vertices) - 1)

    @property
    def closed(self) -> bool:
        return bool(self.vertices) and self.vertices[0] == self.vertices[-1]

    @property
    def complete(self) -> bool:
        """True when the walk is closed and used every inserted edge."""
        return self.closed and self.edges_traversed == self.edge_total


@dataclass(frozen=True)
class EulerianReport:
    """Feasibility facts for an Eulerian circuit on a graph."""

    odd_vertices: list[int] = field(default_factory=list)
    components: int = 0
    isolated: list[int] = field(default_factory=list)
    # Vertex pairs joined by more than one edge. They share a usage flag, so
    # the finder crosses each such pair only once.
    parallel_pairs: list[tuple[int, int]] = field(default_factory=list)

    @property
    def even_degrees(self) -> bool:
        return not self.odd_vertices

    @property
    def connected(self) -> bool:
        """Whether all vertices that carry edges lie in one component."""
        return self.components <= 1

    @property
    def eulerian(self) -> bool:
        return self.even_degrees and self.connected

    def reasons(self) -> list[str]:
        out: list[str] = []
        if self.odd_vertices:
            out.append(f"{len(self.odd_vertices)} vertices have odd degree")
        if not self.connected:
            out.append(f"edges span {self.components} disconnected components")
        if self.parallel_pairs:
            out.append(
                f"{len(self.parallel_pairs)} vertex pairs have parallel edges, "
                "which are walked once per pair"
            )
        return out


def find_eulerian_circuit(graph: Graph, start: int, *, reset: bool = False) -> EulerianWalk:
    """Walk every unused edge reachable from *start*, returning the circuit.

    Consumes ``graph.usage``. The caller must call ``graph.reset_usage()``
    between runs, or pass ``reset=True``; a second run on a spent graph
    returns the single-vertex walk ``(start,)``.

    Uses an explicit frame stack instead of recursion, so the walk length is
    not bounded by the interpreter's recursion limit. Visiting order matches
    the recursive formulation exactly.

    Raises:
        IndexOutOfRangeError: *start* is not a vertex of *graph*.
    """
    graph.check_vertex(start)
    if reset:
        graph.reset_usage()
    elif graph.usage.any():
        logger.debug("Eulerian walk from %d on graph with stale usage flags", start)

    adjacency = graph.adjacency
    usage = graph.usage
    post_order: list[int] = []
    # Each frame is [vertex, index of the next neighbor to try].
    stack: list[list[int]] = [[start, 0]]

    while stack:
        frame = stack[-1]
        v, i = frame
        neighbors = adjacency[v]
        while i < len(neighbors) and usage.is_used(v, neighbors[i]):
            i += 1
        if i < len(neighbors):
            u = neighbors[i]
            frame[1] = i + 1
            usage.mark(v, u)
            stack.append([u, 0])
        else:
            stack.pop()
            post_order.append(v)

    post_order.reverse()
    return EulerianWalk(vertices=tuple(post_order), edge_total=graph.edge_count)


def eulerian_report(graph: Graph) -> EulerianReport:
    """Check even degrees and connectivity of the edge-carrying vertices.

    Also lists vertex pairs with parallel edges, which the finder cannot
    walk in full even when the graph is Eulerian.
    """
    g = graph.to_networkx()
    odd = [v for v, d in g.degree() if d % 2]
    isolated = [v for v, d in g.degree() if d == 0]
    active = g.subgraph([v for v, d in g.degree() if d > 0])
    components = nx.number_connected_components(active) if active.number_of_nodes() else 0
    parallel = sorted(
        {(min(u, v), max(u, v)) for u, v in g.edges() if u != v and g.number_of_edges(u, v) > 1}
    )
    return EulerianReport(
        odd_vertices=odd,
        components=components,
        isolated=isolated,
        parallel_pairs=parallel,
    )
