"""CircuitService — Eulerian and Hamiltonian circuit searches on one graph.

Both searches run on the same Graph instance. The Eulerian search resets
the graph's usage flags before walking, so repeated calls are
independent. Vertex indices in results are zero-based.
"""

from __future__ import annotations

from typing import Any

import networkx as nx

from graphwalk.domain.errors import GraphError
from graphwalk.domain.euler import eulerian_report, find_eulerian_circuit
from graphwalk.domain.graph import Graph
from graphwalk.domain.hamilton import find_hamiltonian_circuit
from graphwalk.services.base import BaseService
from graphwalk.services.result import ServiceResult
from graphwalk.services.telemetry import trace_span, traced


class CircuitService(BaseService):
    """Runs circuit searches and structural inspection for a Graph."""

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    # ------------------------------------------------------------------
    # euler — Hierholzer walk
    # ------------------------------------------------------------------

    @traced
    def euler(self, start: int = 0) -> ServiceResult:
        """Find an Eulerian circuit from *start*.

        A partial walk (graph not Eulerian, or *start* does not reach every
        edge) is still ``ok``; it carries ``complete=False`` and a warning.
        """
        g = self._graph
        try:
            with trace_span("eulerian_walk") as span:
                walk = find_eulerian_circuit(g, start, reset=True)
                if span:
                    span.annotate("edges", walk.edges_traversed)
        except GraphError as exc:
            return self._failure("euler", exc)

        data: dict[str, Any] = {
            "start": start,
            "circuit": list(walk.vertices),
            "closed": walk.closed,
            "complete": walk.complete,
            "edges_traversed": walk.edges_traversed,
            "edge_count": walk.edge_total,
        }
        warnings: list[str] = []
        if not walk.complete:
            reasons = eulerian_report(g).reasons() or [
                f"vertex {start} does not reach every edge"
            ]
            data["reasons"] = reasons
            warnings.append(
                f"Partial walk: {walk.edges_traversed} of {walk.edge_total} edges "
                f"({'; '.join(reasons)})"
            )
        return ServiceResult(ok=True, op="euler", data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # hamilton — backtracking search
    # ------------------------------------------------------------------

    @traced
    def hamilton(self, start: int = 0, *, max_steps: int | None = None) -> ServiceResult:
        """Search for a Hamiltonian circuit from *start*.

        Not finding a cycle is a normal outcome (``found=False``). Running
        out of *max_steps* is a failure with code ``SEARCH_LIMIT``.
        """
        try:
            with trace_span("backtracking_search") as span:
                result = find_hamiltonian_circuit(self._graph, start, max_steps=max_steps)
                if span:
                    span.annotate("steps", result.steps)
        except GraphError as exc:
            return self._failure("hamilton", exc, start=start)

        return ServiceResult(
            ok=True,
            op="hamilton",
            data={
                "start": start,
                "found": result.found,
                "path": list(result.path),
                "steps": result.steps,
                "vertex_count": self._graph.vertex_count,
            },
        )

    # ------------------------------------------------------------------
    # inspect — degree and connectivity summary
    # ------------------------------------------------------------------

    @traced
    def inspect(self) -> ServiceResult:
        """Summarize degrees, connectivity, and circuit feasibility."""
        g = self._graph
        n = g.vertex_count
        degrees = [len(neighbors) for neighbors in g.adjacency]
        report = eulerian_report(g)
        ng = g.to_networkx()
        components = nx.number_connected_components(ng) if n else 0
        max_simple = n * (n - 1) // 2
        min_degree = min(degrees, default=0)

        return ServiceResult(
            ok=True,
            op="inspect",
            data={
                "vertex_count": n,
                "edge_count": g.edge_count,
                "density": round(100.0 * g.edge_count / max_simple, 2) if max_simple else 0.0,
                "degrees": degrees,
                "min_degree": min_degree,
                "max_degree": max(degrees, default=0),
                "components": components,
                "isolated": report.isolated,
                "odd_vertices": report.odd_vertices,
                "parallel_pairs": [list(pair) for pair in report.parallel_pairs],
                "eulerian": report.eulerian,
                # Dirac: min degree >= n/2 on n >= 3 vertices implies a Hamiltonian cycle.
                "dirac": n >= 3 and 2 * min_degree >= n,
            },
        )
