"""BenchService — timing sweep over generated graphs.

For each size: generate a graph at the given density, time the Eulerian
walk (after a usage reset) and the Hamiltonian search, and record whether
a Hamiltonian cycle was found. Times are wall-clock microseconds.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

from graphwalk.domain.errors import GraphError, SearchLimitError
from graphwalk.domain.euler import find_eulerian_circuit
from graphwalk.domain.hamilton import find_hamiltonian_circuit
from graphwalk.infrastructure.generator import generate_graph
from graphwalk.services.base import BaseService
from graphwalk.services.result import ServiceResult
from graphwalk.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def _elapsed_us(started_ns: int) -> int:
    return (time.perf_counter_ns() - started_ns) // 1000


class BenchService(BaseService):
    """Runs the Euler/Hamilton timing sweep."""

    @traced
    def run(
        self,
        sizes: Sequence[int],
        density: float,
        *,
        seed: int | None = None,
        max_steps: int | None = None,
    ) -> ServiceResult:
        """Time both searches for every size in *sizes*.

        With a *seed*, size ``n`` is generated from ``seed + n`` so each row
        is reproducible on its own. A Hamiltonian search that exceeds
        *max_steps* is recorded with ``found=None`` and the sweep continues.
        """
        rows: list[dict[str, Any]] = []
        warnings: list[str] = []

        for n in sizes:
            with trace_span(f"size_{n}") as span:
                try:
                    graph = generate_graph(n, density, seed=None if seed is None else seed + n)
                except GraphError as exc:
                    return self._failure("bench", exc, size=n)

                started = time.perf_counter_ns()
                walk = find_eulerian_circuit(graph, 0, reset=True)
                euler_us = _elapsed_us(started)

                row: dict[str, Any] = {
                    "vertex_count": n,
                    "edge_count": graph.edge_count,
                    "euler_us": euler_us,
                    "euler_complete": walk.complete,
                }
                started = time.perf_counter_ns()
                try:
                    result = find_hamiltonian_circuit(graph, 0, max_steps=max_steps)
                except SearchLimitError as exc:
                    row.update(
                        hamilton_us=_elapsed_us(started),
                        found=None,
                        limited=True,
                        steps=exc.max_steps,
                    )
                    warnings.append(f"n={n}: {exc}")
                else:
                    row.update(
                        hamilton_us=_elapsed_us(started),
                        found=result.found,
                        limited=False,
                        steps=result.steps,
                    )
                if span:
                    span.annotate("edges", graph.edge_count)
            logger.debug("bench row: %s", row)
            rows.append(row)

        return ServiceResult(
            ok=True,
            op="bench",
            data={"density": density, "seed": seed, "count": len(rows), "rows": rows},
            warnings=warnings,
        )
