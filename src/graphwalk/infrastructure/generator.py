"""Random graph generation with a guaranteed Hamiltonian ring.

Every generated graph starts from the ring ``0-1-...-(n-1)-0``, so a
Hamiltonian cycle always exists. Random unique edges are then added up to
the requested density, and a final parity pass tries to even out degrees.
The parity pass only adds ``(i, i+1)`` when that pair is still free, so it
does not guarantee an Eulerian result.
"""

from __future__ import annotations

import logging
import random

from graphwalk.domain.errors import InvalidSizeError
from graphwalk.domain.graph import Graph

logger = logging.getLogger(__name__)

MIN_VERTICES = 3


def target_edge_count(vertex_count: int, density: float) -> int:
    """Unique-edge target for *density* percent of the complete graph."""
    max_edges = vertex_count * (vertex_count - 1) // 2
    return int(density / 100.0 * max_edges)


def generate_graph(vertex_count: int, density: float, *, seed: int | None = None) -> Graph:
    """Generate a simple undirected graph.

    Args:
        vertex_count: Number of vertices (at least 3).
        density: Percentage (0-100) of the ``n(n-1)/2`` possible edges.
        seed: Seed for reproducible output; None draws from system entropy.

    Raises:
        InvalidSizeError: *vertex_count* below 3 or *density* outside [0, 100].
    """
    if vertex_count < MIN_VERTICES:
        msg = f"Generated graphs need at least {MIN_VERTICES} vertices, got {vertex_count}"
        raise InvalidSizeError(msg)
    if not 0.0 <= density <= 100.0:
        msg = f"Density must be between 0 and 100, got {density}"
        raise InvalidSizeError(msg)

    rng = random.Random(seed)
    g = Graph(vertex_count)
    existing: set[tuple[int, int]] = set()

    def insert(u: int, v: int) -> None:
        g.add_edge(u, v)
        existing.add((min(u, v), max(u, v)))

    for i in range(vertex_count - 1):
        insert(i, i + 1)
    insert(vertex_count - 1, 0)

    target = target_edge_count(vertex_count, density)
    while len(existing) < target:
        u = rng.randrange(vertex_count)
        v = rng.randrange(vertex_count)
        if u == v or (min(u, v), max(u, v)) in existing:
            continue
        insert(u, v)

    for i in range(vertex_count):
        if g.degree(i) % 2:
            j = (i + 1) % vertex_count
            if (min(i, j), max(i, j)) not in existing:
                insert(i, j)

    logger.debug(
        "Generated graph: %d vertices, %d edges (density %.1f%%, seed %s)",
        vertex_count,
        g.edge_count,
        density,
        seed,
    )
    return g
