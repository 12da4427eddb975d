"""Graph — undirected adjacency-list model with per-edge usage flags.

Vertices are the integers ``0..vertex_count - 1``. Each vertex keeps an
ordered neighbor sequence; insertion order decides traversal order in both
circuit finders, so it is part of the observable contract.

INVARIANT: adjacency is symmetric — v appears in u's sequence exactly as
many times as u appears in v's.
"""

from __future__ import annotations

from collections.abc import Iterator

import networkx as nx

from graphwalk.domain.errors import IndexOutOfRangeError, InvalidSizeError


class EdgeUsage:
    """Symmetric usage relation consumed by the Eulerian finder.

    Stores used directed pairs; ``mark`` and ``clear`` always touch both
    directions, so ``is_used(u, v) == is_used(v, u)`` holds at all times.
    """

    def __init__(self) -> None:
        self._used: set[tuple[int, int]] = set()

    def mark(self, u: int, v: int) -> None:
        self._used.add((u, v))
        self._used.add((v, u))

    def clear(self, u: int, v: int) -> None:
        self._used.discard((u, v))
        self._used.discard((v, u))

    def is_used(self, u: int, v: int) -> bool:
        return (u, v) in self._used

    def reset(self) -> None:
        self._used.clear()

    def any(self) -> bool:
        return bool(self._used)

    def __len__(self) -> int:
        return len(self._used)


class Graph:
    """Undirected graph over integer vertices.

    Created once, mutated only through :meth:`add_edge`. Parallel edges and
    self-loops are not rejected; both algorithms see them as additional
    adjacency entries.

    Usage::

        g = Graph(3)
        g.add_edge(0, 1)
        g.add_edge(1, 2)
        g.add_edge(2, 0)
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            msg = f"Vertex count must be non-negative, got {vertex_count}"
            raise InvalidSizeError(msg)
        self._vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
        self._edges: list[tuple[int, int]] = []
        self.usage = EdgeUsage()

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def adjacency(self) -> list[list[int]]:
        """Neighbor sequences in insertion order (treat as read-only)."""
        return self._adjacency

    @property
    def edge_count(self) -> int:
        """Number of inserted edges, counting parallel edges separately."""
        return len(self._edges)

    def check_vertex(self, v: int) -> None:
        """Raise :class:`IndexOutOfRangeError` unless ``0 <= v < vertex_count``."""
        if not 0 <= v < self._vertex_count:
            raise IndexOutOfRangeError(v, self._vertex_count)

    def add_edge(self, u: int, v: int) -> None:
        """Insert the undirected edge (u, v) and clear its usage flags."""
        self.check_vertex(u)
        self.check_vertex(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)
        self._edges.append((u, v))
        self.usage.clear(u, v)

    def reset_usage(self) -> None:
        """Clear every usage flag. Required before each Eulerian traversal."""
        self.usage.reset()

    def neighbors(self, v: int) -> list[int]:
        self.check_vertex(v)
        return self._adjacency[v]

    def degree(self, v: int) -> int:
        """Length of v's adjacency sequence (a self-loop counts twice)."""
        self.check_vertex(v)
        return len(self._adjacency[v])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield inserted edges as ``(u, v)`` in insertion order."""
        yield from self._edges

    def has_edge(self, u: int, v: int) -> bool:
        self.check_vertex(u)
        self.check_vertex(v)
        return v in self._adjacency[u]

    def to_networkx(self) -> nx.MultiGraph:
        """Build a NetworkX MultiGraph with one edge per insertion.

        Isolated vertices are included so connectivity checks see them.
        """
        g: nx.MultiGraph = nx.MultiGraph()
        g.add_nodes_from(range(self._vertex_count))
        g.add_edges_from(self._edges)
        return g

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edge_count={self.edge_count})"
