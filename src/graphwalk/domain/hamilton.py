"""Hamiltonian circuit search — exhaustive backtracking DFS.

The search fixes the start vertex, extends the path through unvisited
neighbors in adjacency order, and checks for a closing edge back to the
start once the path holds every vertex. The first cycle found is returned;
it depends on adjacency insertion order and is not canonical.

Worst-case time is exponential in the vertex count. ``max_steps`` lets a
caller bound the work deterministically.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from graphwalk.domain.errors import SearchLimitError
from graphwalk.domain.graph import Graph


@dataclass(frozen=True)
class HamiltonianResult:
    """Outcome of a Hamiltonian search.

    Attributes:
        found: Whether a cycle was found.
        path: The closed walk (``vertex_count + 1`` entries, first == last)
            on success; empty otherwise.
        steps: Number of vertices pushed onto the path during the search.
    """

    found: bool
    path: tuple[int, ...] = ()
    steps: int = 0


def find_hamiltonian_circuit(
    graph: Graph,
    start: int,
    *,
    max_steps: int | None = None,
) -> HamiltonianResult:
    """Search for a cycle through every vertex, starting and ending at *start*.

    "Not found" is a normal outcome, returned as ``found=False``.

    Raises:
        IndexOutOfRangeError: *start* is not a vertex (unless the graph is empty).
        SearchLimitError: more than *max_steps* vertices were pushed.
    """
    n = graph.vertex_count
    if n == 0:
        return HamiltonianResult(found=False)
    graph.check_vertex(start)

    adjacency = graph.adjacency
    visited = [False] * n
    path: list[int] = [start]
    visited[start] = True
    steps = 1

    def closes(v: int) -> bool:
        return len(path) == n and start in adjacency[v]

    if closes(start):
        path.append(start)
        return HamiltonianResult(found=True, path=tuple(path), steps=steps)

    # cursor[k] is the next neighbor index to try from path[k].
    cursor: list[int] = [0]
    while cursor:
        v = path[-1]
        neighbors = adjacency[v]
        i = cursor[-1]
        while i < len(neighbors) and visited[neighbors[i]]:
            i += 1
        if i == len(neighbors):
            # Backtrack.
            cursor.pop()
            visited[v] = False
            path.pop()
            continue

        cursor[-1] = i + 1
        u = neighbors[i]
        steps += 1
        if max_steps is not None and steps > max_steps:
            raise SearchLimitError(max_steps)
        path.append(u)
        visited[u] = True
        cursor.append(0)
        if closes(u):
            path.append(start)
            return HamiltonianResult(found=True, path=tuple(path), steps=steps)

    return HamiltonianResult(found=False, steps=steps)


def is_hamiltonian_cycle(graph: Graph, path: Sequence[int]) -> bool:
    """Check that *path* is a closed walk visiting every vertex of *graph* once."""
    n = graph.vertex_count
    if n == 0 or len(path) != n + 1 or path[0] != path[-1]:
        return False
    interior = path[:-1]
    if sorted(interior) != list(range(n)):
        return False
    return all(path[k + 1] in graph.adjacency[path[k]] for k in range(n))
