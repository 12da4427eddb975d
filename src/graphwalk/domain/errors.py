"""Error taxonomy for graph construction and traversal.

Construction and indexing errors are raised before any mutation, so a
failed call never leaves a Graph half-updated. A partial Eulerian walk is
not an error: it is reported on the returned walk object.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all graphwalk domain errors."""


class InvalidSizeError(GraphError, ValueError):
    """Vertex count (or generator parameter) outside its valid range."""


class IndexOutOfRangeError(GraphError, IndexError):
    """Vertex index outside ``[0, vertex_count)``."""

    def __init__(self, index: int, vertex_count: int) -> None:
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(f"Vertex {index} out of range for graph with {vertex_count} vertices")


class MatrixFormatError(GraphError, ValueError):
    """Adjacency-matrix text that cannot be turned into a Graph."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class SearchLimitError(GraphError):
    """Hamiltonian search used up its step budget before finishing."""

    def __init__(self, max_steps: int) -> None:
        self.max_steps = max_steps
        super().__init__(f"Hamiltonian search exceeded {max_steps} steps")
