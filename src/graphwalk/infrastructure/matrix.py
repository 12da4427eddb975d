"""Adjacency-matrix reading and writing.

Format: one row per line, whitespace-separated non-negative integers.
Blank lines and ``#`` comments are ignored. An optional first line holding
a single integer equal to the number of rows is read as a size header.

A file holding only ``0`` is an empty graph.

Entry ``m[i][j]`` is the number of parallel edges between i and j. The
matrix must be symmetric with a zero diagonal. Edges are inserted
row-major over the upper triangle, which fixes adjacency order.
"""

from __future__ import annotations

from pathlib import Path

from graphwalk.domain.errors import MatrixFormatError
from graphwalk.domain.graph import Graph


def _tokenize(text: str) -> list[tuple[int, list[int]]]:
    rows: list[tuple[int, list[int]]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        try:
            values = [int(tok) for tok in line.split()]
        except ValueError as exc:
            raise MatrixFormatError(f"non-integer entry ({exc})", line=lineno) from exc
        if any(x < 0 for x in values):
            raise MatrixFormatError("negative entry", line=lineno)
        rows.append((lineno, values))
    return rows


def parse_matrix(text: str) -> Graph:
    """Build a Graph from adjacency-matrix text.

    An entry above 1 inserts that many parallel edges. The Eulerian finder
    tracks usage per vertex pair, so it crosses such a pair once and reports
    the walk as incomplete; :func:`~graphwalk.domain.euler.eulerian_report`
    lists the affected pairs.

    Raises:
        MatrixFormatError: the text is not a square, symmetric,
            zero-diagonal matrix of non-negative integers.
    """
    rows = _tokenize(text)
    # A lone "0" line is the header of an empty graph, not a 1x1 matrix.
    if rows and len(rows[0][1]) == 1 and rows[0][1][0] == len(rows) - 1:
        rows = rows[1:]

    n = len(rows)
    matrix: list[list[int]] = []
    for lineno, values in rows:
        if len(values) != n:
            msg = f"expected {n} entries, found {len(values)}"
            raise MatrixFormatError(msg, line=lineno)
        matrix.append(values)

    for i in range(n):
        if matrix[i][i] != 0:
            raise MatrixFormatError(f"self-loop at vertex {i}", line=rows[i][0])
        for j in range(i + 1, n):
            if matrix[i][j] != matrix[j][i]:
                msg = f"asymmetric entries at ({i}, {j})"
                raise MatrixFormatError(msg, line=rows[j][0])

    g = Graph(n)
    for i in range(n):
        for j in range(i + 1, n):
            for _ in range(matrix[i][j]):
                g.add_edge(i, j)
    return g


def load_matrix(path: Path) -> Graph:
    """Read and parse an adjacency-matrix file."""
    return parse_matrix(path.read_text(encoding="utf-8"))


def dump_matrix(graph: Graph) -> str:
    """Serialize *graph* as a size header followed by matrix rows."""
    n = graph.vertex_count
    matrix = [[0] * n for _ in range(n)]
    for u, v in graph.edges():
        matrix[u][v] += 1
        if u != v:
            matrix[v][u] += 1
    lines = [str(n)]
    lines.extend(" ".join(str(x) for x in row) for row in matrix)
    return "\n".join(lines) + "\n"


def save_matrix(graph: Graph, path: Path) -> None:
    """Write *graph* to *path* in adjacency-matrix format."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_matrix(graph), encoding="utf-8")
