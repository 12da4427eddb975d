"""Shared pytest fixtures and graph builders for graphwalk tests."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from graphwalk.domain.graph import Graph


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so config discovery never sees a stray graphwalk.toml.
    """
    monkeypatch.delenv("GRAPHWALK_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Graph builders (adjacency order follows the edge order given)
# ---------------------------------------------------------------------------


def build_graph(vertex_count: int, edges: Iterable[tuple[int, int]]) -> Graph:
    g = Graph(vertex_count)
    for u, v in edges:
        g.add_edge(u, v)
    return g


def ring(n: int) -> Graph:
    """Cycle 0-1-...-(n-1)-0."""
    return build_graph(n, [(i, (i + 1) % n) for i in range(n)])


def complete(n: int) -> Graph:
    """Complete graph with edges inserted in (i, j), i < j order."""
    return build_graph(n, [(i, j) for i in range(n) for j in range(i + 1, n)])


def two_triangles() -> Graph:
    """Disjoint triangles 0-1-2 and 3-4-5."""
    return build_graph(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])


def bowtie() -> Graph:
    """Two triangles sharing vertex 2 (Eulerian, not Hamiltonian)."""
    return build_graph(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])


RING_6_MATRIX = """\
6
0 1 0 0 0 1
1 0 1 0 0 0
0 1 0 1 0 0
0 0 1 0 1 0
0 0 0 1 0 1
1 0 0 0 1 0
"""

TWO_TRIANGLES_MATRIX = """\
# two disjoint triangles
0 1 1 0 0 0
1 0 1 0 0 0
1 1 0 0 0 0
0 0 0 0 1 1
0 0 0 1 0 1
0 0 0 1 1 0
"""


@pytest.fixture
def ring_matrix(tmp_path: Path) -> Path:
    path = tmp_path / "ring.txt"
    path.write_text(RING_6_MATRIX)
    return path


@pytest.fixture
def triangles_matrix(tmp_path: Path) -> Path:
    path = tmp_path / "triangles.txt"
    path.write_text(TWO_TRIANGLES_MATRIX)
    return path
