"""Tests for the Graph model and EdgeUsage relation."""

from __future__ import annotations

import pytest

from graphwalk.domain.errors import IndexOutOfRangeError, InvalidSizeError
from graphwalk.domain.graph import EdgeUsage, Graph
from tests.conftest import build_graph, ring


class TestCreate:
    def test_empty_adjacency(self) -> None:
        g = Graph(4)
        assert g.vertex_count == 4
        assert g.adjacency == [[], [], [], []]
        assert g.edge_count == 0
        assert not g.usage.any()

    def test_zero_vertices_is_valid(self) -> None:
        g = Graph(0)
        assert g.vertex_count == 0
        assert g.adjacency == []

    def test_negative_size_raises(self) -> None:
        with pytest.raises(InvalidSizeError):
            Graph(-1)

    def test_invalid_size_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Graph(-5)


class TestAddEdge:
    def test_appends_both_directions(self) -> None:
        g = Graph(3)
        g.add_edge(0, 2)
        assert g.adjacency[0] == [2]
        assert g.adjacency[2] == [0]
        assert g.adjacency[1] == []
        assert g.edge_count == 1

    def test_insertion_order_preserved(self) -> None:
        g = build_graph(4, [(0, 3), (0, 1), (0, 2)])
        assert g.neighbors(0) == [3, 1, 2]

    def test_parallel_edges_not_deduplicated(self) -> None:
        g = build_graph(2, [(0, 1), (0, 1)])
        assert g.adjacency[0] == [1, 1]
        assert g.adjacency[1] == [0, 0]
        assert g.edge_count == 2
        assert g.degree(0) == 2

    def test_self_loop_counts_twice(self) -> None:
        g = build_graph(1, [(0, 0)])
        assert g.adjacency[0] == [0, 0]
        assert g.degree(0) == 2

    @pytest.mark.parametrize("u,v", [(0, 3), (3, 0), (-1, 0), (0, -1), (7, 9)])
    def test_out_of_range_leaves_graph_unchanged(self, u: int, v: int) -> None:
        g = ring(3)
        before = [list(n) for n in g.adjacency]
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            g.add_edge(u, v)
        assert g.adjacency == before
        assert g.edge_count == 3
        assert exc_info.value.vertex_count == 3

    def test_clears_usage_for_pair(self) -> None:
        g = Graph(3)
        g.usage.mark(0, 1)
        g.add_edge(1, 0)
        assert not g.usage.is_used(0, 1)
        assert not g.usage.is_used(1, 0)


class TestUsage:
    def test_mark_is_symmetric(self) -> None:
        usage = EdgeUsage()
        usage.mark(2, 5)
        assert usage.is_used(2, 5)
        assert usage.is_used(5, 2)
        assert len(usage) == 2

    def test_reset_clears_everything(self) -> None:
        g = ring(4)
        g.usage.mark(0, 1)
        g.usage.mark(2, 3)
        g.reset_usage()
        assert not g.usage.any()
        assert len(g.usage) == 0


class TestReadHelpers:
    def test_edges_in_insertion_order(self) -> None:
        g = build_graph(3, [(2, 1), (0, 2)])
        assert list(g.edges()) == [(2, 1), (0, 2)]

    def test_has_edge(self) -> None:
        g = ring(4)
        assert g.has_edge(0, 1)
        assert g.has_edge(0, 3)
        assert not g.has_edge(0, 2)

    def test_neighbors_out_of_range(self) -> None:
        with pytest.raises(IndexOutOfRangeError):
            Graph(2).neighbors(2)

    def test_to_networkx_keeps_isolated_and_parallel(self) -> None:
        g = build_graph(4, [(0, 1), (0, 1), (1, 2)])
        ng = g.to_networkx()
        assert sorted(ng.nodes()) == [0, 1, 2, 3]
        assert ng.number_of_edges() == 3
        assert ng.degree(3) == 0

    def test_repr(self) -> None:
        assert repr(ring(3)) == "Graph(vertex_count=3, edge_count=3)"
