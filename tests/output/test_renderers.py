"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from graphwalk.output.renderers import render_quiet, render_result
from graphwalk.services.result import ServiceError, ServiceResult


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("euler", "INVALID_VERTEX", "Vertex 9 out of range"))
        assert "ERROR" in output
        assert "euler" in output
        assert "Vertex 9 out of range" in output

    def test_verbose_shows_detail(self) -> None:
        output = render_result(_err("load", "INVALID_MATRIX", "bad", line=3), verbose=True)
        assert "detail" in output
        assert "line: 3" in output

    def test_brackets_in_message_are_literal(self) -> None:
        path = "g[/x].txt"
        result = _err("load", "NOT_FOUND", f"Matrix file not found: {path}", path=path)
        output = render_result(result, verbose=True)
        assert f"Matrix file not found: {path}" in output
        assert f"path: {path}" in output


class TestEulerRenderer:
    def test_one_based_chain(self) -> None:
        result = _ok(
            "euler",
            start=0,
            circuit=[0, 1, 2, 0],
            complete=True,
            edges_traversed=3,
            edge_count=3,
        )
        output = render_result(result)
        assert "OK" in output
        assert "1 → 2 → 3 → 1" in output
        assert "edges: 3/3" in output
        assert "start: 1" in output

    def test_zero_based_chain(self) -> None:
        result = _ok("euler", start=0, circuit=[0, 1, 0], edges_traversed=2, edge_count=2)
        assert "0 → 1 → 0" in render_result(result, one_based=False)


class TestHamiltonRenderer:
    def test_found(self) -> None:
        result = _ok("hamilton", start=0, found=True, path=[0, 2, 1, 0], steps=3)
        output = render_result(result)
        assert "Hamiltonian circuit from 1" in output
        assert "1 → 3 → 2 → 1" in output
        assert "3 steps" in output

    def test_not_found(self) -> None:
        result = _ok("hamilton", start=2, found=False, path=[], steps=9)
        output = render_result(result)
        assert "No Hamiltonian circuit from 3." in output


class TestInspectRenderer:
    def test_lists_odd_vertices_one_based(self) -> None:
        result = _ok(
            "inspect",
            vertex_count=3,
            edge_count=2,
            density=66.67,
            degrees=[1, 2, 1],
            min_degree=1,
            max_degree=2,
            components=1,
            isolated=[],
            odd_vertices=[0, 2],
            eulerian=False,
            dirac=False,
        )
        output = render_result(result, verbose=True)
        assert "odd_vertices: 1, 3" in output
        assert "isolated" not in output
        assert "degrees: 1 2 1" in output
        assert "parallel_pairs" not in output

    def test_parallel_pairs_one_based(self) -> None:
        result = _ok("inspect", vertex_count=2, edge_count=2, parallel_pairs=[[0, 1]])
        assert "parallel_pairs: 1-2" in render_result(result)


class TestBenchRenderer:
    def test_table(self) -> None:
        rows = [
            {"vertex_count": 5, "edge_count": 7, "euler_us": 12, "hamilton_us": 30,
             "found": True, "limited": False, "steps": 5},
            {"vertex_count": 10, "edge_count": 16, "euler_us": 20, "hamilton_us": 900,
             "found": None, "limited": True},
        ]
        output = render_result(_ok("bench", density=30.0, count=2, rows=rows))
        assert "Density 30.0%" in output
        assert "yes" in output
        assert "limit" in output
        assert "2 graphs" in output


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("other", a=1, items=[1, 2]))
        assert "a: 1" in output
        assert "items: [1,2]" in output


class TestQuiet:
    def test_euler_bare_vertices(self) -> None:
        assert render_quiet(_ok("euler", circuit=[0, 1, 2, 0])) == "1 2 3 1"

    def test_hamilton_zero_based(self) -> None:
        result = _ok("hamilton", found=True, path=[0, 1, 2, 0])
        assert render_quiet(result, one_based=False) == "0 1 2 0"

    def test_hamilton_not_found(self) -> None:
        assert render_quiet(_ok("hamilton", found=False, path=[])) == "NOT FOUND"

    def test_other_op(self) -> None:
        assert render_quiet(_ok("generate", vertex_count=5)) == "OK: generate"

    def test_error(self) -> None:
        output = render_quiet(_err("euler", "INVALID_VERTEX", "bad start"))
        assert output.startswith("ERROR: euler")
        assert "bad start" in output
