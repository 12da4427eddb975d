"""Tests for GraphSourceService — load and generate."""

from __future__ import annotations

from pathlib import Path

import pytest

from graphwalk.services.source import GraphSourceService


class TestLoad:
    def test_load_ring(self, ring_matrix: Path) -> None:
        svc = GraphSourceService()
        result = svc.load(ring_matrix)
        assert result.ok
        assert result.data["vertex_count"] == 6
        assert result.data["edge_count"] == 6
        assert svc.graph is not None
        assert svc.graph.vertex_count == 6

    def test_missing_file(self, tmp_path: Path) -> None:
        svc = GraphSourceService()
        result = svc.load(tmp_path / "nope.txt")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert svc.graph is None

    def test_malformed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("0 1\n0 0\n")
        result = GraphSourceService().load(path)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_MATRIX"
        assert result.error.detail["line"] == 2

    def test_binary_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bin.dat"
        path.write_bytes(b"\xff\xfe\x00\x81")
        result = GraphSourceService().load(path)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_MATRIX"


class TestGenerate:
    def test_generate(self) -> None:
        svc = GraphSourceService()
        result = svc.generate(10, 40.0, seed=1)
        assert result.ok
        assert result.op == "generate"
        assert result.data["vertex_count"] == 10
        assert result.data["seed"] == 1
        assert "path" not in result.data
        assert svc.graph is not None

    def test_generate_writes_file(self, tmp_path: Path) -> None:
        out = tmp_path / "g.txt"
        result = GraphSourceService().generate(8, 50.0, seed=2, output=out)
        assert result.ok
        assert result.data["path"] == str(out)
        assert out.read_text().startswith("8\n")

    def test_invalid_size(self) -> None:
        result = GraphSourceService().generate(2, 30.0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_SIZE"


class TestIOErrors:
    def test_load_unreadable(self, ring_matrix: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def deny(self: Path, *args: object, **kwargs: object) -> str:
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_text", deny)
        svc = GraphSourceService()
        result = svc.load(ring_matrix)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "IO_ERROR"
        assert result.error.detail["path"] == str(ring_matrix)
        assert svc.graph is None

    def test_generate_output_under_a_file(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        out = blocker / "g.txt"
        svc = GraphSourceService()
        result = svc.generate(5, 30.0, seed=1, output=out)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "IO_ERROR"
        assert result.error.detail["path"] == str(out)
        assert svc.graph is None
