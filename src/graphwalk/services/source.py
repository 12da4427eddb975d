"""GraphSourceService — obtain a Graph from a matrix file or the generator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from graphwalk.domain.errors import GraphError
from graphwalk.domain.graph import Graph
from graphwalk.infrastructure.generator import generate_graph
from graphwalk.infrastructure.matrix import load_matrix, save_matrix
from graphwalk.services.base import BaseService
from graphwalk.services.result import ServiceResult
from graphwalk.services.telemetry import traced

logger = logging.getLogger(__name__)


class GraphSourceService(BaseService):
    """Loads or generates graphs.

    On success the graph is kept on :attr:`graph` for the caller to pass
    on to :class:`~graphwalk.services.circuit.CircuitService`.
    """

    def __init__(self) -> None:
        self.graph: Graph | None = None

    @traced
    def load(self, path: Path) -> ServiceResult:
        """Read an adjacency-matrix file."""
        if not path.is_file():
            msg = f"Matrix file not found: {path}"
            return self._error("load", "NOT_FOUND", msg, path=str(path))
        try:
            graph = load_matrix(path)
        except GraphError as exc:
            return self._failure("load", exc, path=str(path))
        except UnicodeDecodeError as exc:
            msg = f"Not a text file: {exc}"
            return self._error("load", "INVALID_MATRIX", msg, path=str(path))
        except OSError as exc:
            return self._error("load", "IO_ERROR", str(exc), path=str(path))

        self.graph = graph
        logger.debug("Loaded %r from %s", graph, path)
        return ServiceResult(
            ok=True,
            op="load",
            data={
                "path": str(path),
                "vertex_count": graph.vertex_count,
                "edge_count": graph.edge_count,
            },
        )

    @traced
    def generate(
        self,
        vertex_count: int,
        density: float,
        *,
        seed: int | None = None,
        output: Path | None = None,
    ) -> ServiceResult:
        """Generate a random graph, optionally writing it as a matrix file."""
        try:
            graph = generate_graph(vertex_count, density, seed=seed)
        except GraphError as exc:
            return self._failure("generate", exc)

        data: dict[str, Any] = {
            "vertex_count": graph.vertex_count,
            "edge_count": graph.edge_count,
            "density": density,
            "seed": seed,
        }
        if output is not None:
            try:
                save_matrix(graph, output)
            except OSError as exc:
                return self._error("generate", "IO_ERROR", str(exc), path=str(output))
            data["path"] = str(output)
        self.graph = graph
        return ServiceResult(ok=True, op="generate", data=data)
