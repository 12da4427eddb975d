"""Shared graph-source options: ``--matrix FILE`` or ``--generate N``.

Commands that operate on a graph decorate themselves with
:func:`graph_source_options` and call :func:`resolve_graph`, which emits
and exits on failure so the command body only sees a valid Graph.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import click

from graphwalk.services.source import GraphSourceService

if TYPE_CHECKING:
    from graphwalk.commands._context import AppContext
    from graphwalk.domain.graph import Graph

_F = TypeVar("_F", bound=Callable[..., Any])


def graph_source_options(func: _F) -> _F:
    """Add ``--matrix``, ``--generate``, ``--density`` and ``--seed``."""
    options = [
        click.option(
            "--matrix",
            "matrix_path",
            type=click.Path(path_type=Path, dir_okay=False),
            default=None,
            help="Read the graph from an adjacency-matrix file.",
        ),
        click.option(
            "--generate",
            "generate_n",
            type=int,
            default=None,
            help="Generate a random graph with N vertices.",
        ),
        click.option(
            "--density",
            type=float,
            default=None,
            help="Edge density percent for --generate (default from config).",
        ),
        click.option("--seed", type=int, default=None, help="Random seed for --generate."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_graph(
    app: AppContext,
    *,
    matrix_path: Path | None,
    generate_n: int | None,
    density: float | None,
    seed: int | None,
) -> Graph:
    """Load or generate the graph named by the source options."""
    if (matrix_path is None) == (generate_n is None):
        msg = "Give exactly one of --matrix FILE or --generate N."
        raise click.UsageError(msg)

    svc = GraphSourceService()
    if matrix_path is not None:
        result = svc.load(matrix_path)
    else:
        assert generate_n is not None
        gen = app.settings.generator
        result = svc.generate(
            generate_n,
            gen.density if density is None else density,
            seed=gen.seed if seed is None else seed,
        )
    if not result.ok:
        app.emit(result)
    assert svc.graph is not None
    return svc.graph


def start_index(app: AppContext, graph: Graph, start: int | None) -> int:
    """Translate a displayed start vertex into an internal index.

    Defaults to the first vertex. Out-of-range values are reported in
    display numbering; an empty graph passes through unchecked.
    """
    base = app.base
    if start is None:
        return 0
    n = graph.vertex_count
    if n and not base <= start < n + base:
        msg = f"must be between {base} and {n - 1 + base}, got {start}"
        raise click.BadParameter(msg, param_hint="--start")
    return start - base
