"""Commands: euler, hamilton, inspect — searches on a single graph."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphwalk.commands._base import GraphwalkCommand
from graphwalk.commands._source import graph_source_options, resolve_graph, start_index
from graphwalk.services.circuit import CircuitService

if TYPE_CHECKING:
    from graphwalk.commands._context import AppContext


@click.command(
    cls=GraphwalkCommand,
    examples="""\
  graphwalk euler --matrix ring.txt
  graphwalk euler --generate 20 --density 40 --seed 7
  graphwalk euler --matrix ring.txt --start 3
  graphwalk --json euler --matrix ring.txt""",
)
@graph_source_options
@click.option("--start", type=int, default=None, help="Start vertex (display numbering).")
@click.pass_obj
def euler(
    app: AppContext,
    matrix_path: Path | None,
    generate_n: int | None,
    density: float | None,
    seed: int | None,
    start: int | None,
) -> None:
    """Find an Eulerian circuit (every edge exactly once)."""
    graph = resolve_graph(
        app, matrix_path=matrix_path, generate_n=generate_n, density=density, seed=seed
    )
    app.emit(CircuitService(graph).euler(start_index(app, graph, start)))


@click.command(
    cls=GraphwalkCommand,
    examples="""\
  graphwalk hamilton --matrix ring.txt
  graphwalk hamilton --generate 30 --density 70 --seed 1
  graphwalk hamilton --matrix sparse.txt --max-steps 100000
  graphwalk -q hamilton --matrix ring.txt""",
)
@graph_source_options
@click.option("--start", type=int, default=None, help="Start vertex (display numbering).")
@click.option(
    "--max-steps",
    type=click.IntRange(min=1),
    default=None,
    help="Abort the search after this many steps (default from config).",
)
@click.pass_obj
def hamilton(
    app: AppContext,
    matrix_path: Path | None,
    generate_n: int | None,
    density: float | None,
    seed: int | None,
    start: int | None,
    max_steps: int | None,
) -> None:
    """Search for a Hamiltonian circuit (every vertex exactly once)."""
    graph = resolve_graph(
        app, matrix_path=matrix_path, generate_n=generate_n, density=density, seed=seed
    )
    limit = app.settings.search.max_steps if max_steps is None else max_steps
    app.emit(CircuitService(graph).hamilton(start_index(app, graph, start), max_steps=limit))


@click.command(
    cls=GraphwalkCommand,
    examples="""\
  graphwalk inspect --matrix ring.txt
  graphwalk -v inspect --generate 12 --seed 3""",
)
@graph_source_options
@click.pass_obj
def inspect(
    app: AppContext,
    matrix_path: Path | None,
    generate_n: int | None,
    density: float | None,
    seed: int | None,
) -> None:
    """Show degrees, connectivity, and circuit feasibility."""
    graph = resolve_graph(
        app, matrix_path=matrix_path, generate_n=generate_n, density=density, seed=seed
    )
    app.emit(CircuitService(graph).inspect())
