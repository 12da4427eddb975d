"""Command: generate a random graph and optionally save it."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphwalk.commands._base import GraphwalkCommand
from graphwalk.services.source import GraphSourceService

if TYPE_CHECKING:
    from graphwalk.commands._context import AppContext


@click.command(
    cls=GraphwalkCommand,
    examples="""\
  graphwalk generate 10
  graphwalk generate 25 --density 70 --seed 42 --output dense.txt""",
)
@click.argument("vertex_count", type=int)
@click.option("--density", type=float, default=None, help="Edge density percent (0-100).")
@click.option("--seed", type=int, default=None, help="Random seed.")
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write the adjacency matrix to this file.",
)
@click.pass_obj
def generate(
    app: AppContext,
    vertex_count: int,
    density: float | None,
    seed: int | None,
    output: Path | None,
) -> None:
    """Generate a random graph built around a Hamiltonian ring."""
    gen = app.settings.generator
    app.emit(
        GraphSourceService().generate(
            vertex_count,
            gen.density if density is None else density,
            seed=gen.seed if seed is None else seed,
            output=output,
        )
    )
