"""Command: timing sweep of both searches over generated graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphwalk.commands._base import GraphwalkCommand
from graphwalk.services.bench import BenchService

if TYPE_CHECKING:
    from graphwalk.commands._context import AppContext


def _parse_sizes(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> list[int] | None:
    """Parse ``START:STOP[:STEP]`` (inclusive stop) into a list of sizes."""
    if value is None:
        return None
    parts = value.split(":")
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        numbers = []
    if len(numbers) not in (2, 3) or (len(numbers) == 3 and numbers[2] < 1):
        msg = f"expected START:STOP[:STEP] with a positive step, got {value!r}"
        raise click.BadParameter(msg)
    step = numbers[2] if len(numbers) == 3 else 1
    return list(range(numbers[0], numbers[1] + 1, step))


@click.command(
    cls=GraphwalkCommand,
    examples="""\
  graphwalk bench
  graphwalk bench --sizes 5:125:5 --density 70
  graphwalk bench --sizes 10:40:10 --seed 1 --max-steps 500000
  graphwalk --json bench --sizes 5:20:5""",
)
@click.option(
    "--sizes",
    callback=_parse_sizes,
    default=None,
    help="Vertex counts as START:STOP[:STEP] (default from config).",
)
@click.option("--density", type=float, default=None, help="Edge density percent.")
@click.option("--seed", type=int, default=None, help="Base random seed.")
@click.option(
    "--max-steps",
    type=click.IntRange(min=1),
    default=None,
    help="Per-graph Hamiltonian step budget.",
)
@click.pass_obj
def bench(
    app: AppContext,
    sizes: list[int] | None,
    density: float | None,
    seed: int | None,
    max_steps: int | None,
) -> None:
    """Time the Eulerian walk and Hamiltonian search on random graphs."""
    cfg = app.settings.bench
    app.emit(
        BenchService().run(
            cfg.sizes() if sizes is None else sizes,
            cfg.density if density is None else density,
            seed=cfg.seed if seed is None else seed,
            max_steps=cfg.max_steps if max_steps is None else max_steps,
        )
    )
