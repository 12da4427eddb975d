"""Root CLI group for graphwalk with global flags and command registration."""

from __future__ import annotations

import click

from graphwalk import __version__
from graphwalk.commands import register_commands
from graphwalk.commands._base import GraphwalkGroup
from graphwalk.commands._context import AppContext
from graphwalk.config.settings import GraphwalkSettings


_CLI_EXAMPLES = """\
  graphwalk generate 20 --density 40 --seed 1 -o g.txt
  graphwalk euler --matrix g.txt
  graphwalk -q hamilton --matrix g.txt --start 3
  graphwalk --json inspect --generate 12
  graphwalk bench --sizes 5:40:5"""


@click.group(cls=GraphwalkGroup, invoke_without_command=True, examples=_CLI_EXAMPLES)
@click.version_option(version=__version__, prog_name="graphwalk")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """graphwalk — Eulerian and Hamiltonian circuits on undirected graphs."""
    ctx.ensure_object(dict)
    settings = GraphwalkSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
