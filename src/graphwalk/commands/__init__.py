"""Subcommand modules for graphwalk.

Provides register_commands() which uses deferred imports to keep
``graphwalk --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from graphwalk.commands.bench import bench
    from graphwalk.commands.circuit import euler, hamilton, inspect
    from graphwalk.commands.generate import generate

    cli.add_command(generate)
    cli.add_command(euler)
    cli.add_command(hamilton)
    cli.add_command(inspect)
    cli.add_command(bench)
