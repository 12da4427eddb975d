"""Click classes that take an ``examples=`` block and expose ``--examples``.

Usage lines stay out of ``--help``; ``graphwalk euler --examples`` prints
them and exits.
"""

from __future__ import annotations

from typing import Any

import click


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class _ExamplesMixin:
    """Stores ``examples`` and appends an eager ``--examples`` flag."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)  # type: ignore[call-arg]
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples,
                    help="Show usage examples.",
                )
            )


class GraphwalkCommand(_ExamplesMixin, click.Command):
    """Leaf command with ``--examples``."""


class GraphwalkGroup(_ExamplesMixin, click.Group):
    """Root group with ``--examples``; subcommands default to GraphwalkCommand."""

    command_class = GraphwalkCommand
