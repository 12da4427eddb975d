"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich) or machines (--json).
JSON output always carries zero-based vertex indices; human output
follows the ``one_based`` display setting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphwalk.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from graphwalk.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags resolved from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    one_based: bool = True


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result, one_based=settings.one_based)
    return render_result(result, verbose=settings.verbose, one_based=settings.one_based)
