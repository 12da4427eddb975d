"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer. Vertex numbers
are shifted by one when ``one_based`` is set.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from graphwalk.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from graphwalk.services.result import ServiceResult

_Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, one_based: bool = True) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, one_based=one_based)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult, *, one_based: bool = True) -> str:
    """Render minimal output for ``--quiet`` mode.

    Circuits print as bare vertex lists so they can be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    offset = 1 if one_based else 0
    if result.op == "euler":
        return " ".join(str(v + offset) for v in result.data.get("circuit", []))
    if result.op == "hamilton":
        if not result.data.get("found"):
            return "NOT FOUND"
        return " ".join(str(v + offset) for v in result.data.get("path", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _chain(vertices: Sequence[int], *, one_based: bool) -> str:
    offset = 1 if one_based else 0
    return " → ".join(f"[gw.vertex]{v + offset}[/gw.vertex]" for v in vertices)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="gw.ok")
    op = Text(f"  {result.op}", style="gw.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="gw.key")
    v = Text(str(value), style="gw.path" if key == "path" else "")
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{ak}={av}" for ak, av in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="gw.error")
    op = Text(f"  {result.op}", style="gw.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Circuit renderers ─────────────────────────────────────────────────


def _render_euler(
    result: ServiceResult, console: Console, *, verbose: bool = False, one_based: bool = True
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "start", d["start"] + (1 if one_based else 0))
    _field(console, "edges", f"{d.get('edges_traversed', 0)}/{d.get('edge_count', 0)}")
    _field(console, "complete", d.get("complete", False))
    console.print()
    console.print(_chain(d.get("circuit", []), one_based=one_based))
    if verbose:
        _render_meta(console, result)


def _render_hamilton(
    result: ServiceResult, console: Console, *, verbose: bool = False, one_based: bool = True
) -> None:
    d = result.data
    start = d["start"] + (1 if one_based else 0)
    if d.get("found"):
        console.print(f"[gw.found]Hamiltonian circuit[/gw.found] from {start}:")
        console.print(_chain(d.get("path", []), one_based=one_based))
    else:
        console.print(f"[gw.missing]No Hamiltonian circuit[/gw.missing] from {start}.")
    console.print(f"\n{d.get('steps', 0)} steps")
    if verbose:
        _render_meta(console, result)


def _render_inspect(
    result: ServiceResult, console: Console, *, verbose: bool = False, one_based: bool = True
) -> None:
    d = result.data
    offset = 1 if one_based else 0
    _status_line(console, result)
    for key in ("vertex_count", "edge_count", "density", "min_degree", "max_degree", "components"):
        _field(console, key, d.get(key))
    _field(console, "eulerian", d.get("eulerian"))
    _field(console, "dirac", d.get("dirac"))
    for key in ("odd_vertices", "isolated"):
        vertices = d.get(key) or []
        if vertices:
            _field(console, key, ", ".join(str(v + offset) for v in vertices))
    pairs = d.get("parallel_pairs") or []
    if pairs:
        _field(console, "parallel_pairs", ", ".join(f"{u + offset}-{v + offset}" for u, v in pairs))
    if verbose:
        degrees = d.get("degrees", [])
        _field(console, "degrees", " ".join(str(x) for x in degrees))
        _render_meta(console, result)


def _render_bench(
    result: ServiceResult, console: Console, *, verbose: bool = False, one_based: bool = True
) -> None:
    d = result.data
    rows = d.get("rows", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("n", justify="right")
    table.add_column("Edges", justify="right")
    table.add_column("Euler µs", style="gw.time", justify="right")
    table.add_column("Hamilton µs", style="gw.time", justify="right")
    table.add_column("Hamiltonian")
    if verbose:
        table.add_column("Steps", justify="right")

    for row in rows:
        if row.get("limited"):
            found = Text("limit", style="gw.warning")
        elif row.get("found"):
            found = Text("yes", style="gw.found")
        else:
            found = Text("no", style="gw.missing")
        cells: list[Any] = [
            str(row.get("vertex_count", "")),
            str(row.get("edge_count", "")),
            str(row.get("euler_us", "")),
            str(row.get("hamilton_us", "")),
            found,
        ]
        if verbose:
            cells.append(str(row.get("steps", "")))
        table.add_row(*cells)

    console.print(f"Density {d.get('density')}%")
    console.print(table)
    console.print(f"\n{d.get('count', len(rows))} graphs")
    if verbose:
        _render_meta(console, result)


def _render_source(
    result: ServiceResult, console: Console, *, verbose: bool = False, one_based: bool = True
) -> None:
    """Render generate/load results."""
    _status_line(console, result)
    for key in ("vertex_count", "edge_count", "density", "seed", "path"):
        if result.data.get(key) is not None:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, one_based: bool = True
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "euler": _render_euler,
    "hamilton": _render_hamilton,
    "inspect": _render_inspect,
    "bench": _render_bench,
    "generate": _render_source,
    "load": _render_source,
}
