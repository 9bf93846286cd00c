"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
every op the service emits has one.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from adjgraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from adjgraph.services.result import ServiceResult

type _Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    weight_precision: int = 2,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose, weight_precision=weight_precision)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        return _error_line(result)

    if result.ids:
        return "\n".join(str(vertex_id) for vertex_id in result.ids)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _error_line(result: ServiceResult) -> str:
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {msg}"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="adj.ok")
    op = Text(f"  {result.op}", style="adj.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="adj.key")
    v = Text(str(value), style="adj.id" if key in ("id", "start") else "")
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _format_edges(edges: list[dict[str, Any]], precision: int) -> Text:
    text = Text()
    for i, edge in enumerate(edges):
        if i:
            text.append(" ")
        text.append(str(edge["to"]), style="adj.id")
        text.append(f"[{edge['weight']:.{precision}f}]", style="adj.weight")
    return text


# ── Op renderers ──────────────────────────────────────────────────────


def _render_show(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    weight_precision: int = 2,
) -> None:
    data = result.data
    _status_line(console, result)
    kind = "directed" if data.get("directed") else "undirected"
    _field(console, "graph", f"{kind}, {data['vertex_count']} vertices, {data['edge_count']} edges")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Vertex", style="adj.id", no_wrap=True)
    if verbose:
        table.add_column("Data", style="adj.data")
    table.add_column("Edges")
    for item in result.items:
        row: list[Any] = [str(item["id"])]
        if verbose:
            row.append("" if item.get("data") is None else str(item["data"]))
        row.append(_format_edges(item.get("edges", []), weight_precision))
        table.add_row(*row)
    console.print(table)

    if verbose:
        _render_meta(console, result)


def _render_traversal(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    weight_precision: int = 2,
) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "start", data["start"])
    _field(console, "count", data["count"])
    _field(console, "exhausted", data["exhausted"])

    order = Text("  order: ", style="adj.key")
    for i, vertex_id in enumerate(result.ids):
        if i:
            order.append(" -> ")
        order.append(str(vertex_id), style="adj.id")
    console.print(order)

    if verbose:
        _render_meta(console, result)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console) -> None:
    console.print(Text(_error_line(result), style="adj.error"))
    if result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, _Renderer] = {
    "show": _render_show,
    "bfs": _render_traversal,
    "dfs": _render_traversal,
}
