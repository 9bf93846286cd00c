"""Standalone commands: bounded breadth-first and depth-first walks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from adjgraph.commands._base import AdjCommand, graph_options
from adjgraph.services.graph import STRATEGIES

if TYPE_CHECKING:
    from adjgraph.commands._context import AppContext

_LIMIT_HELP = "Maximum vertices to visit (default: [traversal] default_limit)."


def _run(
    app: AppContext,
    strategy: str | None,
    start: int,
    vertices: tuple[str, ...],
    edges: tuple[str, ...],
    limit: int | None,
) -> None:
    app.emit(
        app.service.traverse(
            start,
            list(vertices),
            list(edges),
            strategy=strategy,
            limit=limit,
        )
    )


@click.command(
    cls=AdjCommand,
    examples="""\
  adjgraph bfs 1 -e 1-2 -e 1-3 -e 2-4 --limit 8
  adjgraph --directed bfs 1 -e 1-2 -e 1-3 -e 2-4
  adjgraph -q bfs 1 -e 1-2""",
)
@click.argument("start", type=int)
@graph_options
@click.option("--limit", type=click.IntRange(min=1), default=None, help=_LIMIT_HELP)
@click.pass_obj
def bfs(
    app: AppContext,
    start: int,
    vertices: tuple[str, ...],
    edges: tuple[str, ...],
    limit: int | None,
) -> None:
    """Breadth-first walk from START (revisits allowed)."""
    _run(app, "bfs", start, vertices, edges, limit)


@click.command(
    cls=AdjCommand,
    examples="""\
  adjgraph dfs 1 -e 1-2 -e 1-3 -e 2-4 --limit 8
  adjgraph --directed dfs 1 -e 1-2 -e 1-3 -e 2-4""",
)
@click.argument("start", type=int)
@graph_options
@click.option("--limit", type=click.IntRange(min=1), default=None, help=_LIMIT_HELP)
@click.pass_obj
def dfs(
    app: AppContext,
    start: int,
    vertices: tuple[str, ...],
    edges: tuple[str, ...],
    limit: int | None,
) -> None:
    """Depth-first walk from START (revisits allowed)."""
    _run(app, "dfs", start, vertices, edges, limit)


@click.command(
    cls=AdjCommand,
    examples="""\
  adjgraph traverse 1 -e 1-2 -e 2-3
  adjgraph traverse 1 -e 1-2 -e 2-3 --strategy dfs""",
)
@click.argument("start", type=int)
@graph_options
@click.option(
    "--strategy",
    type=click.Choice(STRATEGIES),
    default=None,
    help="Traversal order (default: [traversal] strategy).",
)
@click.option("--limit", type=click.IntRange(min=1), default=None, help=_LIMIT_HELP)
@click.pass_obj
def traverse(
    app: AppContext,
    start: int,
    vertices: tuple[str, ...],
    edges: tuple[str, ...],
    strategy: str | None,
    limit: int | None,
) -> None:
    """Walk from START using the configured strategy."""
    _run(app, strategy, start, vertices, edges, limit)
