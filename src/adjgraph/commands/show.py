"""Standalone command: print a graph's adjacency listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from adjgraph.commands._base import AdjCommand, graph_options

if TYPE_CHECKING:
    from adjgraph.commands._context import AppContext


@click.command(
    cls=AdjCommand,
    examples="""\
  adjgraph show -e 1-2:1.5 -e 1-3:2
  adjgraph show -n 1=depot -n 2=store -e 1-2
  adjgraph --directed show -e 1-1 -e 1-2
  adjgraph --json show -e 1-2""",
)
@graph_options
@click.option("--plain", is_flag=True, help="Print the raw '<id>: <dest>[<weight>]' listing.")
@click.pass_obj
def show(app: AppContext, vertices: tuple[str, ...], edges: tuple[str, ...], plain: bool) -> None:
    """Build a graph from specs and show its adjacency list."""
    result = app.service.show(list(vertices), list(edges))
    if plain and result.ok and not app.settings.json_output:
        click.echo(result.data["text"], nl=False)
        return
    app.emit(result)
