"""Root CLI group for adjgraph with global flags and command registration."""

from __future__ import annotations

import click

from adjgraph import __version__
from adjgraph.commands import register_commands
from adjgraph.commands._base import AdjGroup
from adjgraph.commands._context import AppContext
from adjgraph.config.settings import AdjSettings

_EXAMPLES = """\
  adjgraph show -e 1-2:1.5 -e 1-3:2
  adjgraph bfs 1 -e 1-2 -e 1-3 -e 2-4 --limit 8
  adjgraph --directed dfs 1 -e 1-2 -e 1-3 -e 2-4
  adjgraph --json show -e 1-2"""


@click.group(cls=AdjGroup, invoke_without_command=True, examples=_EXAMPLES)
@click.version_option(version=__version__, prog_name="adjgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--directed/--undirected",
    default=None,
    help="Edge semantics (default: [graph] directed).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    directed: bool | None,
) -> None:
    """adjgraph: build and walk adjacency-list graphs."""
    settings = AdjSettings.from_cli(
        config_path=config_path,
        directed=directed,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
