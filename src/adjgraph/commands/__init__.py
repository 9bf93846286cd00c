"""Subcommand modules for adjgraph.

Provides register_commands() which uses deferred imports to keep
``adjgraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from adjgraph.commands.show import show
    from adjgraph.commands.traverse import bfs, dfs, traverse

    cli.add_command(show)
    cli.add_command(bfs)
    cli.add_command(dfs)
    cli.add_command(traverse)
