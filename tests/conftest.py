"""Shared pytest fixtures and test helpers for adjgraph tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from adjgraph.config.settings import AdjSettings
from adjgraph.domain.graph import DirectedGraph, Graph


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no config discovery leaking in.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ADJGRAPH_CONFIG", raising=False)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AdjSettings:
    """Default settings with no TOML file in reach."""
    monkeypatch.delenv("ADJGRAPH_CONFIG", raising=False)
    return AdjSettings.from_cli(cwd=tmp_path)


@pytest.fixture
def tree() -> Graph[Any]:
    """Undirected graph 1-2, 1-3, 2-4."""
    return build_graph(Graph(), [1, 2, 3, 4], [(1, 2), (1, 3), (2, 4)])


@pytest.fixture
def directed_tree() -> Graph[Any]:
    """Directed graph 1->2, 1->3, 2->4."""
    return build_graph(DirectedGraph(), [1, 2, 3, 4], [(1, 2), (1, 3), (2, 4)])


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def build_graph(
    graph: Graph[Any],
    vertex_ids: list[int],
    edges: list[tuple[int, int]] | list[tuple[int, int, float]],
) -> Graph[Any]:
    """Add vertices (data ``"v<id>"``) and edges to *graph*, returning it."""
    for vertex_id in vertex_ids:
        graph.add_vertex(vertex_id, f"v{vertex_id}")
    for edge in edges:
        graph.add_edge(*edge)
    return graph


def edge_map(graph: Graph[Any]) -> dict[int, list[tuple[int, float]]]:
    """``{id: [(dest_id, weight), ...]}`` in storage and edge order."""
    return {v.id: [(e.target_id, e.weight) for e in v.edges] for v in graph}


def ids(vertices: Any) -> list[int]:
    return [v.id for v in vertices]
