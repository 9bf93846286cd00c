"""GraphService: build a graph from spec tokens, then show or traverse it.

Graphs are rebuilt per invocation from ``ID[=DATA]`` vertex tokens and
``FROM-TO[:WEIGHT]`` edge tokens; nothing is persisted. Vertices are
created in first-mention order, then edges are added in the order given.
"""

from __future__ import annotations

from itertools import islice
from typing import Any

from adjgraph.config.logging import graph_context
from adjgraph.domain.errors import GraphError
from adjgraph.domain.graph import Graph
from adjgraph.domain.specs import implied_vertex_ids, parse_edge_spec, parse_vertex_spec
from adjgraph.services.base import BaseService
from adjgraph.services.result import ServiceResult

STRATEGIES = ("bfs", "dfs")


class GraphService(BaseService):
    """Handles graph construction, display, and traversal."""

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def build(self, vertex_tokens: list[str], edge_tokens: list[str]) -> Graph[Any]:
        """Parse the tokens and build a graph.

        Raises:
            GraphError: A token is malformed or an edge is rejected.
        """
        vertex_specs = [parse_vertex_spec(t) for t in vertex_tokens]
        edge_specs = [parse_edge_spec(t) for t in edge_tokens]
        data: dict[int, str | None] = {}
        for spec in vertex_specs:
            data.setdefault(spec.vertex_id, spec.data)

        graph = self._new_graph()
        for vertex_id in implied_vertex_ids(vertex_specs, edge_specs):
            graph.add_vertex(vertex_id, data.get(vertex_id))
        for spec in edge_specs:
            graph.add_edge(spec.from_id, spec.to_id, spec.weight)
        return graph

    @staticmethod
    def _describe(graph: Graph[Any]) -> list[dict[str, Any]]:
        return [
            {
                "id": v.id,
                "data": v.data,
                "edges": [{"to": e.target_id, "weight": e.weight} for e in v.edges],
            }
            for v in graph
        ]

    # ------------------------------------------------------------------
    # show: adjacency listing
    # ------------------------------------------------------------------

    def show(self, vertex_tokens: list[str], edge_tokens: list[str]) -> ServiceResult:
        """Build the graph and return its adjacency listing."""
        with graph_context("show", directed=self._settings.graph.directed):
            try:
                graph = self.build(vertex_tokens, edge_tokens)
            except GraphError as exc:
                return self._failure("show", exc)

        return ServiceResult(
            ok=True,
            op="show",
            data={
                "directed": graph.directed,
                "vertex_count": len(graph),
                "edge_count": graph.edge_count(),
                "text": graph.format_graph(),
                "items": self._describe(graph),
            },
        )

    # ------------------------------------------------------------------
    # traverse: bounded BFS / DFS
    # ------------------------------------------------------------------

    def traverse(
        self,
        start_id: int,
        vertex_tokens: list[str],
        edge_tokens: list[str],
        *,
        strategy: str | None = None,
        limit: int | None = None,
    ) -> ServiceResult:
        """Walk the graph from *start_id*, yielding at most *limit* vertices.

        The iterators keep no visited set, so the walk revisits vertices
        and only ends on its own when the frontier drains. A walk cut
        short by *limit* carries a warning.

        Args:
            start_id: Id of the start vertex.
            strategy: ``"bfs"`` or ``"dfs"``; defaults to ``[traversal] strategy``.
            limit: Maximum vertices to yield; defaults to ``[traversal] default_limit``.
        """
        op = strategy or self._settings.traversal.strategy
        if op not in STRATEGIES:
            msg = f"Unknown traversal strategy '{op}'"
            raise ValueError(msg)
        if limit is None:
            limit = self._settings.traversal.default_limit
        limit = max(1, limit)

        with graph_context(op, directed=self._settings.graph.directed, start=start_id):
            try:
                graph = self.build(vertex_tokens, edge_tokens)
                start = graph.find_vertex(start_id)
                walk = graph.bfs(start) if op == "bfs" else graph.dfs(start)
                visited = list(islice(walk, limit))
            except GraphError as exc:
                return self._failure(op, exc)

        exhausted = not walk.has_next()
        warnings: list[str] = []
        if not exhausted:
            warnings.append(f"Traversal stopped after {limit} vertices; frontier not empty")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "start": start_id,
                "directed": graph.directed,
                "count": len(visited),
                "exhausted": exhausted,
                "items": [{"id": v.id, "data": v.data} for v in visited],
            },
            warnings=warnings,
            meta={"limit": limit},
        )
