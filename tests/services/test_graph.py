"""Tests for GraphService: build, show, and traverse."""

from __future__ import annotations

import pytest

from adjgraph.config.settings import AdjSettings
from adjgraph.domain.errors import SpecError
from adjgraph.services.graph import GraphService


def _directed(settings: AdjSettings) -> AdjSettings:
    graph = settings.graph.model_copy(update={"directed": True})
    return settings.model_copy(update={"graph": graph})


class TestBuild:
    def test_vertices_in_first_mention_order(self, settings: AdjSettings) -> None:
        graph = GraphService(settings).build(["5=five"], ["3-1", "1-5"])
        assert [v.id for v in graph] == [5, 3, 1]
        assert graph.find_vertex(5).data == "five"
        assert graph.find_vertex(3).data is None

    def test_first_vertex_spec_wins(self, settings: AdjSettings) -> None:
        graph = GraphService(settings).build(["1=a", "1=b"], [])
        assert len(graph) == 1
        assert graph.find_vertex(1).data == "a"

    def test_uses_config_default_weight(self, settings: AdjSettings) -> None:
        graph_cfg = settings.graph.model_copy(update={"default_weight": 4.0})
        custom = settings.model_copy(update={"graph": graph_cfg})
        graph = GraphService(custom).build([], ["1-2", "1-3:1"])
        assert [e.weight for e in graph.find_vertex(1).edges] == [4.0, 1.0]

    def test_malformed_spec_raises(self, settings: AdjSettings) -> None:
        with pytest.raises(SpecError):
            GraphService(settings).build([], ["1to2"])


class TestShow:
    def test_listing(self, settings: AdjSettings) -> None:
        result = GraphService(settings).show([], ["1-2:1.5", "1-3:2.0"])
        assert result.ok
        assert result.op == "show"
        assert result.data["text"] == "1: 2[1.50] 3[2.00]\n2: 1[1.50]\n3: 1[2.00]\n"
        assert result.data["vertex_count"] == 3
        assert result.data["edge_count"] == 4
        assert result.data["directed"] is False
        assert result.data["items"][0] == {
            "id": 1,
            "data": None,
            "edges": [{"to": 2, "weight": 1.5}, {"to": 3, "weight": 2.0}],
        }

    def test_self_loop_fails_undirected(self, settings: AdjSettings) -> None:
        result = GraphService(settings).show([], ["1-1"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "SELF_LOOP"
        assert result.error.detail == {"vertex_id": 1}

    def test_self_loop_allowed_directed(self, settings: AdjSettings) -> None:
        result = GraphService(_directed(settings)).show([], ["1-1"])
        assert result.ok
        assert result.data["text"] == "1: 1[0.00]\n"

    def test_invalid_spec(self, settings: AdjSettings) -> None:
        result = GraphService(settings).show(["x"], [])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_SPEC"


class TestTraverse:
    EDGES = ["1-2", "1-3", "2-4"]

    def test_bfs_bounded(self, settings: AdjSettings) -> None:
        result = GraphService(settings).traverse(1, [], self.EDGES, strategy="bfs", limit=5)
        assert result.ok
        assert result.op == "bfs"
        assert [i["id"] for i in result.data["items"]] == [1, 2, 3, 1, 4]
        assert result.data["exhausted"] is False
        assert result.meta == {"limit": 5}
        assert len(result.warnings) == 1

    def test_dfs_directed_exhausts(self, settings: AdjSettings) -> None:
        service = GraphService(_directed(settings))
        result = service.traverse(1, [], self.EDGES, strategy="dfs")
        assert [i["id"] for i in result.data["items"]] == [1, 3, 2, 4]
        assert result.data["exhausted"] is True
        assert result.warnings == []

    def test_exact_limit_on_finite_walk_is_exhausted(self, settings: AdjSettings) -> None:
        service = GraphService(_directed(settings))
        result = service.traverse(1, [], self.EDGES, strategy="bfs", limit=4)
        assert result.data["count"] == 4
        assert result.data["exhausted"] is True

    def test_defaults_from_config(self, settings: AdjSettings) -> None:
        result = GraphService(settings).traverse(1, [], self.EDGES)
        assert result.op == settings.traversal.strategy
        assert result.data["count"] == settings.traversal.default_limit

    def test_unknown_start(self, settings: AdjSettings) -> None:
        result = GraphService(settings).traverse(9, [], self.EDGES, strategy="dfs")
        assert not result.ok
        assert result.op == "dfs"
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_unknown_strategy(self, settings: AdjSettings) -> None:
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            GraphService(settings).traverse(1, [], self.EDGES, strategy="astar")

    def test_vertex_data_carried(self, settings: AdjSettings) -> None:
        result = GraphService(settings).traverse(1, ["1=root"], [], limit=3)
        assert result.data["items"] == [{"id": 1, "data": "root"}]
        assert result.data["exhausted"] is True
