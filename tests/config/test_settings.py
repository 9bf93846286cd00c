"""Tests for AdjSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from adjgraph.config.settings import AdjSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ADJGRAPH_CONFIG", "ADJGRAPH_GRAPH__DIRECTED", "ADJGRAPH_TRAVERSAL__DEFAULT_LIMIT"):
        monkeypatch.delenv(name, raising=False)


class TestAdjSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = AdjSettings.from_cli(cwd=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.graph.directed is False
        assert settings.traversal.default_limit == 20
        assert settings.output.weight_precision == 2

    def test_frozen(self, tmp_path: Path) -> None:
        settings = AdjSettings.from_cli(cwd=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "adjgraph.toml"
        toml.write_text("[graph]\ndirected = true\ndefault_weight = 1.5\n")
        settings = AdjSettings.from_cli(cwd=tmp_path)
        assert settings.graph.directed is True
        assert settings.graph.default_weight == 1.5
        assert settings.graph.cascade_removal is False  # default preserved
        assert settings.config_path == toml.resolve()

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "adjgraph.toml").write_text("")
        settings = AdjSettings.from_cli(cwd=tmp_path)
        assert settings.traversal.strategy == "bfs"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[traversal]\nstrategy = "dfs"\n')
        settings = AdjSettings.from_cli(config_path=str(custom), cwd=tmp_path)
        assert settings.traversal.strategy == "dfs"
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "adjgraph.toml").write_text("[graph\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            AdjSettings.from_cli(cwd=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "adjgraph.toml").write_text("[traversal]\ndefault_limit = 5\n")
        monkeypatch.setenv("ADJGRAPH_TRAVERSAL__DEFAULT_LIMIT", "7")
        settings = AdjSettings.from_cli(cwd=tmp_path)
        assert settings.traversal.default_limit == 7

    def test_cli_flag_overrides_toml(self, tmp_path: Path) -> None:
        (tmp_path / "adjgraph.toml").write_text("[graph]\ndirected = true\n")
        settings = AdjSettings.from_cli(cwd=tmp_path, directed=False)
        assert settings.graph.directed is False

    def test_directed_none_keeps_config(self, tmp_path: Path) -> None:
        (tmp_path / "adjgraph.toml").write_text("[graph]\ndirected = true\n")
        settings = AdjSettings.from_cli(cwd=tmp_path, directed=None)
        assert settings.graph.directed is True

    def test_directed_flag_keeps_other_graph_fields(self, tmp_path: Path) -> None:
        (tmp_path / "adjgraph.toml").write_text("[graph]\ndefault_weight = 3.0\n")
        settings = AdjSettings.from_cli(cwd=tmp_path, directed=True)
        assert settings.graph.directed is True
        assert settings.graph.default_weight == 3.0
