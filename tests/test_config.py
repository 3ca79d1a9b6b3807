"""Tests for the configuration module."""

from pathlib import Path

import pytest

from szyk._cli.config import (
    ConfigError,
    SzykConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "graphs" / "crafting"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject


class TestLoadConfig:
    """Tests for loading [tool.szyk]."""

    def test_graph_path_is_resolved_from_project_root(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.szyk]
graph = "graphs/crafting.toml"
""",
        )

        config = load_config(pyproject)

        assert config.graph == tmp_path / "graphs/crafting.toml"
        assert config.target is None
        assert config.project_root == tmp_path

    def test_absolute_graph_path_is_kept(self, tmp_path: Path) -> None:
        graph = tmp_path / "elsewhere" / "graph.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f'[tool.szyk]\ngraph = "{graph.as_posix()}"\n')

        config = load_config(pyproject)

        assert config.graph == graph

    def test_full_configuration(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.szyk]
graph = "graph.toml"
target = "wooden pickaxe"
""",
        )

        config = load_config(pyproject)

        assert config == SzykConfig(
            graph=tmp_path / "graph.toml",
            target="wooden pickaxe",
            project_root=tmp_path,
        )


class TestLoadConfigEmptySection:
    """Tests for empty or missing configuration."""

    def test_no_tool_szyk_section(self, tmp_path: Path) -> None:
        """Should return empty config when no [tool.szyk] section."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[project]
name = "test"
""",
        )

        config = load_config(pyproject)

        assert config.graph is None
        assert config.target is None
        assert config.project_root == tmp_path

    def test_empty_tool_szyk_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.szyk]\n")

        config = load_config(pyproject)

        assert config.graph is None
        assert config.target is None


class TestLoadConfigErrors:
    """Tests for configuration error handling."""

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("invalid toml [[[")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_invalid_graph_type_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.szyk]\ngraph = 123\n")

        with pytest.raises(ConfigError, match="expected string path"):
            load_config(pyproject)

    def test_invalid_target_type_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.szyk]\ntarget = ['a', 'b']\n")

        with pytest.raises(ConfigError, match="target: expected string"):
            load_config(pyproject)


class TestGetConfig:
    def test_reads_from_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.szyk]\ntarget = "planks"\n')
        monkeypatch.chdir(tmp_path)

        config = get_config()

        assert config.target == "planks"


class TestSzykConfigDataclass:
    def test_default_values(self) -> None:
        config = SzykConfig()

        assert config.graph is None
        assert config.target is None
        assert config.project_root is None

    def test_frozen(self) -> None:
        config = SzykConfig()

        with pytest.raises(AttributeError):
            config.target = "wood"  # type: ignore[misc]
