"""Tests for config file discovery."""

from pathlib import Path

import pytest

from mcpz_server.lib import find_config_path


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """home/project/src/pkg directory tree."""
    deep = tmp_path / "home" / "project" / "src" / "pkg"
    deep.mkdir(parents=True)
    return tmp_path


class TestFindConfigPath:
    """Test find_config_path."""

    def test_finds_in_cwd(self, tree: Path):
        project = tree / "home" / "project"
        (project / ".mcp.json").write_text("{}")

        assert find_config_path(cwd=project, stop_dir=tree / "home") == project / ".mcp.json"

    def test_walks_up_to_parent(self, tree: Path):
        project = tree / "home" / "project"
        (project / ".mcp.json").write_text("{}")

        found = find_config_path(cwd=project / "src" / "pkg", stop_dir=tree / "home")

        assert found == project / ".mcp.json"

    def test_stop_dir_is_inclusive(self, tree: Path):
        home = tree / "home"
        (home / ".mcp.json").write_text("{}")

        assert find_config_path(cwd=home / "project" / "src", stop_dir=home) == home / ".mcp.json"

    def test_does_not_search_above_stop_dir(self, tree: Path):
        (tree / ".mcp.json").write_text("{}")

        with pytest.raises(FileNotFoundError, match="Searched from"):
            find_config_path(cwd=tree / "home" / "project", stop_dir=tree / "home")

    def test_custom_filename(self, tree: Path):
        project = tree / "home" / "project"
        (project / "servers.json").write_text("{}")

        found = find_config_path("servers.json", cwd=project / "src", stop_dir=tree / "home")

        assert found == project / "servers.json"

    def test_relative_path_config(self, tree: Path):
        project = tree / "home" / "project"
        (project / "conf").mkdir()
        (project / "conf" / "mcp.json").write_text("{}")

        assert find_config_path("conf/mcp.json", cwd=project) == project / "conf" / "mcp.json"

    def test_directory_config_uses_default_name(self, tree: Path):
        project = tree / "home" / "project"
        (project / ".mcp.json").write_text("{}")

        assert find_config_path(str(project), cwd=tree) == project / ".mcp.json"

    def test_missing_path_config(self, tree: Path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            find_config_path(str(tree / "nope.json"))

    def test_directory_without_default_file(self, tree: Path):
        with pytest.raises(FileNotFoundError, match=".mcp.json"):
            find_config_path(str(tree / "home"))
