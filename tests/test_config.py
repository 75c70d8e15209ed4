"""Tests for environment configuration and project context."""

from pathlib import Path

import pytest

from devweb_mcp.errors import ConfigError
from devweb_mcp.git import GitClient
from devweb_mcp.server import config
from devweb_mcp.server.state import ProjectContext


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        config.ENV_PROJECT_ROOT,
        config.ENV_TOOLS,
        config.ENV_GIT_TIMEOUT,
        config.ENV_MAX_DIFF_CHARS,
    ):
        monkeypatch.delenv(name, raising=False)


class TestToolCategories:
    def test_default_enables_everything(self):
        tools = config.get_enabled_tools()
        assert len(tools) == 9
        assert "get_project_structure" in tools
        assert "generate_pr_description" in tools

    def test_all_keyword(self, monkeypatch):
        monkeypatch.setenv(config.ENV_TOOLS, "ALL")
        assert config.get_enabled_categories() == set(config.TOOL_CATEGORIES)

    def test_subset(self, monkeypatch):
        monkeypatch.setenv(config.ENV_TOOLS, "project, git")
        assert config.get_enabled_tools() == {
            "get_project_structure",
            "get_package_info",
            "get_git_diff",
            "get_pr_ai_prompt",
            "generate_pr_description",
        }

    def test_unknown_category_ignored(self, monkeypatch):
        monkeypatch.setenv(config.ENV_TOOLS, "bogus")
        assert config.get_enabled_tools() == set()


class TestNumericSettings:
    def test_defaults(self):
        assert config.get_git_timeout() == config.DEFAULT_GIT_TIMEOUT
        assert config.get_max_diff_chars() == config.DEFAULT_MAX_DIFF_CHARS

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv(config.ENV_GIT_TIMEOUT, "2.5")
        monkeypatch.setenv(config.ENV_MAX_DIFF_CHARS, "1000")
        assert config.get_git_timeout() == 2.5
        assert config.get_max_diff_chars() == 1000

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_bad_timeout(self, monkeypatch, value):
        monkeypatch.setenv(config.ENV_GIT_TIMEOUT, value)
        with pytest.raises(ConfigError):
            config.get_git_timeout()

    @pytest.mark.parametrize("value", ["1.5", "0"])
    def test_bad_max_diff_chars(self, monkeypatch, value):
        monkeypatch.setenv(config.ENV_MAX_DIFF_CHARS, value)
        with pytest.raises(ConfigError):
            config.get_max_diff_chars()


class TestResolveProjectRoot:
    def test_missing_configuration_is_fatal(self):
        with pytest.raises(ConfigError, match="no project root"):
            config.resolve_project_root()

    def test_from_env(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv(config.ENV_PROJECT_ROOT, str(tmp_path))
        assert config.resolve_project_root() == tmp_path.resolve()

    def test_explicit_root_wins(self, monkeypatch, tmp_path: Path):
        other = tmp_path / "other"
        other.mkdir()
        monkeypatch.setenv(config.ENV_PROJECT_ROOT, str(tmp_path))
        assert config.resolve_project_root(other) == other.resolve()

    def test_root_must_be_directory(self, tmp_path: Path):
        file = tmp_path / "file.txt"
        file.write_text("")
        with pytest.raises(ConfigError, match="not a directory"):
            config.resolve_project_root(file)


class TestProjectContext:
    def test_from_env(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv(config.ENV_GIT_TIMEOUT, "5")
        monkeypatch.setenv(config.ENV_MAX_DIFF_CHARS, "123")

        ctx = ProjectContext.from_env(tmp_path)

        assert ctx.root == tmp_path.resolve()
        assert isinstance(ctx.vcs, GitClient)
        assert ctx.vcs.root == ctx.root
        assert ctx.vcs.timeout == 5.0
        assert ctx.max_diff_chars == 123

    def test_frozen(self, tmp_path: Path):
        ctx = ProjectContext.from_env(tmp_path)
        with pytest.raises(AttributeError):
            ctx.root = Path("/")
