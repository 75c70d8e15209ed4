"""Server configuration constants and tool category management."""

from __future__ import annotations

import os
from pathlib import Path

from devweb_mcp.errors import ConfigError

SERVER_NAME = "developer-web-mcp"

# Environment variable names
ENV_PROJECT_ROOT = "DEVWEB_PROJECT_ROOT"
ENV_TOOLS = "DEVWEB_TOOLS"
ENV_GIT_TIMEOUT = "DEVWEB_GIT_TIMEOUT"
ENV_MAX_DIFF_CHARS = "DEVWEB_MAX_DIFF_CHARS"

DEFAULT_GIT_TIMEOUT = 30.0
DEFAULT_MAX_DIFF_CHARS = 50_000

# relative to the project root
PR_TEMPLATE_PATH = Path(".github") / "pull_request_template.md"

# ---------------------------------------------------------------------------
# Tool Categories - controls which tools are exposed via DEVWEB_TOOLS env
# ---------------------------------------------------------------------------
# Default: all categories
# Set DEVWEB_TOOLS=search,project to narrow what the host sees

TOOL_CATEGORIES: dict[str, set[str]] = {
    # Pattern-based file discovery
    "search": {
        "search_files",
        "find_components",
        "get_graphql_schemas",
        "find_test_files",
    },
    # Layout and manifest inspection
    "project": {
        "get_project_structure",
        "get_package_info",
    },
    # Version-control summaries and PR prompt assembly
    "git": {
        "get_git_diff",
        "get_pr_ai_prompt",
        "generate_pr_description",
    },
}


def get_enabled_categories() -> set[str]:
    """Get enabled tool categories from DEVWEB_TOOLS env var.

    Returns:
        Set of enabled category names. Defaults to every category.
    """
    env = os.environ.get(ENV_TOOLS, "").strip()
    if not env or env.lower() == "all":
        return set(TOOL_CATEGORIES.keys())
    return {c.strip().lower() for c in env.split(",") if c.strip()}


def get_enabled_tools() -> set[str]:
    """Get set of enabled tool names based on enabled categories."""
    categories = get_enabled_categories()
    tools: set[str] = set()
    for cat in categories:
        if cat in TOOL_CATEGORIES:
            tools.update(TOOL_CATEGORIES[cat])
    return tools


def get_git_timeout() -> float:
    raw = os.environ.get(ENV_GIT_TIMEOUT, "").strip()
    if not raw:
        return DEFAULT_GIT_TIMEOUT
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{ENV_GIT_TIMEOUT} must be a number: {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{ENV_GIT_TIMEOUT} must be positive: {raw!r}")
    return value


def get_max_diff_chars() -> int:
    raw = os.environ.get(ENV_MAX_DIFF_CHARS, "").strip()
    if not raw:
        return DEFAULT_MAX_DIFF_CHARS
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(
            f"{ENV_MAX_DIFF_CHARS} must be an integer: {raw!r}"
        ) from e
    if value <= 0:
        raise ConfigError(f"{ENV_MAX_DIFF_CHARS} must be positive: {raw!r}")
    return value


def resolve_project_root(root: Path | str | None = None) -> Path:
    """Resolve the project root once at startup.

    Args:
        root: Explicit root (default: DEVWEB_PROJECT_ROOT env var)

    Raises:
        ConfigError: if no root is configured or it is not a directory
    """
    if root is None:
        env_root = os.environ.get(ENV_PROJECT_ROOT, "").strip()
        if not env_root:
            raise ConfigError(
                f"no project root configured: pass --root or set "
                f"{ENV_PROJECT_ROOT}"
            )
        root = env_root

    resolved = Path(root).expanduser().resolve()
    if not resolved.is_dir():
        raise ConfigError(f"project root is not a directory: {resolved}")
    return resolved
