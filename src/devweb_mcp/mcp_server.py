from __future__ import annotations

from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from devweb_mcp.logging_config import get_logger
from devweb_mcp.server import (
    SERVER_NAME,
    ProjectContext,
    get_enabled_categories,
    get_enabled_tools,
)
from devweb_mcp.tools import (
    register_git_tools,
    register_project_tools,
    register_search_tools,
)

logger = get_logger("mcp_server")

INSTRUCTIONS = """\
This MCP server provides read-only tools for inspecting the developer-web
project, a Circle Web3 developer platform monorepo.

Available capabilities:
- Search for files by glob pattern, find React components
- List GraphQL schemas under features/
- Render the project directory tree
- Find unit, integration and e2e test files
- Summarize package manifests
- Summarize the current branch against a base branch (git)
- Build a PR-description prompt from the branch changes

The project structure includes:
- apps/ - Next.js applications
- packages/ - Shared libraries and utilities
- features/ - Feature-specific code and GraphQL schemas
- deploy/ - Terraform infrastructure configurations
- docs/ - Documentation

Every tool answers with text. A reply starting with "Error" describes a
failure (missing path, git error, unparseable manifest) rather than a
result.
"""

READ_ONLY = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=False,
)


def create_server(
    root: Path | str | None = None,
    context: ProjectContext | None = None,
) -> FastMCP:
    """Create and configure the developer-web MCP server.

    Args:
        root: Project root (default: DEVWEB_PROJECT_ROOT env var)
        context: Prebuilt project context; takes precedence over ``root``

    Returns:
        Configured FastMCP server instance

    Raises:
        ConfigError: if no usable project root is configured
    """
    state = context or ProjectContext.from_env(root)
    logger.info("project root resolved", root=str(state.root))

    mcp = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)

    # -----------------------------------------------------------------
    # Conditional tool registration based on DEVWEB_TOOLS env var
    # -----------------------------------------------------------------
    _enabled_tools = get_enabled_tools()
    _enabled_categories = get_enabled_categories()
    logger.info(
        "tool categories enabled",
        categories=", ".join(sorted(_enabled_categories)),
        tools=len(_enabled_tools),
    )

    def tool_if_enabled(func):
        """Decorator that only registers tool if its category is enabled.

        Uses the function name to look up whether it should be registered.
        If the tool is not in any enabled category, returns the function
        as-is without registering it as an MCP tool.
        """
        if func.__name__ in _enabled_tools:
            return mcp.tool(annotations=READ_ONLY, structured_output=False)(
                func
            )
        return func

    register_search_tools(mcp, state, tool_if_enabled)
    register_project_tools(mcp, state, tool_if_enabled)
    register_git_tools(mcp, state, tool_if_enabled)

    return mcp
