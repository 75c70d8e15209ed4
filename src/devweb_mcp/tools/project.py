"""Project layout and manifest tools for the developer-web MCP server."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Annotated

from mcp.types import TextContent
from pydantic import Field

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from devweb_mcp.server.state import ProjectContext

from devweb_mcp import handlers
from devweb_mcp.server import run_tool


def register_project_tools(
    mcp: FastMCP,
    state: ProjectContext,
    tool_if_enabled: Callable,
) -> None:
    """Register structure and package tools.

    Args:
        mcp: FastMCP server instance
        state: Resolved project context
        tool_if_enabled: Decorator for conditional tool registration
    """

    @tool_if_enabled
    async def get_project_structure(
        directory: Annotated[
            str,
            Field(
                description=(
                    "Directory to render, relative to the project root "
                    "(default: project root)"
                ),
            ),
        ] = ".",
        max_depth: Annotated[
            int,
            Field(description="Maximum depth to traverse", ge=1),
        ] = 3,
    ) -> list[TextContent]:
        """Get the project directory tree.

        Dot-entries and node_modules are skipped. Directories at the
        depth limit are listed without their contents.
        """
        return await run_tool(
            "getting project structure",
            handlers.get_project_structure,
            state,
            directory,
            max_depth,
        )

    @tool_if_enabled
    async def get_package_info(
        package: Annotated[
            str | None,
            Field(
                description=(
                    "Specific package name to get info for (optional); "
                    "also lists its dependency names"
                ),
            ),
        ] = None,
    ) -> list[TextContent]:
        """Get information about packages (package.json / pyproject.toml)."""
        return await run_tool(
            "getting package info", handlers.get_package_info, state, package
        )
