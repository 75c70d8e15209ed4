"""Search and discovery tools for the developer-web MCP server."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Annotated, Literal

from mcp.types import TextContent
from pydantic import Field

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from devweb_mcp.server.state import ProjectContext

from devweb_mcp import handlers
from devweb_mcp.server import run_tool


def register_search_tools(
    mcp: FastMCP,
    state: ProjectContext,
    tool_if_enabled: Callable,
) -> None:
    """Register file, component, schema and test discovery tools.

    Args:
        mcp: FastMCP server instance
        state: Resolved project context
        tool_if_enabled: Decorator for conditional tool registration
    """

    @tool_if_enabled
    async def search_files(
        pattern: Annotated[
            str,
            Field(
                description=(
                    "Glob pattern to search for files "
                    "(e.g., '*.tsx', '**/components/**')"
                ),
                min_length=1,
            ),
        ],
        directory: Annotated[
            str,
            Field(
                description=(
                    "Directory to search in, relative to the project root; "
                    "comma-separate several to search each in turn"
                ),
            ),
        ] = ".",
    ) -> list[TextContent]:
        """Search for files matching a glob pattern in the project.

        Results are paths relative to the searched directory. When several
        directories are given, each result is prefixed with its directory.
        """
        return await run_tool(
            "searching files", handlers.search_files, state, pattern, directory
        )

    @tool_if_enabled
    async def find_components(
        name: Annotated[
            str | None,
            Field(description="Component name to search for (optional)"),
        ] = None,
        directory: Annotated[
            str,
            Field(
                description=(
                    "Comma-separated directories to search "
                    "(default: 'apps,packages')"
                ),
            ),
        ] = "apps,packages",
    ) -> list[TextContent]:
        """Find React components (.tsx/.jsx files) in the project."""
        return await run_tool(
            "finding components",
            handlers.find_components,
            state,
            name,
            directory,
        )

    @tool_if_enabled
    async def get_graphql_schemas(
        feature: Annotated[
            str | None,
            Field(
                description=(
                    "Specific feature under features/ to get schemas for "
                    "(optional)"
                ),
            ),
        ] = None,
    ) -> list[TextContent]:
        """Get GraphQL schema files under features/.

        Each schema is shown in a fenced block, cut to its first 500
        characters.
        """
        return await run_tool(
            "getting GraphQL schemas",
            handlers.get_graphql_schemas,
            state,
            feature,
        )

    @tool_if_enabled
    async def find_test_files(
        test_type: Annotated[
            Literal["unit", "integration", "e2e", "all"],
            Field(description="Type of test files to find"),
        ] = "all",
    ) -> list[TextContent]:
        """Find test files in the project by test type."""
        return await run_tool(
            "finding test files", handlers.find_test_files, state, test_type
        )
