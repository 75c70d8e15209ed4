"""Git diff and PR prompt tools for the developer-web MCP server."""

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

BaseBranch = Annotated[
    str,
    Field(description="Branch to compare against", min_length=1),
]
Ticket = Annotated[
    str | None,
    Field(description="Ticket identifier to reference (e.g., 'WEB-1234')"),
]


def register_git_tools(
    mcp: FastMCP,
    state: ProjectContext,
    tool_if_enabled: Callable,
) -> None:
    """Register diff summary and PR prompt tools.

    Args:
        mcp: FastMCP server instance
        state: Resolved project context
        tool_if_enabled: Decorator for conditional tool registration
    """

    @tool_if_enabled
    async def get_git_diff(
        base_branch: BaseBranch = "main",
        include_commits: Annotated[
            bool, Field(description="Include the commit log")
        ] = True,
        include_diff: Annotated[
            bool, Field(description="Include the full diff text")
        ] = False,
    ) -> list[TextContent]:
        """Summarize the current branch against a base branch.

        Reports the branch, changed files and, optionally, commits and
        diff. Commits or diff that cannot be read are left out.
        """
        return await run_tool(
            "getting git diff",
            handlers.get_git_diff,
            state,
            base_branch,
            include_commits,
            include_diff,
        )

    @tool_if_enabled
    async def get_pr_ai_prompt(
        base_branch: BaseBranch = "main",
        ticket: Ticket = None,
    ) -> list[TextContent]:
        """Build a prompt for writing this branch's PR description.

        Combines the PR template (.github/pull_request_template.md or a
        built-in default) with commits, changed files and diff. Returns
        the prompt text only; no model is called.
        """
        return await run_tool(
            "building PR prompt",
            handlers.get_pr_ai_prompt,
            state,
            base_branch,
            ticket,
        )

    @tool_if_enabled
    async def generate_pr_description(
        base_branch: BaseBranch = "main",
        ticket: Ticket = None,
    ) -> list[TextContent]:
        """Alias of get_pr_ai_prompt: returns the PR-description prompt."""
        return await run_tool(
            "building PR prompt",
            handlers.get_pr_ai_prompt,
            state,
            base_branch,
            ticket,
        )
