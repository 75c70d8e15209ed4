"""MCP tool modules.

Each module exports a register_*_tools function that registers
tools with the MCP server using the provided state and decorator.
"""

from devweb_mcp.tools.git import register_git_tools
from devweb_mcp.tools.project import register_project_tools
from devweb_mcp.tools.search import register_search_tools

__all__ = [
    "register_git_tools",
    "register_project_tools",
    "register_search_tools",
]
