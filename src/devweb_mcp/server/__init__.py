"""Server infrastructure: configuration, context, models and envelopes."""

from devweb_mcp.server.config import (
    PR_TEMPLATE_PATH,
    SERVER_NAME,
    TOOL_CATEGORIES,
    get_enabled_categories,
    get_enabled_tools,
    resolve_project_root,
)
from devweb_mcp.server.envelope import run_tool, text_result
from devweb_mcp.server.models import GitSummary, GraphQLSchemaFile, PackageInfo
from devweb_mcp.server.state import ProjectContext

__all__ = [
    "PR_TEMPLATE_PATH",
    "SERVER_NAME",
    "TOOL_CATEGORIES",
    "GitSummary",
    "GraphQLSchemaFile",
    "PackageInfo",
    "ProjectContext",
    "get_enabled_categories",
    "get_enabled_tools",
    "resolve_project_root",
    "run_tool",
    "text_result",
]
