"""Tool handlers.

Each handler takes the injected ProjectContext plus validated arguments,
returns Markdown text, and raises DevwebError subclasses on failure.
"""

from devweb_mcp.handlers.git import get_git_diff, get_pr_ai_prompt
from devweb_mcp.handlers.project import get_package_info, get_project_structure
from devweb_mcp.handlers.search import (
    find_components,
    find_test_files,
    get_graphql_schemas,
    search_files,
)

__all__ = [
    "find_components",
    "find_test_files",
    "get_git_diff",
    "get_graphql_schemas",
    "get_package_info",
    "get_pr_ai_prompt",
    "get_project_structure",
    "search_files",
]
