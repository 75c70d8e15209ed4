"""Tree command - render the project tree without a server."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from devweb_mcp import console
from devweb_mcp.errors import DevwebError
from devweb_mcp.server.config import resolve_project_root
from devweb_mcp.tree import DEFAULT_MAX_DEPTH, render_tree


@dataclass
class Tree:
    """Print the directory tree get_project_structure would return."""

    root: Path | None = field(
        default=None,
        metadata={"help": "Project root (default: $DEVWEB_PROJECT_ROOT)"},
    )
    directory: str = field(
        default=".",
        metadata={"help": "Directory relative to the project root"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum depth to traverse"},
    )

    def run(self) -> int:
        """Execute the tree command."""
        if self.max_depth < 1:
            console.error("--max-depth must be positive")
            return 2
        try:
            root = resolve_project_root(self.root)
            lines = render_tree(root, self.directory, self.max_depth)
        except DevwebError as e:
            console.error(str(e))
            return 1

        for line in lines:
            console.line(line)
        return 0
