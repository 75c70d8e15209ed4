"""Per-process project context shared by every tool."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from devweb_mcp.git import GitClient, VersionControl
from devweb_mcp.server.config import (
    get_git_timeout,
    get_max_diff_chars,
    resolve_project_root,
)


@dataclass(frozen=True)
class ProjectContext:
    """Resolved project root plus collaborators, fixed at startup.

    Handlers resolve every relative path against ``root``; nothing in
    the server changes the process working directory.
    """

    root: Path
    vcs: VersionControl = field(repr=False)
    max_diff_chars: int

    @classmethod
    def from_env(cls, root: Path | str | None = None) -> ProjectContext:
        """Build a context from an explicit root or DEVWEB_PROJECT_ROOT."""
        resolved = resolve_project_root(root)
        return cls(
            root=resolved,
            vcs=GitClient(resolved, timeout=get_git_timeout()),
            max_diff_chars=get_max_diff_chars(),
        )
