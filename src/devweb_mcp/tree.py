"""Depth-bounded directory tree rendering.

Lines look like::

    📁 apps/
      📁 web/
        📄 package.json
    📄 README.md

Each line is one entry, indented two spaces per level below the start
directory. Children appear in ``os.listdir`` order, which is not sorted
and differs across platforms and filesystems.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

from devweb_mcp.errors import translate_os_error
from devweb_mcp.fsquery import DEPENDENCY_DIR_NAME, require_directory

INDENT = "  "
DIR_MARKER = "📁"
FILE_MARKER = "📄"
DEFAULT_MAX_DEPTH = 3


def is_excluded(name: str) -> bool:
    """Dot-entries and the dependency cache are never listed or walked."""
    return name.startswith(".") or name == DEPENDENCY_DIR_NAME


def render_tree(
    root: Path,
    directory: str = ".",
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[str]:
    """Render the subtree at ``root / directory`` as indented lines.

    Depth 0 is the start directory's immediate children; a directory at
    depth ``max_depth - 1`` is listed but its children are not.

    Any failure to list or stat an entry aborts the whole render, so a
    caller never receives a partial tree.

    Args:
        root: Absolute project root
        directory: Start directory relative to ``root``
        max_depth: Number of levels to render (must be positive)

    Raises:
        NotFoundError: start directory missing, not a directory, or an
            entry vanished / is a broken link
        AccessError: permission denied on any visited entry
        ValueError: ``max_depth`` is not positive
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be positive, got {max_depth}")

    start = require_directory(root, directory)
    lines: list[str] = []
    _walk(start, root.resolve(), 0, max_depth, lines)
    return lines


def _walk(
    path: Path,
    root: Path,
    depth: int,
    max_depth: int,
    lines: list[str],
) -> None:
    if depth >= max_depth:
        return

    try:
        names = os.listdir(path)
    except OSError as e:
        raise translate_os_error(e, _display(path, root)) from e

    prefix = INDENT * depth
    for name in names:
        if is_excluded(name):
            continue

        entry = path / name
        try:
            mode = os.stat(entry).st_mode
        except OSError as e:
            raise translate_os_error(e, _display(entry, root)) from e

        if stat.S_ISDIR(mode):
            lines.append(f"{prefix}{DIR_MARKER} {name}/")
            _walk(entry, root, depth + 1, max_depth, lines)
        else:
            lines.append(f"{prefix}{FILE_MARKER} {name}")


def _display(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix() or "."
    except ValueError:
        return str(path)
