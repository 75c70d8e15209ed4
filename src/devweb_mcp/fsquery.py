"""Root-scoped filesystem queries.

Everything here is blocking; handlers call it through
``asyncio.to_thread``. Globbing uses the usual shell conventions:
results are relative to the search directory, ``**`` recurses, and
dot-entries are not matched.
"""

from __future__ import annotations

import glob
import os
import stat
from pathlib import Path, PurePosixPath

from devweb_mcp.errors import AccessError, NotFoundError, translate_os_error

# dependency cache directory, never walked or reported
DEPENDENCY_DIR_NAME = "node_modules"


def resolve_in_root(root: Path, relative: str | os.PathLike[str]) -> Path:
    """Resolve ``relative`` against ``root``, refusing to escape it.

    Raises:
        AccessError: if the resolved path lies outside ``root``
    """
    base = root.resolve()
    candidate = (base / relative).resolve()
    if not candidate.is_relative_to(base):
        raise AccessError(f"path escapes project root: {relative}")
    return candidate


def require_directory(root: Path, relative: str) -> Path:
    """Resolve ``relative`` and require it to be an existing directory."""
    path = resolve_in_root(root, relative)
    try:
        mode = path.stat().st_mode
    except OSError as e:
        raise translate_os_error(e, relative) from e
    if not stat.S_ISDIR(mode):
        raise NotFoundError(f"not a directory: {relative}")
    return path


def in_dependency_dir(relative: str) -> bool:
    """Check whether a relative match lives under ``node_modules``."""
    return DEPENDENCY_DIR_NAME in Path(relative).parts


def check_pattern(pattern: str) -> None:
    """Refuse glob patterns that could match outside the search directory.

    Raises:
        AccessError: if ``pattern`` is absolute or has a ``..`` segment
    """
    posix = PurePosixPath(pattern.replace("\\", "/"))
    if posix.is_absolute() or os.path.isabs(pattern) or ".." in posix.parts:
        raise AccessError(f"pattern escapes search directory: {pattern}")


def glob_relative(
    base: Path,
    pattern: str,
    files_only: bool = False,
) -> list[str]:
    """Match ``pattern`` under ``base`` and return POSIX relative paths.

    Order is whatever the directory listing yields. Matches inside the
    dependency cache are dropped. A missing ``base`` yields no matches.

    Args:
        base: Directory the pattern is relative to
        pattern: Glob pattern; ``**`` matches any number of directories
        files_only: Drop matches that are not regular files
    """
    check_pattern(pattern)
    matches: list[str] = []
    for rel in glob.glob(pattern, root_dir=base, recursive=True):
        if in_dependency_dir(rel):
            continue
        if files_only and not (base / rel).is_file():
            continue
        matches.append(Path(rel).as_posix())
    return matches


def read_text(root: Path, relative: str) -> str:
    """Read a UTF-8 file under ``root``, mapping OS errors to DevwebError."""
    path = resolve_in_root(root, relative)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise translate_os_error(e, relative) from e
