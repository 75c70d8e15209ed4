"""Error types raised by tool handlers.

Handlers raise these; the tool boundary (``server.envelope.run_tool``)
turns them into readable text for the agent host.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class DevwebError(Exception):
    """Base class for all handler-level failures."""


class ConfigError(DevwebError):
    """Server could not be configured (e.g. missing project root)."""


class NotFoundError(DevwebError):
    """A path or ref does not exist."""


class AccessError(DevwebError):
    """Permission denied, or a path outside the project root."""


class ParseError(DevwebError):
    """Malformed manifest or schema content."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"failed to parse {self.path}: {reason}")


class ExternalCommandError(DevwebError):
    """A version-control command exited non-zero or could not run."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        cmd = " ".join(self.command)
        if returncode is None:
            msg = f"`{cmd}` could not be run"
        else:
            msg = f"`{cmd}` exited with status {returncode}"
        if self.stderr:
            msg = f"{msg}: {self.stderr}"
        super().__init__(msg)


def translate_os_error(exc: OSError, path: str | Path) -> DevwebError:
    """Map an OSError raised while touching ``path`` to a DevwebError."""
    if isinstance(exc, FileNotFoundError):
        return NotFoundError(f"path not found: {path}")
    if isinstance(exc, NotADirectoryError):
        return NotFoundError(f"not a directory: {path}")
    if isinstance(exc, PermissionError):
        return AccessError(f"permission denied: {path}")
    return DevwebError(f"{exc.strerror or exc}: {path}")
