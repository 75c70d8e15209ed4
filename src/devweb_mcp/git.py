"""Git queries used by the diff and PR prompt tools."""

from __future__ import annotations

import asyncio
import contextlib
from pathlib import Path
from typing import Protocol

from devweb_mcp.errors import ExternalCommandError
from devweb_mcp.logging_config import get_logger

logger = get_logger("git")


class VersionControl(Protocol):
    """Read-only branch comparison queries.

    Each method may fail independently with ExternalCommandError.
    """

    async def current_branch(self) -> str: ...

    async def changed_files(self, base: str) -> list[str]: ...

    async def commit_log(self, base: str) -> list[str]: ...

    async def diff_text(self, base: str) -> str: ...


class GitClient:
    """VersionControl backed by the ``git`` binary.

    Every command runs with ``cwd`` set to the project root and is killed
    after ``timeout`` seconds.
    """

    def __init__(self, root: Path, timeout: float = 30.0) -> None:
        self.root = root
        self.timeout = timeout

    async def current_branch(self) -> str:
        out = await self._run("rev-parse", "--abbrev-ref", "HEAD")
        return out.strip()

    async def changed_files(self, base: str) -> list[str]:
        """Files changed on HEAD since it forked from ``base``."""
        out = await self._run("diff", "--name-only", f"{base}...HEAD")
        return _lines(out)

    async def commit_log(self, base: str) -> list[str]:
        """One-line summaries of commits on HEAD that ``base`` lacks."""
        out = await self._run(
            "log", "--oneline", "--no-decorate", f"{base}..HEAD"
        )
        return _lines(out)

    async def diff_text(self, base: str) -> str:
        return await self._run("diff", f"{base}...HEAD")

    async def _run(self, *args: str) -> str:
        cmd = ["git", "--no-pager", *args]
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=self.root,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.warning("git unavailable", command=cmd, error=str(e))
            raise ExternalCommandError(cmd, stderr=str(e)) from e

        try:
            stdout_b, stderr_b = await asyncio.wait_for(
                proc.communicate(), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            logger.warning("git timed out", command=cmd, timeout=self.timeout)
            raise ExternalCommandError(
                cmd, stderr=f"timed out after {self.timeout:g}s"
            ) from e

        if proc.returncode != 0:
            stderr = stderr_b.decode("utf-8", errors="replace")
            logger.debug(
                "git command failed",
                command=cmd,
                returncode=proc.returncode,
                stderr=stderr.strip(),
            )
            raise ExternalCommandError(cmd, proc.returncode, stderr)

        return stdout_b.decode("utf-8", errors="replace")


def _lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]
