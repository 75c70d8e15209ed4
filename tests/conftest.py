"""Shared fixtures: throwaway project trees and a scripted VCS."""

from __future__ import annotations

from pathlib import Path

import pytest

from devweb_mcp.errors import ExternalCommandError
from devweb_mcp.server.state import ProjectContext


class FakeVCS:
    """VersionControl stand-in; set an attribute to an exception to fail it."""

    def __init__(
        self,
        branch: str | Exception = "feature/login",
        changed: list[str] | Exception | None = None,
        commits: list[str] | Exception | None = None,
        diff: str | Exception = "",
    ) -> None:
        self.branch = branch
        self.changed = [] if changed is None else changed
        self.commits = [] if commits is None else commits
        self.diff = diff
        self.calls: list[tuple[str, str | None]] = []

    @staticmethod
    def _answer(value):
        if isinstance(value, Exception):
            raise value
        return value

    async def current_branch(self) -> str:
        self.calls.append(("current_branch", None))
        return self._answer(self.branch)

    async def changed_files(self, base: str) -> list[str]:
        self.calls.append(("changed_files", base))
        return self._answer(self.changed)

    async def commit_log(self, base: str) -> list[str]:
        self.calls.append(("commit_log", base))
        return self._answer(self.commits)

    async def diff_text(self, base: str) -> str:
        self.calls.append(("diff_text", base))
        return self._answer(self.diff)


def git_failure(*args: str) -> ExternalCommandError:
    return ExternalCommandError(
        ["git", *args], 128, "fatal: bad revision 'nope...HEAD'"
    )


def write_files(root: Path, files: dict[str, str]) -> None:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small monorepo layout."""
    root = tmp_path / "project"
    write_files(
        root,
        {
            "package.json": '{"name": "root", "version": "1.0.0"}',
            "apps/web/package.json": (
                '{"name": "web", "version": "0.2.0",'
                ' "dependencies": {"next": "14", "react": "18"},'
                ' "devDependencies": {"jest": "29"}}'
            ),
            "apps/web/components/LoginForm.tsx": "export const LoginForm = 1",
            "apps/web/components/LoginForm.test.tsx": "test()",
            "packages/ui/Button.tsx": "export const Button = 1",
            "packages/ui/Button.spec.ts": "spec()",
            "packages/ui/legacy/Card.jsx": "export default 1",
            "features/auth/schema.gql": "type Query { me: User }",
            "features/billing/invoice.graphql": "type Invoice { id: ID! }",
            "e2e/login.ts": "e2e()",
            "e2e/fixtures/user.json": "{}",
            "api/orders.integration.test.ts": "it()",
            "api/checkout.e2e.test.ts": "it()",
            "node_modules/react/package.json": '{"name": "react"}',
            "node_modules/react/index.test.ts": "x",
            ".github/workflows/ci.yml": "on: push",
        },
    )
    return root


@pytest.fixture
def vcs() -> FakeVCS:
    return FakeVCS()


@pytest.fixture
def ctx(project: Path, vcs: FakeVCS) -> ProjectContext:
    return ProjectContext(root=project, vcs=vcs, max_diff_chars=50_000)
