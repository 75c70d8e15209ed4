"""Pydantic models for transient, per-call tool data."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class PackageInfo(BaseModel):
    """Metadata read from one package manifest."""

    file: str = Field(description="Manifest path relative to project root")
    manifest: Literal["package.json", "pyproject.toml"]
    name: str | None = None
    version: str | None = None
    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(default_factory=list)


class GraphQLSchemaFile(BaseModel):
    """A GraphQL schema file and its full content."""

    file: str = Field(description="Path relative to project root")
    content: str


class GitSummary(BaseModel):
    """Branch comparison gathered for diff and PR prompt tools.

    ``commits`` and ``diff`` are None when not requested or when the
    query failed; the branch and changed files are always present.
    """

    branch: str
    base_branch: str
    changed_files: list[str]
    commits: list[str] | None = None
    diff: str | None = None
    diff_truncated: bool = False
