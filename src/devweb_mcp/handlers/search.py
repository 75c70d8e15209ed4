"""Pattern-based discovery handlers."""

from __future__ import annotations

import asyncio
import glob
from typing import Literal

from devweb_mcp.fsquery import (
    glob_relative,
    read_text,
    require_directory,
    resolve_in_root,
)
from devweb_mcp.logging_config import get_logger
from devweb_mcp.server.models import GraphQLSchemaFile
from devweb_mcp.server.state import ProjectContext

logger = get_logger("handlers.search")

TestType = Literal["unit", "integration", "e2e", "all"]

TEST_PATTERNS: dict[str, tuple[str, ...]] = {
    "unit": (
        "**/*.test.ts",
        "**/*.test.tsx",
        "**/*.spec.ts",
        "**/*.spec.tsx",
    ),
    "integration": (
        "**/*.integration.test.ts",
        "**/*.integration.test.tsx",
    ),
    "e2e": (
        "**/*.e2e.test.ts",
        "**/*.e2e.test.tsx",
        "**/e2e/**/*.ts",
    ),
    "all": (
        "**/*.test.*",
        "**/*.spec.*",
        "**/e2e/**/*",
    ),
}

COMPONENT_EXTENSIONS = (".tsx", ".jsx")
GRAPHQL_EXTENSIONS = (".gql", ".graphql")
SCHEMA_PREVIEW_CHARS = 500


def split_directories(directory: str) -> list[str]:
    """Split a comma-delimited directory argument, dropping blanks."""
    dirs = [d.strip() for d in directory.split(",")]
    return [d for d in dirs if d] or ["."]


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _search_files_sync(
    ctx: ProjectContext, pattern: str, dirs: list[str]
) -> list[str]:
    if len(dirs) == 1:
        base = require_directory(ctx.root, dirs[0])
        return glob_relative(base, pattern)

    results: list[str] = []
    for d in dirs:
        base = require_directory(ctx.root, d)
        results.extend(f"{d}/{f}" for f in glob_relative(base, pattern))
    return results


async def search_files(
    ctx: ProjectContext,
    pattern: str,
    directory: str = ".",
) -> str:
    """Glob for ``pattern`` under one or more comma-separated directories.

    With several directories each group is prefixed by its directory and
    the groups are concatenated in argument order.
    """
    dirs = split_directories(directory)
    files = await asyncio.to_thread(_search_files_sync, ctx, pattern, dirs)
    return (
        f'Found {len(files)} files matching pattern "{pattern}":\n\n'
        f"{_bullets(files)}"
    )


def _find_components_sync(
    ctx: ProjectContext, name: str | None, dirs: list[str]
) -> list[str]:
    stem = f"*{glob.escape(name)}*" if name else "*"
    results: list[str] = []
    for d in dirs:
        base = resolve_in_root(ctx.root, d)
        if not base.is_dir():
            logger.debug("component directory missing", directory=d)
            continue
        for ext in COMPONENT_EXTENSIONS:
            matches = glob_relative(base, f"**/{stem}{ext}", files_only=True)
            results.extend(f"{d}/{f}" for f in matches)
    return results


async def find_components(
    ctx: ProjectContext,
    name: str | None = None,
    directory: str = "apps,packages",
) -> str:
    dirs = split_directories(directory)
    files = await asyncio.to_thread(_find_components_sync, ctx, name, dirs)
    return f"Found {len(files)} React components:\n\n{_bullets(files)}"


def collect_graphql_schemas(
    ctx: ProjectContext, feature: str | None = None
) -> list[GraphQLSchemaFile]:
    """Read every schema under ``features/`` (or one feature) in full."""
    prefix = f"features/{glob.escape(feature)}" if feature else "features"
    schemas: list[GraphQLSchemaFile] = []
    for ext in GRAPHQL_EXTENSIONS:
        pattern = f"{prefix}/**/*{ext}"
        for file in glob_relative(ctx.root, pattern, files_only=True):
            schemas.append(
                GraphQLSchemaFile(file=file, content=read_text(ctx.root, file))
            )
    return schemas


def format_schema(schema: GraphQLSchemaFile) -> str:
    content = schema.content
    if len(content) > SCHEMA_PREVIEW_CHARS:
        body = content[:SCHEMA_PREVIEW_CHARS] + "\n...\n```"
    else:
        body = content + "\n```"
    return f"## {schema.file}\n```graphql\n{body}"


async def get_graphql_schemas(
    ctx: ProjectContext,
    feature: str | None = None,
) -> str:
    schemas = await asyncio.to_thread(collect_graphql_schemas, ctx, feature)
    sections = "\n\n".join(format_schema(s) for s in schemas)
    return f"Found {len(schemas)} GraphQL schema files:\n\n{sections}"


def collect_test_files(ctx: ProjectContext, test_type: TestType) -> list[str]:
    """Match the patterns for ``test_type``, keeping first occurrences."""
    seen: dict[str, None] = {}
    for pattern in TEST_PATTERNS[test_type]:
        for file in glob_relative(ctx.root, pattern, files_only=True):
            seen.setdefault(file, None)
    return list(seen)


async def find_test_files(
    ctx: ProjectContext,
    test_type: TestType = "all",
) -> str:
    files = await asyncio.to_thread(collect_test_files, ctx, test_type)
    return f"Found {len(files)} {test_type} test files:\n\n{_bullets(files)}"
