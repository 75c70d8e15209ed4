"""Project layout and manifest handlers."""

from __future__ import annotations

import asyncio

from devweb_mcp.manifests import read_packages
from devweb_mcp.server.models import PackageInfo
from devweb_mcp.server.state import ProjectContext
from devweb_mcp.tree import DEFAULT_MAX_DEPTH, render_tree


async def get_project_structure(
    ctx: ProjectContext,
    directory: str = ".",
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    lines = await asyncio.to_thread(render_tree, ctx.root, directory, max_depth)
    structure = "".join(f"{line}\n" for line in lines)
    return f"Project structure for {directory}:\n\n{structure}"


def format_package(pkg: PackageInfo, list_dependencies: bool = False) -> str:
    """Render one package as a Markdown section.

    When ``list_dependencies`` is set the dependency names follow the
    counts, one bullet each.
    """
    lines = [
        f"## {pkg.name or '(unnamed)'} v{pkg.version or '?'}",
        f"**File:** {pkg.file}",
        f"**Dependencies:** {len(pkg.dependencies)}",
        f"**Dev Dependencies:** {len(pkg.dev_dependencies)}",
    ]
    if list_dependencies:
        for title, names in (
            ("Dependencies", pkg.dependencies),
            ("Dev Dependencies", pkg.dev_dependencies),
        ):
            if names:
                lines.append("")
                lines.append(f"### {title}")
                lines.extend(f"- {n}" for n in names)
    return "\n".join(lines) + "\n"


async def get_package_info(
    ctx: ProjectContext,
    package: str | None = None,
) -> str:
    packages = await asyncio.to_thread(read_packages, ctx.root, package)
    sections = "\n".join(
        format_package(p, list_dependencies=package is not None)
        for p in packages
    )
    return f"Found {len(packages)} packages:\n\n{sections}"
