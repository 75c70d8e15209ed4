from __future__ import annotations

import json
import re
import tomllib
from pathlib import Path
from typing import Any

from devweb_mcp.errors import ParseError
from devweb_mcp.fsquery import glob_relative, read_text
from devweb_mcp.logging_config import get_logger
from devweb_mcp.server.models import PackageInfo

logger = get_logger("manifests")

MANIFEST_PATTERNS = ("**/package.json", "**/pyproject.toml")

DEV_GROUPS = ("dev", "test", "testing", "development")


def find_manifests(root: Path) -> list[str]:
    files: list[str] = []
    for pattern in MANIFEST_PATTERNS:
        files.extend(glob_relative(root, pattern, files_only=True))
    return files


def read_packages(root: Path, name: str | None = None) -> list[PackageInfo]:
    """Parse every manifest under ``root``, optionally filtered by name.

    One unparseable manifest fails the whole read; callers never get a
    partial package list.

    Raises:
        ParseError: a manifest is not valid JSON/TOML or not a mapping
    """
    packages: list[PackageInfo] = []
    for file in find_manifests(root):
        info = parse_manifest(file, read_text(root, file))
        if name is None or info.name == name:
            packages.append(info)
    logger.debug("read manifests", count=len(packages), name=name)
    return packages


def parse_manifest(file: str, content: str) -> PackageInfo:
    if Path(file).name == "pyproject.toml":
        return _parse_pyproject_toml(file, content)
    return _parse_package_json(file, content)


def _parse_package_json(file: str, content: str) -> PackageInfo:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(file, str(e)) from e
    if not isinstance(data, dict):
        raise ParseError(file, "top-level value is not an object")

    return PackageInfo(
        file=file,
        manifest="package.json",
        name=_str_or_none(data.get("name")),
        version=_str_or_none(data.get("version")),
        dependencies=_keys(data.get("dependencies"), file),
        dev_dependencies=_keys(data.get("devDependencies"), file),
    )


def _parse_pyproject_toml(file: str, content: str) -> PackageInfo:
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ParseError(file, str(e)) from e

    project = data.get("project", {})
    poetry = data.get("tool", {}).get("poetry", {})

    deps: list[str] = []
    dev_deps: list[str] = []

    for dep_str in project.get("dependencies", []):
        deps.append(_parse_pep508(dep_str))

    optional = project.get("optional-dependencies", {})
    for group, group_deps in optional.items():
        target = dev_deps if group in DEV_GROUPS else deps
        target.extend(_parse_pep508(d) for d in group_deps)

    for dep_name in poetry.get("dependencies", {}):
        if dep_name != "python":
            deps.append(dep_name)
    dev_deps.extend(poetry.get("dev-dependencies", {}))
    for group_name, group_data in poetry.get("group", {}).items():
        target = dev_deps if group_name in DEV_GROUPS else deps
        target.extend(group_data.get("dependencies", {}))

    return PackageInfo(
        file=file,
        manifest="pyproject.toml",
        name=_str_or_none(project.get("name") or poetry.get("name")),
        version=_str_or_none(project.get("version") or poetry.get("version")),
        dependencies=deps,
        dev_dependencies=dev_deps,
    )


def _parse_pep508(dep_str: str) -> str:
    match = re.match(r"^([a-zA-Z0-9_.-]+)", dep_str.strip())
    return match.group(1) if match else dep_str


def _keys(section: Any, file: str) -> list[str]:
    if section is None:
        return []
    if not isinstance(section, dict):
        raise ParseError(file, "dependency section is not an object")
    return list(section)


def _str_or_none(value: Any) -> str | None:
    return None if value is None else str(value)
