"""Tools command - list the tools the server would expose."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from devweb_mcp import console
from devweb_mcp.errors import ConfigError


@dataclass
class Tools:
    """List enabled tools and their parameters."""

    root: Path | None = field(
        default=None,
        metadata={"help": "Project root (default: $DEVWEB_PROJECT_ROOT)"},
    )

    def run(self) -> int:
        """Execute the tools command."""
        from devweb_mcp.mcp_server import create_server

        try:
            server = create_server(root=self.root)
        except ConfigError as e:
            console.error(str(e))
            return 1

        tools = asyncio.run(server.list_tools())
        rows = []
        for tool in sorted(tools, key=lambda t: t.name):
            summary = (tool.description or "").strip().splitlines()
            params = ", ".join(tool.inputSchema.get("properties", {}))
            rows.append(
                [tool.name, summary[0] if summary else "-", params or "-"]
            )
        console.table(
            f"{len(tools)} tools", ["Tool", "Description", "Parameters"], rows
        )
        return 0
