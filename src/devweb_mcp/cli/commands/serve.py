"""Serve command - run the MCP server."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from devweb_mcp import console
from devweb_mcp.errors import ConfigError
from devweb_mcp.logging_config import get_logger

logger = get_logger("cli.serve")


@dataclass
class Serve:
    """Run the MCP server for a project."""

    root: Path | None = field(
        default=None,
        metadata={"help": "Project root (default: $DEVWEB_PROJECT_ROOT)"},
    )
    transport: Literal["stdio", "sse", "streamable-http"] = field(
        default="stdio",
        metadata={"help": "MCP transport"},
    )

    def run(self) -> int:
        """Execute the serve command."""
        from devweb_mcp.mcp_server import create_server

        try:
            server = create_server(root=self.root)
        except ConfigError as e:
            console.error(str(e))
            return 1

        logger.info("starting server", transport=self.transport)
        server.run(transport=self.transport)
        return 0
