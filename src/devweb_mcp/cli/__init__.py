"""devweb-mcp CLI - serve and inspect the developer-web MCP server.

Uses tyro for type-driven CLI generation from dataclasses.
"""

from __future__ import annotations

from typing import Annotated

import tyro

from devweb_mcp.cli.commands.serve import Serve
from devweb_mcp.cli.commands.tools import Tools
from devweb_mcp.cli.commands.tree import Tree

# Type aliases for subcommand annotations
_Serve = Annotated[Serve, tyro.conf.subcommand("serve")]
_Tools = Annotated[Tools, tyro.conf.subcommand("tools")]
_Tree = Annotated[Tree, tyro.conf.subcommand("tree")]

Command = _Serve | _Tools | _Tree


def main() -> int:
    """Entry point for the CLI."""
    # configure structlog (respects DEVWEB_DEBUG / DEVWEB_LOG_FILE)
    from devweb_mcp.logging_config import configure_logging

    configure_logging()

    try:
        cmd = tyro.cli(
            Command,
            prog="devweb-mcp",
            description="Read-only project inspection tools over MCP.",
        )
        return cmd.run()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        from devweb_mcp import console

        console.error(str(e))
        return 1
