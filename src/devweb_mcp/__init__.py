"""developer-web-mcp: read-only project inspection tools over MCP."""

__version__ = "1.0.0"

from devweb_mcp.errors import (  # noqa: E402
    AccessError,
    ConfigError,
    DevwebError,
    ExternalCommandError,
    NotFoundError,
    ParseError,
)
from devweb_mcp.tree import render_tree  # noqa: E402


# lazy import - pulls in the mcp server stack
def __getattr__(name: str):
    if name == "create_server":
        from devweb_mcp.mcp_server import create_server

        return create_server
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "AccessError",
    "ConfigError",
    "DevwebError",
    "ExternalCommandError",
    "NotFoundError",
    "ParseError",
    "__version__",
    "create_server",
    "render_tree",
]
