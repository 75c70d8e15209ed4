"""Tool boundary: typed handler results to text envelopes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from mcp.types import TextContent

from devweb_mcp.errors import DevwebError
from devweb_mcp.logging_config import get_logger

logger = get_logger("envelope")


def text_result(text: str) -> list[TextContent]:
    """Wrap text in the single-item content envelope every tool returns."""
    return [TextContent(type="text", text=text)]


async def run_tool(
    action: str,
    handler: Callable[..., Awaitable[str]],
    *args: Any,
    **kwargs: Any,
) -> list[TextContent]:
    """Run a handler and always return a successful envelope.

    Failures are reported in the text payload as ``Error <action>: <msg>``
    so the host reads what happened instead of seeing a transport error.

    Args:
        action: Gerund phrase for error text (e.g. "searching files")
        handler: Async handler returning Markdown text
    """
    try:
        text = await handler(*args, **kwargs)
    except DevwebError as e:
        logger.warning("tool failed", action=action, error=str(e))
        return text_result(f"Error {action}: {e}")
    except Exception as e:
        logger.exception("unexpected tool failure", action=action)
        return text_result(f"Error {action}: {e}")
    return text_result(text)
