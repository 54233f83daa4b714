"""MCP stdio server entrypoint for Issue Intake.

The server runs over standard input/output using the Model Context Protocol.
It registers the issue intake tool so a host automation platform can open
GitHub issues on the configured repository.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .state import CONFIG
from .telemetry import configure_logging
from .tools import issue_tools


def build_tools_dispatch() -> dict[str, Callable[..., Awaitable[dict[str, Any]]]]:
    """Return a mapping from tool names to callables.

    Each callable accepts keyword arguments matching the host platform input
    schema and returns a JSON-serializable dictionary.
    """
    return {
        "create_issue": issue_tools.create_issue,
    }


def build_server() -> FastMCP:
    """Create the MCP server with every tool registered."""
    mcp = FastMCP("issue-intake-mcp")
    for name, func in build_tools_dispatch().items():
        mcp.add_tool(func, name=name, description=func.__doc__)
    return mcp


def main() -> None:
    """Entrypoint for the Issue Intake MCP server."""
    configure_logging(CONFIG.log_level)
    logger = logging.getLogger(__name__)
    logger.info("Starting Issue Intake MCP server")

    mcp = build_server()
    logger.info("Registered %d tools", len(build_tools_dispatch()))

    # Blocks until the client disconnects
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
