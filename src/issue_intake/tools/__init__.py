"""Tool module exports for Issue Intake MCP.

Each submodule exposes functions that the server registers as MCP tools.

Usage:

    from issue_intake.tools import issue_tools
    await issue_tools.create_issue(...)
"""

from . import issue_tools  # noqa: F401

__all__ = [
    "issue_tools",
]
