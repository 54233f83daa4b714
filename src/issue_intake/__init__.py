"""Top‑level package for Issue Intake MCP.

This package exposes a tools‑only server that turns an intake request
(requestor, title, description, urgency) into a GitHub issue on a
configured repository.  See `README.md` for more information.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
