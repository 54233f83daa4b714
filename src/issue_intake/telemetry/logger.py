"""Logging setup for Issue Intake MCP."""

import logging
import sys

from ..constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send root logging to stderr with the default format.

    stdout is reserved for the MCP protocol, so nothing may log there.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    # httpx logs every request at INFO; keep it to warnings unless debugging.
    if logging.getLogger().level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
