"""Shared state module for Issue Intake MCP.

This module provides a single shared instance of configuration, token store
and issue creator used by the tool modules.  The token store is handed to the
creator here, so tests can build their own ``IssueCreator`` with a fake store
or patch ``CREATOR`` directly.
"""

from __future__ import annotations

from .config import Config
from .creator import IssueCreator
from .credentials import TokenStore, build_token_store

# Single shared configuration loaded once at import time
CONFIG: Config = Config.load_from_env()

# Credential resolution for every invocation
TOKENS: TokenStore = build_token_store(CONFIG)

# Stateless; safe to share across concurrent tool calls
CREATOR: IssueCreator = IssueCreator(CONFIG, TOKENS)
