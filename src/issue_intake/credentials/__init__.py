"""Credential resolution for GitHub API calls."""

from .token_store import SlackTokenStore, StaticTokenStore, TokenStore, build_token_store

__all__ = [
    "TokenStore",
    "SlackTokenStore",
    "StaticTokenStore",
    "build_token_store",
]
