"""GitHub API integration."""

from .api import create_issue
from .auth import get_github_client, github_headers
from .templates import generate_issue_body

__all__ = [
    "get_github_client",
    "github_headers",
    "create_issue",
    "generate_issue_body",
]
