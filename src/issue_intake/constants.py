"""Global constants for Issue Intake MCP.

These values describe the GitHub REST contract and serve as defaults for
configuration.  Environment variables are read only by `config.py`.
"""

# GitHub REST API
GITHUB_API_BASE = "https://api.github.com/"
GITHUB_MEDIA_TYPE = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"
ISSUE_CREATED_STATUS = 201

# Target repository
DEFAULT_GITHUB_OWNER = "ltatka"
DEFAULT_GITHUB_REPO = "my_issues"

# Credential resolution
DEFAULT_TOKEN_EXCHANGE_URL = "https://slack.com/api/apps.auth.external.get"

# Limits
HTTP_TIMEOUT_S = 10.0

# Output
ERROR_PREFIX = "An error was encountered during issue creation: "

# Logging
DEFAULT_LOG_LEVEL = "INFO"
