"""Secret redaction utilities.

This module removes occurrences of secrets from text before it is written
to the logs.  Redaction is a simple string replacement that substitutes
secrets with the string ``"<REDACTED>"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_TOKEN_PATTERNS = [
    # GitHub OAuth and personal access tokens: gho_xxx, ghp_xxx or github_pat_xxx
    re.compile(r"gh[pousr]_[A-Za-z0-9]{30,}", re.IGNORECASE),
    re.compile(r"github_pat_[A-Za-z0-9_]{20,}", re.IGNORECASE),
    # Slack bot, user and app tokens
    re.compile(r"xox[abposr]-[A-Za-z0-9-]{10,}", re.IGNORECASE),
    # Bearer tokens (JWT or opaque strings following 'Bearer ')
    re.compile(r"Bearer\s+[A-Za-z0-9\-\._~\+/]+=*", re.IGNORECASE),
]


def redact_secrets(text: str, secrets: Iterable[str | None] = ()) -> str:
    """Return ``text`` with secrets and common token patterns replaced.

    Any explicit secret strings in ``secrets`` are replaced first, then
    matches for GitHub, Slack and bearer token patterns.

    :param text: arbitrary text that may contain secrets
    :param secrets: iterable of secret strings to redact; empty values are ignored
    :return: redacted text
    """
    redacted = text or ""
    for secret in secrets:
        if secret:
            redacted = redacted.replace(secret, "<REDACTED>")
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub("<REDACTED>", redacted)
    return redacted
