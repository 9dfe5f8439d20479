"""Regex extraction of version/date signals from page text and local markdown.

Remote and local extraction are deliberately kept as two separate passes.
The remote pass accepts a bare ``Month D, YYYY`` date anywhere on the page as
a fallback; the local pass only accepts an explicit ``**Last Updated**: Month
YYYY`` marker. The two date formats are not even the same shape. Whether this
asymmetry is intended is unknown, so it is preserved rather than unified.

Every extractor returns the first capture group of the first match, or None.
"""

import re
from typing import Optional, Sequence

from .types import LocalSignals, RemoteSignals

# "API Version: 2.1", "version 8"
REMOTE_VERSION_PATTERN = re.compile(
    r"(?:API\s+)?[Vv]ersion\s*[:]?\s*([0-9]+(?:\.[0-9]+)?)", re.IGNORECASE
)

# "Last Updated: March 4, 2024", "Updated on Jan 5 2025"
REMOTE_DATE_PATTERN = re.compile(
    r"(?:Last\s+Updated|Updated\s+on)[:]?\s*([A-Za-z]+\s+[0-9]{1,2},?\s+[0-9]{4})",
    re.IGNORECASE,
)

# Any "Month D, YYYY" on the page (case-sensitive)
REMOTE_BARE_DATE_PATTERN = re.compile(r"([A-Za-z]+\s+[0-9]{1,2},?\s+[0-9]{4})")

# "Version: 8", "API Version 2.0"
LOCAL_VERSION_PATTERN = re.compile(
    r"(?:API\s+)?[Vv]ersion[:\s]+([0-9]+(?:\.[0-9]+)?)", re.IGNORECASE
)

# "**Last Updated**: January 2025"
LOCAL_DATE_PATTERN = re.compile(
    r"\*\*Last Updated\*\*:\s*([A-Za-z]+\s+[0-9]{4})", re.IGNORECASE
)

# Bare "v8" token, fallback for both passes
BARE_VERSION_PATTERN = re.compile(r"v([0-9]+)", re.IGNORECASE)

REST_API_KEYWORDS = ("rest api", "restful")
OAUTH_KEYWORDS = ("oauth",)
WEBHOOK_KEYWORDS = ("webhook",)


def first_match(text: str, patterns: Sequence[re.Pattern]) -> Optional[str]:
    """Return group 1 of the first pattern that matches, trying them in order."""
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def contains_any(text: str, keywords: Sequence[str]) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def text_length(text: str) -> int:
    """Length of page text in UTF-16 code units, as the browser's ``String.length`` reports it.

    Characters outside the Basic Multilingual Plane (most emoji) count as two.
    """
    return len(text.encode("utf-16-le")) // 2


def extract_remote_version(text: str) -> Optional[str]:
    return first_match(text, (REMOTE_VERSION_PATTERN, BARE_VERSION_PATTERN))


def extract_remote_date(text: str) -> Optional[str]:
    return first_match(text, (REMOTE_DATE_PATTERN, REMOTE_BARE_DATE_PATTERN))


def extract_local_version(content: str) -> Optional[str]:
    return first_match(content, (LOCAL_VERSION_PATTERN, BARE_VERSION_PATTERN))


def extract_local_date(content: str) -> Optional[str]:
    # Stricter than extract_remote_date, see module docstring.
    return first_match(content, (LOCAL_DATE_PATTERN,))


def extract_remote_signals(title: str, text: str) -> RemoteSignals:
    """Derive remote signals from a rendered page.

    Args:
        title: Page title
        text: Visible page text

    Returns:
        RemoteSignals for the page
    """
    return RemoteSignals(
        title=title,
        version=extract_remote_version(text),
        last_updated=extract_remote_date(text),
        has_rest_api=contains_any(text, REST_API_KEYWORDS),
        has_oauth=contains_any(text, OAUTH_KEYWORDS),
        has_webhooks=contains_any(text, WEBHOOK_KEYWORDS),
        content_length=text_length(text),
    )


def extract_local_signals(content: str) -> LocalSignals:
    """Derive local signals from the contents of an existing markdown file."""
    return LocalSignals(
        exists=True,
        version=extract_local_version(content),
        last_updated=extract_local_date(content),
    )
