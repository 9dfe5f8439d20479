"""Staleness comparator.

A heuristic triage: it flags candidates for human review and never touches
content. Rules are evaluated in priority order and the first match wins:

1. no local file                                   -> "missing"
2. both versions present and different strings     -> "version-mismatch"
3. long remote page and no local last-updated date -> "stale-long-doc-no-date"

Versions are compared as plain strings, so "8" and "08" do not match.
"""

from .types import (
    REASON_MISSING,
    REASON_STALE_NO_DATE,
    REASON_VERSION_MISMATCH,
    UP_TO_DATE,
    ComparisonResult,
    LocalSignals,
    RemoteSignals,
)

# Remote pages longer than this (in characters) must carry a local date
CONTENT_LENGTH_THRESHOLD = 50_000


def compare(
    remote: RemoteSignals,
    local: LocalSignals,
    *,
    content_length_threshold: int = CONTENT_LENGTH_THRESHOLD,
) -> ComparisonResult:
    """Decide whether the local copy of a product's docs needs updating.

    Args:
        remote: Signals from the live page
        local: Signals from the cached markdown file
        content_length_threshold: Page length above which a missing local
            date counts as stale

    Returns:
        ComparisonResult with the first matching reason, or up to date
    """
    if not local.exists:
        return ComparisonResult(needs_update=True, reason=REASON_MISSING)

    if remote.version and local.version and remote.version != local.version:
        return ComparisonResult(needs_update=True, reason=REASON_VERSION_MISMATCH)

    if remote.content_length > content_length_threshold and not local.last_updated:
        return ComparisonResult(needs_update=True, reason=REASON_STALE_NO_DATE)

    return UP_TO_DATE
