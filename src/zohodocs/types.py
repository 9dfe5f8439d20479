"""User-facing types for check results."""

from dataclasses import dataclass
from typing import Literal, Optional

CheckStatus = Literal["checked", "inaccessible", "error"]

# Comparator reasons, in rule priority order
REASON_MISSING = "missing"
REASON_VERSION_MISMATCH = "version-mismatch"
REASON_STALE_NO_DATE = "stale-long-doc-no-date"


@dataclass(frozen=True)
class FetchedPage:
    """Rendered documentation page as returned by the fetcher."""

    url: str
    status: int  # HTTP status of the main navigation
    title: str
    text: str  # document.body.innerText


@dataclass(frozen=True)
class RemoteSignals:
    """Facts extracted from a live documentation page."""

    title: str = ""
    version: Optional[str] = None
    last_updated: Optional[str] = None
    has_rest_api: bool = False
    has_oauth: bool = False
    has_webhooks: bool = False
    content_length: int = 0


@dataclass(frozen=True)
class LocalSignals:
    """Facts extracted from the cached markdown copy of a product's docs."""

    exists: bool = False
    version: Optional[str] = None
    last_updated: Optional[str] = None


@dataclass(frozen=True)
class ComparisonResult:
    """Staleness verdict for one product."""

    needs_update: bool
    reason: Optional[str] = None


UP_TO_DATE = ComparisonResult(needs_update=False)


@dataclass
class CheckResult:
    """Outcome of checking a single product.

    ``comparison`` is only set for ``checked`` results; ``http_status`` for
    ``inaccessible`` ones and ``error`` for ``error`` ones.
    """

    product: str
    url: str
    status: CheckStatus
    remote: Optional[RemoteSignals] = None
    local: Optional[LocalSignals] = None
    comparison: Optional[ComparisonResult] = None
    http_status: Optional[int] = None
    error: Optional[str] = None

    @property
    def needs_update(self) -> bool:
        return self.comparison is not None and self.comparison.needs_update

    @property
    def reason(self) -> Optional[str]:
        return self.comparison.reason if self.comparison else None

    @property
    def is_up_to_date(self) -> bool:
        return self.status == "checked" and not self.needs_update

    @property
    def is_failure(self) -> bool:
        return self.status in ("error", "inaccessible")

    @property
    def reason_detail(self) -> Optional[str]:
        """Human readable explanation of ``reason``."""
        reason = self.reason
        if reason == REASON_MISSING:
            return "Local documentation file does not exist"
        if reason == REASON_VERSION_MISMATCH:
            remote_version = self.remote.version if self.remote else None
            local_version = self.local.version if self.local else None
            return f"Version mismatch: Remote v{remote_version} vs Local v{local_version}"
        if reason == REASON_STALE_NO_DATE:
            return "Local docs missing last updated date"
        return None

    @property
    def failure_detail(self) -> Optional[str]:
        if self.status == "inaccessible":
            return f"inaccessible (HTTP {self.http_status})"
        if self.status == "error":
            return self.error or "error"
        return None


@dataclass(frozen=True)
class SmokeResult:
    """Result of the browser smoke test."""

    url: str
    title: str
    heading: Optional[str]
    screenshot_path: str
