"""Zoho documentation update checker.

Renders vendor API documentation pages in headless Chromium, extracts a few
text signals (version, last-updated date, keywords, length) and compares them
with locally cached markdown copies to flag docs that look stale.

Example:
    ```python
    import asyncio

    from zohodocs import CheckContext, CheckerConfig, DocsFetcher, check_products

    async def main():
        config = CheckerConfig(docs_root="~/notes")
        async with DocsFetcher(config.browser) as fetcher:
            ctx = CheckContext.create(fetcher, config)
            results = await check_products(ctx, ["crm", "books"])
        for result in results:
            print(result.product, result.status, result.reason)

    asyncio.run(main())
    ```
"""

__version__ = "0.1.0"

# Pipeline
from .checker import CheckContext, check_product, check_products
from .comparator import CONTENT_LENGTH_THRESHOLD, compare

# Configuration
from .config import BrowserConfig, CheckerConfig

# Errors
from .errors import (
    BrowserLaunchError,
    ConfigError,
    FetchError,
    InaccessibleError,
    ReportError,
    ZohoDocsError,
)
from .fetcher import DocsFetcher
from .local_docs import local_doc_path, read_local_signals
from .registry import DEFAULT_REGISTRY, ZOHO_PRODUCTS, ProductRegistry, ProductSelection
from .report import UpdateReport
from .signals import extract_local_signals, extract_remote_signals
from .smoke import run_smoke
from .types import (
    CheckResult,
    ComparisonResult,
    FetchedPage,
    LocalSignals,
    RemoteSignals,
    SmokeResult,
)

__all__ = [
    # Version
    "__version__",
    # Pipeline
    "CheckContext",
    "check_product",
    "check_products",
    "compare",
    "CONTENT_LENGTH_THRESHOLD",
    "DocsFetcher",
    "run_smoke",
    # Config
    "BrowserConfig",
    "CheckerConfig",
    "ProductRegistry",
    "ProductSelection",
    "DEFAULT_REGISTRY",
    "ZOHO_PRODUCTS",
    # Errors
    "ZohoDocsError",
    "ConfigError",
    "BrowserLaunchError",
    "FetchError",
    "InaccessibleError",
    "ReportError",
    # Signals
    "extract_remote_signals",
    "extract_local_signals",
    "local_doc_path",
    "read_local_signals",
    # Types
    "CheckResult",
    "ComparisonResult",
    "FetchedPage",
    "LocalSignals",
    "RemoteSignals",
    "SmokeResult",
    "UpdateReport",
]
