"""Per-product check pipeline: fetch, extract, read local copy, compare."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Sequence

from .comparator import compare
from .config import CheckerConfig
from .errors import InaccessibleError
from .local_docs import read_local_signals
from .registry import ProductRegistry
from .signals import extract_remote_signals
from .types import CheckResult, FetchedPage

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]
ResultCallback = Callable[[CheckResult], None]


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> FetchedPage: ...


@dataclass(frozen=True)
class CheckContext:
    """Everything a check needs, passed explicitly through the pipeline."""

    fetcher: PageFetcher
    registry: ProductRegistry
    config: CheckerConfig

    @classmethod
    def create(cls, fetcher: PageFetcher, config: CheckerConfig) -> "CheckContext":
        return cls(fetcher=fetcher, registry=config.registry, config=config)


async def check_product(ctx: CheckContext, product: str) -> Optional[CheckResult]:
    """Check a single product.

    Fetch failures never propagate: a non-200 answer becomes an
    ``inaccessible`` result and any other exception an ``error`` result.

    Args:
        ctx: Check context
        product: Product id

    Returns:
        CheckResult, or None if the product is not in the registry
    """
    url = ctx.registry.url_for(product)
    if url is None:
        logger.warning(f"Unknown product: {product}")
        return None

    try:
        page = await ctx.fetcher.fetch(url)
        remote = extract_remote_signals(page.title, page.text)
    except InaccessibleError as e:
        logger.info(f"Could not access {product} documentation (HTTP {e.status})")
        return CheckResult(product=product, url=url, status="inaccessible", http_status=e.status)
    except Exception as e:
        logger.info(f"Error checking {product}: {e}", exc_info=True)
        return CheckResult(product=product, url=url, status="error", error=str(e) or type(e).__name__)

    local = read_local_signals(ctx.config.local_doc_path(product))
    comparison = compare(
        remote, local, content_length_threshold=ctx.config.content_length_threshold
    )
    return CheckResult(
        product=product,
        url=url,
        status="checked",
        remote=remote,
        local=local,
        comparison=comparison,
    )


async def check_products(
    ctx: CheckContext,
    products: Sequence[str],
    progress_callback: Optional[ProgressCallback] = None,
    on_result: Optional[ResultCallback] = None,
) -> List[CheckResult]:
    """Check products and collect their results in selection order.

    With ``config.workers == 1`` products are checked strictly one after the
    other. Larger values fetch up to that many pages at once.

    Args:
        ctx: Check context
        products: Product ids to check
        progress_callback: Called as (index, total, product) before each check
        on_result: Called with each result as soon as it is available

    Returns:
        Results for every known product
    """
    total = len(products)

    async def run_one(index: int, product: str) -> Optional[CheckResult]:
        if progress_callback:
            progress_callback(index, total, product)
        result = await check_product(ctx, product)
        if result is not None and on_result:
            on_result(result)
        return result

    workers = ctx.config.workers
    if workers <= 1:
        results = []
        for i, product in enumerate(products):
            results.append(await run_one(i, product))
    else:
        semaphore = asyncio.Semaphore(workers)

        async def bounded(index: int, product: str) -> Optional[CheckResult]:
            async with semaphore:
                return await run_one(index, product)

        results = await asyncio.gather(
            *(bounded(i, product) for i, product in enumerate(products))
        )

    return [r for r in results if r is not None]
