"""Async headless-browser fetcher for documentation pages."""

import logging
from typing import Optional

from playwright.async_api import Browser, Playwright, async_playwright

from .config import BrowserConfig
from .errors import BrowserLaunchError, FetchError, InaccessibleError
from .types import FetchedPage

logger = logging.getLogger(__name__)

BODY_TEXT_SCRIPT = "() => document.body ? document.body.innerText : ''"


class DocsFetcher:
    """Async client that renders documentation pages in headless Chromium.

    One browser is shared for the whole run; every fetch opens its own page
    and closes it again, whatever the outcome.

    Example:
        ```python
        async with DocsFetcher(BrowserConfig(timeout=30.0)) as fetcher:
            page = await fetcher.fetch("https://www.zoho.com/books/api/v3/")
            print(page.title, len(page.text))
        ```
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        """Initialize DocsFetcher.

        Args:
            config: Browser settings, defaults to BrowserConfig()
        """
        self._config = config or BrowserConfig()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    @property
    def config(self) -> BrowserConfig:
        return self._config

    async def connect(self) -> None:
        """Start Playwright and launch the browser.

        This method is called automatically when using the async context manager.

        Raises:
            BrowserLaunchError: If the browser cannot be started
        """
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self._config.headless
            )
        except Exception as e:
            await self.close()
            raise BrowserLaunchError("Could not launch headless Chromium", e) from e
        logger.debug("Browser launched")

    async def close(self) -> None:
        """Close the browser and stop Playwright. Safe to call twice."""
        browser, self._browser = self._browser, None
        try:
            if browser is not None:
                await browser.close()
        finally:
            playwright, self._playwright = self._playwright, None
            if playwright is not None:
                await playwright.stop()

    async def __aenter__(self) -> "DocsFetcher":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def is_connected(self) -> bool:
        return self._browser is not None and self._browser.is_connected()

    async def fetch(self, url: str) -> FetchedPage:
        """Render a page and return its title and visible text.

        Args:
            url: Page to load

        Returns:
            FetchedPage with status, title and ``document.body.innerText``

        Raises:
            InaccessibleError: If there is no response or the status is not 200
            FetchError: If the fetcher is not connected
        """
        if self._browser is None:
            raise FetchError(url, "browser is not connected")

        page = await self._browser.new_page(user_agent=self._config.user_agent)
        try:
            page.set_default_timeout(self._config.timeout_ms)
            response = await page.goto(url, wait_until=self._config.wait_until)
            status = response.status if response is not None else None
            if status != 200:
                raise InaccessibleError(url, status)

            title = await page.title()
            text = await page.evaluate(BODY_TEXT_SCRIPT)
            logger.debug(f"Fetched {url}: HTTP {status}, {len(text)} chars")
            return FetchedPage(url=url, status=status, title=title, text=text or "")
        finally:
            await page.close()
