"""Browser smoke test: open a page, read its heading, save a screenshot."""

import logging
from pathlib import Path
from typing import Optional

from playwright.async_api import async_playwright

from .config import BrowserConfig
from .errors import BrowserLaunchError
from .types import SmokeResult

logger = logging.getLogger(__name__)

DEFAULT_SMOKE_URL = "https://example.com"
DEFAULT_SCREENSHOT = "example-screenshot.png"


async def run_smoke(
    url: str = DEFAULT_SMOKE_URL,
    screenshot_path: str | Path = DEFAULT_SCREENSHOT,
    *,
    config: Optional[BrowserConfig] = None,
) -> SmokeResult:
    """Check that a headless browser can load a page.

    Args:
        url: Page to open
        screenshot_path: Where the PNG screenshot is written
        config: Browser settings

    Returns:
        SmokeResult with the page title and first ``h1`` text

    Raises:
        BrowserLaunchError: If Chromium cannot be started
    """
    config = config or BrowserConfig()
    screenshot_path = Path(screenshot_path)

    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=config.headless)
        except Exception as e:
            raise BrowserLaunchError("Could not launch headless Chromium", e) from e

        try:
            page = await browser.new_page()
            page.set_default_timeout(config.timeout_ms)
            logger.info(f"Navigating to {url}...")
            await page.goto(url, wait_until=config.wait_until)

            title = await page.title()
            heading = await page.text_content("h1")
            await page.screenshot(path=str(screenshot_path))
        finally:
            await browser.close()

    return SmokeResult(
        url=url,
        title=title,
        heading=heading.strip() if heading else None,
        screenshot_path=str(screenshot_path),
    )
