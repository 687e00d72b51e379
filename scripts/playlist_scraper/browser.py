"""
Playwright browser session for the playlist scraper.

Launches Chromium and hands out pages; any object with the Playwright Page
surface can stand in for a page from here.
"""

from .config import ScrapeConfig


class PlaywrightBrowser:
    """
    Headless Chromium session.

    Usage:
        async with PlaywrightBrowser(config) as browser:
            page = await browser.new_page()
    """

    def __init__(self, config: ScrapeConfig):
        self.config = config
        self.browser = None
        self.context = None
        self._playwright = None

    async def __aenter__(self):
        """Start Playwright and open a browser context."""
        try:
            from playwright.async_api import async_playwright
        except ImportError:
            raise ImportError(
                "Playwright required. Install with: pip install playwright && playwright install chromium"
            )

        self._playwright = await async_playwright().start()
        self.browser = await self._playwright.chromium.launch(
            headless=self.config.headless,
        )
        self.context = await self.browser.new_context(
            viewport=self.config.viewport,
            user_agent=self.config.user_agent,
        )
        self.context.set_default_navigation_timeout(self.config.navigation_timeout_ms)
        return self

    async def __aexit__(self, *args):
        """Close the browser and stop Playwright."""
        if self.context:
            await self.context.close()
        if self.browser:
            await self.browser.close()
        if self._playwright:
            await self._playwright.stop()

    async def new_page(self):
        """Open a new page in the browser context."""
        if self.context is None:
            raise RuntimeError("Browser is not started; use 'async with'")
        return await self.context.new_page()
