"""
Load a playlist page until every entry is in the document.

YouTube renders playlist rows lazily: the first batch appears after the
initial load and further rows attach as the page is scrolled. Loading is
therefore a wait for the first entry followed by scroll-and-pause rounds
until the document height stops growing.
"""

import asyncio

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .config import ScrapeConfig

SCROLL_HEIGHT_SCRIPT = "() => document.body.scrollHeight"
SCROLL_TO_BOTTOM_SCRIPT = "() => window.scrollTo(0, document.body.scrollHeight)"


async def wait_for_entries(page, config: ScrapeConfig):
    """
    Wait until at least one playlist entry exists.

    Raises:
        TimeoutError: No entry appeared within config.selector_timeout_ms
    """
    try:
        await page.wait_for_selector(
            config.entry_selector, timeout=config.selector_timeout_ms
        )
    except PlaywrightTimeoutError as e:
        raise TimeoutError(
            f"No playlist entries after {config.selector_timeout_ms} ms "
            f"({config.entry_selector})"
        ) from e


async def expand_entries(page, config: ScrapeConfig) -> int:
    """
    Scroll to the bottom until the document height is stable.

    Args:
        page: Playwright page with the playlist loaded
        config: Scrape configuration (scroll pause)

    Returns:
        Number of scroll rounds performed
    """
    last_height = await page.evaluate(SCROLL_HEIGHT_SCRIPT)
    rounds = 0

    while True:
        await page.evaluate(SCROLL_TO_BOTTOM_SCRIPT)
        await asyncio.sleep(config.scroll_pause_seconds)
        rounds += 1

        new_height = await page.evaluate(SCROLL_HEIGHT_SCRIPT)
        if new_height == last_height:
            break
        last_height = new_height

    return rounds
