"""
Extract video metadata from a fully expanded playlist page.

Each entry-container node maps to exactly one VideoRecord. Missing child
nodes degrade to empty fields so one odd row never drops the batch.
"""

from typing import List

from .config import ScrapeConfig
from .models import VideoRecord
from .parsers import parse_views

RESOLVED_SRC_SCRIPT = "(el) => el.src || ''"


async def _child_text(entry, selector: str) -> str:
    """Trimmed text of the first matching child, or ''."""
    child = await entry.query_selector(selector)
    if not child:
        return ""
    text = await child.text_content()
    return (text or "").strip()


async def _child_attribute(entry, selector: str, attribute: str) -> str:
    child = await entry.query_selector(selector)
    if not child:
        return ""
    return await child.get_attribute(attribute) or ""


async def _child_src(entry, selector: str) -> str:
    # Resolved URL (el.src), not the raw attribute
    child = await entry.query_selector(selector)
    if not child:
        return ""
    return await child.evaluate(RESOLVED_SRC_SCRIPT) or ""


async def extract_video(entry, config: ScrapeConfig) -> VideoRecord:
    """
    Build a VideoRecord from one entry-container node.

    Args:
        entry: Element handle of the playlist row
        config: Scrape configuration (child selectors)

    Returns:
        VideoRecord with empty/zero defaults for missing fields
    """
    title = await _child_text(entry, config.title_selector)
    views_text = await _child_text(entry, config.info_selector)
    thumbnail = await _child_src(entry, config.thumbnail_selector)
    duration_label = await _child_attribute(
        entry, config.duration_selector, config.duration_attribute
    )

    return VideoRecord(
        title=title,
        views=parse_views(views_text),
        thumbnail=thumbnail,
        duration_label=duration_label,
    )


async def extract_videos(page, config: ScrapeConfig) -> List[VideoRecord]:
    """Extract all entries in document order."""
    entries = await page.query_selector_all(config.entry_selector)

    videos = []
    for entry in entries:
        videos.append(await extract_video(entry, config))

    return videos
