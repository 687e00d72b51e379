"""
Configuration for the playlist scraping pipeline.

Defines crawl budget, page loading timings, DOM selectors and browser settings.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

# Crawl budget: maximum page navigations per job
MAX_REQUESTS_PER_CRAWL = 50

# Entry-container node for one playlist row
DEFAULT_ENTRY_SELECTOR = "#contents ytd-playlist-video-renderer"

# Videos shown per page of the printed report
VIDEOS_PER_PAGE = 8


@dataclass
class ScrapeConfig:
    """Configuration for one playlist scrape job."""

    # === Crawl Budget ===
    max_requests_per_crawl: int = MAX_REQUESTS_PER_CRAWL
    max_request_retries: int = 3  # Extra attempts before a request is failed

    # === Page Loading ===
    selector_timeout_ms: int = 30_000  # Wait for the first entry
    scroll_pause_seconds: float = 2.0  # Lazy-load pause after each scroll
    navigation_timeout_ms: int = 60_000

    # === Selectors ===
    entry_selector: str = DEFAULT_ENTRY_SELECTOR
    title_selector: str = "#video-title"
    info_selector: str = "#video-info span"
    thumbnail_selector: str = "img"
    duration_selector: str = "badge-shape[aria-label]"
    duration_attribute: str = "aria-label"

    # === Browser Settings ===
    headless: bool = True
    viewport: Dict[str, int] = field(
        default_factory=lambda: {"width": 1280, "height": 720}
    )
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    # === Output ===
    output_path: Optional[Path] = None
