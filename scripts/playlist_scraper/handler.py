"""
Request handling for playlist scrape requests.

Validates the playlist URL, runs the scrape job and maps the outcome to a
status code and JSON-ready body.
"""

from typing import Any, Awaitable, Callable, Dict, Optional, Tuple
from urllib.parse import parse_qs, urlparse

from .config import ScrapeConfig
from .crawler import scrape_playlist
from .errors import JobFailure, ValidationError
from .models import CrawlResult

ScrapeFunction = Callable[[str, Optional[ScrapeConfig]], Awaitable[CrawlResult]]


def validate_playlist_url(url: Optional[str]) -> str:
    """
    Check a playlist URL and return its playlist ID.

    Raises:
        ValidationError: URL is empty or has no 'list' query parameter
    """
    if not url:
        raise ValidationError("Playlist URL is required")
    if not isinstance(url, str):
        raise ValidationError("Invalid playlist URL")

    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValidationError("Invalid playlist URL")

    playlist_id = parse_qs(parsed.query).get("list", [""])[0]
    if not playlist_id:
        raise ValidationError("Invalid playlist URL")

    return playlist_id


async def handle_scrape_request(
    payload: Dict[str, Any],
    config: Optional[ScrapeConfig] = None,
    scrape: ScrapeFunction = scrape_playlist,
) -> Tuple[int, Dict[str, Any]]:
    """
    Handle a {"playlistUrl": ...} request.

    Returns:
        Tuple of (status_code, body)
    """
    url = payload.get("playlistUrl")

    try:
        validate_playlist_url(url)
    except ValidationError as e:
        return 400, {"error": str(e)}

    try:
        result = await scrape(url, config)
    except JobFailure as e:
        print(f"Scrape request failed: {e}")
        return 500, {"error": "An error occurred while scraping the playlist"}

    return 200, result.to_dict()
