#!/usr/bin/env python3
"""
Scrape a YouTube playlist and print its videos and statistics.

This pipeline:
1. Opens the playlist page in headless Chromium
2. Scrolls until all lazily loaded entries are present
3. Extracts title, views, thumbnail and duration of each entry
4. Derives per-video chart data (views and duration in seconds)

Usage:
    python -m scripts.playlist_scraper.scrape_playlist "https://www.youtube.com/playlist?list=PL..."
    python -m scripts.playlist_scraper.scrape_playlist URL --output data/playlist.json
    python -m scripts.playlist_scraper.scrape_playlist URL --page 2
    python -m scripts.playlist_scraper.scrape_playlist URL --headed  # Show the browser
"""

import argparse
import asyncio
import json
from pathlib import Path

from .config import MAX_REQUESTS_PER_CRAWL, VIDEOS_PER_PAGE, ScrapeConfig
from .crawler import scrape_playlist
from .errors import JobFailure, ValidationError
from .handler import validate_playlist_url
from .models import CrawlResult
from .report import print_summary, print_videos


def save_result(result: CrawlResult, output_path: Path):
    """Write the result as JSON ({videoList, graphData})."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Atomic write
    temp_path = output_path.with_suffix(".tmp")
    with open(temp_path, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
    temp_path.replace(output_path)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Scrape video metadata from a YouTube playlist"
    )
    parser.add_argument(
        "url",
        help="Playlist URL (must contain a 'list' parameter)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output path for the JSON result",
    )
    parser.add_argument(
        "--max-requests",
        type=int,
        default=MAX_REQUESTS_PER_CRAWL,
        help=f"Maximum page navigations per job (default: {MAX_REQUESTS_PER_CRAWL})",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=30,
        help="Seconds to wait for the first playlist entry (default: 30)",
    )
    parser.add_argument(
        "--scroll-pause",
        type=float,
        default=2.0,
        help="Seconds to wait after each scroll (default: 2.0)",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )
    parser.add_argument(
        "--page",
        type=int,
        default=1,
        help=f"Page of the video list to print, {VIDEOS_PER_PAGE} per page (default: 1)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print statistics",
    )

    args = parser.parse_args(argv)

    try:
        playlist_id = validate_playlist_url(args.url)
    except ValidationError as e:
        print(f"Error: {e}")
        return 2

    config = ScrapeConfig(
        max_requests_per_crawl=args.max_requests,
        selector_timeout_ms=args.timeout * 1000,
        scroll_pause_seconds=args.scroll_pause,
        headless=not args.headed,
        output_path=args.output,
    )

    print(f"Scraping playlist {playlist_id}")
    print(f"  URL: {args.url}")
    print(f"  Max requests: {config.max_requests_per_crawl}")

    try:
        result = asyncio.run(scrape_playlist(args.url, config))
    except JobFailure as e:
        print(f"\nError: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nScrape interrupted.")
        return 1

    if not args.quiet:
        print_videos(result, page=args.page)
    print_summary(result)

    if config.output_path:
        save_result(result, config.output_path)
        print(f"\nOutput saved to: {config.output_path}")

    return 0


if __name__ == "__main__":
    exit(main())
