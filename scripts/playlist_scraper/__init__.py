"""
YouTube Playlist Scraper Package.

This package extracts video metadata from a public YouTube playlist page using
a headless browser and derives chart-ready aggregates from it.

Modules:
    - config: Scrape configuration dataclass
    - parsers: View-count and duration text parsers
    - page_loader: Wait-and-scroll expansion of the playlist page
    - extractor: Per-entry video metadata extraction
    - crawler: Job-scoped crawl orchestration with request budget
    - aggregator: Chart data derived from the video list
    - handler: Request validation and response mapping
    - scrape_playlist: Command-line entrypoint

Usage:
    python -m scripts.playlist_scraper.scrape_playlist "https://www.youtube.com/playlist?list=PL..."
    python -m scripts.playlist_scraper.scrape_playlist URL --output data/playlist.json
    python -m scripts.playlist_scraper.scrape_playlist URL --headed --max-requests 10
"""

__version__ = "0.1.0"
