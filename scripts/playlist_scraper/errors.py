"""Exceptions raised by the playlist scraping pipeline."""

from typing import Optional


class ScrapeError(Exception):
    """Base class for playlist scraping errors."""


class ValidationError(ScrapeError, ValueError):
    """Playlist URL is missing or has no playlist identifier."""


class BudgetExceeded(ScrapeError):
    """Request budget of a crawl job is used up."""

    def __init__(self, max_requests: int):
        super().__init__(f"Reached max requests per crawl ({max_requests})")
        self.max_requests = max_requests


class JobFailure(ScrapeError):
    """A crawl job could not produce a result."""

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        message = f"Crawling failed for {url}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.url = url
        self.cause = cause
