"""
Crawl orchestration for a single playlist job.

A job owns a freshly named result store, runs its requests under a request
budget, and always drops the store when it ends. The playlist page is the
only request a job normally makes; the queue form keeps the budget and the
per-request retry policy in one place.
"""

import uuid
from enum import Enum
from typing import List, Optional

from .aggregator import build_graph_data
from .browser import PlaywrightBrowser
from .config import ScrapeConfig
from .errors import BudgetExceeded, JobFailure
from .extractor import extract_videos
from .models import CrawlRequest, CrawlResult, VideoRecord
from .page_loader import expand_entries, wait_for_entries
from .result_store import ResultStore


class JobState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    EXPANDING = "expanding"
    EXTRACTING = "extracting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


TERMINAL_STATES = {JobState.SUCCEEDED, JobState.FAILED}


class CrawlJob:
    """
    Context for one crawl job.

    Creates a uniquely named result store on entry and drops it on exit,
    whether the job succeeded or failed.

    Usage:
        async with CrawlJob(config) as job:
            job.store.push_data(...)
    """

    def __init__(self, config: ScrapeConfig):
        self.config = config
        self.job_id = str(uuid.uuid4())
        self.state = JobState.IDLE
        self.store: Optional[ResultStore] = None

    async def __aenter__(self):
        self.store = ResultStore(f"playlist-{self.job_id}")
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None and self.state not in TERMINAL_STATES:
            self.state = JobState.FAILED
        if self.store is not None:
            self.store.drop()
        return False

    def unique_key(self, url: str) -> str:
        """Request key scoped to this job so repeated URLs are never cached."""
        return f"{url}:{self.job_id}"

    def transition(self, state: JobState):
        if self.state in TERMINAL_STATES:
            raise RuntimeError(
                f"Job {self.job_id} already {self.state.value}, cannot move to {state.value}"
            )
        self.state = state

    def fail(self):
        """Mark the job failed from any state."""
        self.state = JobState.FAILED

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES


class RequestBudget:
    """Counts navigations against max_requests_per_crawl."""

    def __init__(self, max_requests: int):
        self.max_requests = max_requests
        self.handled = 0

    def consume(self):
        if self.handled >= self.max_requests:
            raise BudgetExceeded(self.max_requests)
        self.handled += 1

    @property
    def remaining(self) -> int:
        return max(0, self.max_requests - self.handled)


class PlaylistCrawler:
    """
    Run playlist requests on one browser page.

    Each request is loaded, expanded and extracted, and its videos are pushed
    to the job's result store as one batch. A request that still fails after
    max_request_retries retries fails the whole job.
    """

    def __init__(self, page, job: CrawlJob, config: ScrapeConfig):
        self.page = page
        self.job = job
        self.config = config
        self.budget = RequestBudget(config.max_requests_per_crawl)

    async def run(self, requests: List[CrawlRequest]) -> int:
        """
        Process requests in order until done or out of budget.

        Returns:
            Number of requests processed
        """
        processed = 0
        for request in requests:
            try:
                self.budget.consume()
            except BudgetExceeded as e:
                print(f"{e}. No further entries will be crawled.")
                break

            await self._process(request)
            processed += 1

        return processed

    async def _process(self, request: CrawlRequest):
        while True:
            try:
                await self.handle_request(request)
                return
            except Exception as e:
                if request.retry_count >= self.config.max_request_retries:
                    self.failed_request_handler(request, e)
                    raise JobFailure(request.url, e) from e

                request.retry_count += 1
                print(
                    f"Retrying {request.url} "
                    f"({request.retry_count}/{self.config.max_request_retries}): {e}"
                )

    async def handle_request(self, request: CrawlRequest):
        """Load, expand and extract one playlist page."""
        print(f"Processing {request.url}...")

        self.job.transition(JobState.LOADING)
        await self.page.goto(request.url)
        await wait_for_entries(self.page, self.config)

        self.job.transition(JobState.EXPANDING)
        rounds = await expand_entries(self.page, self.config)

        self.job.transition(JobState.EXTRACTING)
        videos = await extract_videos(self.page, self.config)

        print(f"Found {len(videos)} videos in the playlist ({rounds} scroll rounds)")

        self.job.store.push_data(
            {
                "url": request.url,
                "unique_key": request.unique_key,
                "videos": [video.to_dict() for video in videos],
            }
        )

    def failed_request_handler(self, request: CrawlRequest, error: Exception):
        print(f"Request {request.url} failed too many times: {error}")


async def run_crawl_job(
    url: str,
    page,
    config: ScrapeConfig,
    job: Optional[CrawlJob] = None,
) -> CrawlResult:
    """
    Run one crawl job for a playlist URL on an open page.

    Args:
        url: Playlist URL (already validated by the caller)
        page: Playwright page or compatible object
        config: Scrape configuration
        job: Job context to use (a new one is created if omitted)

    Returns:
        CrawlResult with videos and graph data

    Raises:
        JobFailure: Loading or extraction failed
    """
    job = job or CrawlJob(config)

    async with job:
        crawler = PlaylistCrawler(page, job, config)
        request = CrawlRequest(url=url, unique_key=job.unique_key(url))

        try:
            await crawler.run([request])
            batches = job.store.get_data()
        except JobFailure as e:
            print(f"Crawling failed: {e}")
            job.fail()
            raise
        except Exception as e:
            print(f"Crawling failed: {e}")
            job.fail()
            raise JobFailure(url, e) from e

        videos = []
        if batches:
            videos = [VideoRecord.from_dict(item) for item in batches[0]["videos"]]

        job.transition(JobState.SUCCEEDED)
        return CrawlResult(videos=videos, aggregates=build_graph_data(videos))


async def scrape_playlist(
    url: str,
    config: Optional[ScrapeConfig] = None,
    page=None,
) -> CrawlResult:
    """
    Scrape a playlist URL end to end.

    Opens a headless browser unless a page is supplied.

    Raises:
        JobFailure: The browser could not start or the job failed
    """
    config = config or ScrapeConfig()

    if page is not None:
        return await run_crawl_job(url, page, config)

    try:
        async with PlaywrightBrowser(config) as browser:
            page = await browser.new_page()
            return await run_crawl_job(url, page, config)
    except JobFailure:
        raise
    except Exception as e:
        print(f"Browser session failed: {e}")
        raise JobFailure(url, e) from e
