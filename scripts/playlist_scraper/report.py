"""Console report of a scraped playlist."""

from typing import List

from .config import VIDEOS_PER_PAGE
from .models import CrawlResult, VideoRecord


def format_views(views: int) -> str:
    """Compact view count: 1.2M, 3.4K or the plain number."""
    if views >= 1_000_000:
        return f"{views / 1_000_000:.1f}M"
    if views >= 1_000:
        return f"{views / 1_000:.1f}K"
    return str(views)


def format_seconds(seconds: int) -> str:
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def page_count(total: int, per_page: int = VIDEOS_PER_PAGE) -> int:
    if total <= 0:
        return 1
    return (total + per_page - 1) // per_page


def paginate(
    videos: List[VideoRecord], page: int, per_page: int = VIDEOS_PER_PAGE
) -> List[VideoRecord]:
    """Return the videos on a 1-based page (empty past the last page)."""
    if page < 1:
        return []
    start = (page - 1) * per_page
    return videos[start : start + per_page]


def print_videos(result: CrawlResult, page: int = 1, per_page: int = VIDEOS_PER_PAGE):
    """Print one page of the numbered video list."""
    total_pages = page_count(len(result.videos), per_page)
    start = (page - 1) * per_page

    print("\n" + "=" * 70)
    print(f"Video List (page {page}/{total_pages})")
    print("=" * 70)

    for i, video in enumerate(paginate(result.videos, page, per_page)):
        print(f"{start + i + 1}. {video.title or '(untitled)'}")
        details = f"{format_views(video.views)} views"
        if video.duration_label:
            details += f" • {video.duration_label}"
        print(f"    {details}")


def print_summary(result: CrawlResult):
    """Print playlist totals."""
    total_views = sum(video.views for video in result.videos)
    total_seconds = sum(point.duration_seconds for point in result.aggregates)

    print("\n" + "=" * 70)
    print("Playlist Statistics")
    print("=" * 70)
    print(f"Videos: {len(result.videos):,}")
    print(f"Total views: {total_views:,}")
    print(f"Total duration: {format_seconds(total_seconds)}")

    if result.videos:
        top = max(result.aggregates, key=lambda point: point.views)
        print(f"Most viewed: {top.label} ({format_views(top.views)} views)")
