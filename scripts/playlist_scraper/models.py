"""
Data models for scraped playlist videos and derived chart data.

`to_dict()` on each model yields the JSON shape returned to callers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class VideoRecord:
    """Metadata for one playlist entry."""

    title: str = ""
    views: int = 0
    thumbnail: str = ""
    duration_label: str = ""  # Raw text, e.g. "4 minutes, 32 seconds"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "views": self.views,
            "thumbnail": self.thumbnail,
            "duration": self.duration_label,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VideoRecord":
        return cls(
            title=data.get("title", ""),
            views=data.get("views", 0),
            thumbnail=data.get("thumbnail", ""),
            duration_label=data.get("duration", ""),
        )


@dataclass
class AggregateRecord:
    """Chart point derived from one VideoRecord."""

    label: str
    views: int
    duration_seconds: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.label,
            "views": self.views,
            "duration": self.duration_seconds,
        }


@dataclass
class CrawlResult:
    """Videos of a playlist plus their aggregates, in page order."""

    videos: List[VideoRecord] = field(default_factory=list)
    aggregates: List[AggregateRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "videoList": [video.to_dict() for video in self.videos],
            "graphData": [point.to_dict() for point in self.aggregates],
        }


@dataclass
class CrawlRequest:
    """One page navigation within a crawl job."""

    url: str
    unique_key: str
    retry_count: int = 0
