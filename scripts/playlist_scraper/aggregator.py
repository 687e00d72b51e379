"""Chart data derived from scraped playlist videos."""

from typing import List

from .models import AggregateRecord, VideoRecord
from .parsers import parse_duration


def build_graph_data(videos: List[VideoRecord]) -> List[AggregateRecord]:
    """
    Build one chart point per video, labelled by position.

    Args:
        videos: Videos in playlist order

    Returns:
        List of AggregateRecord, same length and order as videos
    """
    return [
        AggregateRecord(
            label=f"Vid {index + 1}",
            views=video.views,
            duration_seconds=parse_duration(video.duration_label),
        )
        for index, video in enumerate(videos)
    ]
