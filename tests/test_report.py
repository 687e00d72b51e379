"""Tests for the console report helpers."""

import pytest

from scripts.playlist_scraper.aggregator import build_graph_data
from scripts.playlist_scraper.models import CrawlResult, VideoRecord
from scripts.playlist_scraper.report import (
    format_seconds,
    format_views,
    page_count,
    paginate,
    print_summary,
    print_videos,
)


@pytest.mark.parametrize(
    "views, expected",
    [(0, "0"), (999, "999"), (1_000, "1.0K"), (1_500, "1.5K"), (1_200_000, "1.2M"), (3_000_000_000, "3000.0M")],
)
def test_format_views(views, expected):
    assert format_views(views) == expected


def test_format_seconds():
    assert format_seconds(45) == "0:45"
    assert format_seconds(272) == "4:32"
    assert format_seconds(3_725) == "1:02:05"


def test_paginate():
    videos = [VideoRecord(title=str(i)) for i in range(20)]

    assert [v.title for v in paginate(videos, 1)] == [str(i) for i in range(8)]
    assert [v.title for v in paginate(videos, 3)] == ["16", "17", "18", "19"]
    assert paginate(videos, 4) == []
    assert paginate(videos, 0) == []
    assert page_count(20) == 3
    assert page_count(0) == 1


def test_print_report(capsys):
    videos = [
        VideoRecord(title="First", views=1_500, duration_label="1 minutes, 0 seconds"),
        VideoRecord(title="", views=20),
    ]
    result = CrawlResult(videos=videos, aggregates=build_graph_data(videos))

    print_videos(result)
    print_summary(result)

    out = capsys.readouterr().out
    assert "1. First" in out
    assert "1.5K views • 1 minutes, 0 seconds" in out
    assert "2. (untitled)" in out
    assert "Total views: 1,520" in out
    assert "Total duration: 1:00" in out
    assert "Most viewed: Vid 1" in out
