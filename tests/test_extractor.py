"""Tests for per-entry extraction from a loaded playlist page."""

import asyncio

from scripts.playlist_scraper.config import ScrapeConfig
from scripts.playlist_scraper.extractor import extract_video, extract_videos
from scripts.playlist_scraper.models import VideoRecord

from tests.fake_page import FakeElement, FakePage, make_entry


def test_full_entry():
    entry = make_entry(
        title="Intro to Python",
        views="1.2M views",
        thumbnail="https://i.ytimg.com/vi/xyz/hqdefault.jpg",
        duration="4 minutes, 32 seconds",
    )

    video = asyncio.run(extract_video(entry, ScrapeConfig()))

    assert video == VideoRecord(
        title="Intro to Python",
        views=1_200_000,
        thumbnail="https://i.ytimg.com/vi/xyz/hqdefault.jpg",
        duration_label="4 minutes, 32 seconds",
    )


def test_missing_children_default_to_empty():
    entry = make_entry(title=None, views=None, thumbnail=None, duration=None)

    video = asyncio.run(extract_video(entry, ScrapeConfig()))

    assert video == VideoRecord(title="", views=0, thumbnail="", duration_label="")


def test_null_text_and_src():
    entry = FakeElement(
        children={
            "#video-title": FakeElement(text=None),
            "img": FakeElement(src=None),
            "badge-shape[aria-label]": FakeElement(attributes={}),
        }
    )

    video = asyncio.run(extract_video(entry, ScrapeConfig()))

    assert video.title == ""
    assert video.thumbnail == ""
    assert video.duration_label == ""


def test_document_order_preserved():
    entries = [make_entry(title=f"Video {i}", views=f"{i} views") for i in range(1, 6)]
    page = FakePage([entries])

    videos = asyncio.run(extract_videos(page, ScrapeConfig()))

    assert [v.title for v in videos] == [f"Video {i}" for i in range(1, 6)]
    assert [v.views for v in videos] == [1, 2, 3, 4, 5]


def test_one_record_per_entry_even_when_bare():
    entries = [make_entry(), FakeElement(), make_entry(title="Last")]
    page = FakePage([entries])

    videos = asyncio.run(extract_videos(page, ScrapeConfig()))

    assert len(videos) == 3
    assert videos[1] == VideoRecord()
    assert videos[2].title == "Last"


def test_no_entries():
    assert asyncio.run(extract_videos(FakePage([[]]), ScrapeConfig())) == []
