"""Tests for waiting on and expanding the playlist page."""

import asyncio

import pytest

from scripts.playlist_scraper.config import ScrapeConfig
from scripts.playlist_scraper.page_loader import (
    expand_entries,
    wait_for_entries,
)

from tests.fake_page import FakePage, make_entry


@pytest.fixture
def config():
    return ScrapeConfig(scroll_pause_seconds=0)


def test_expand_reveals_all_batches(config):
    page = FakePage([[make_entry()] * 3, [make_entry()] * 3, [make_entry()] * 2])

    rounds = asyncio.run(expand_entries(page, config))

    assert len(page.visible) == 8
    assert not page.pending
    # Two growing scrolls plus one that confirms the height is stable
    assert rounds == 3
    assert page.scrolls == 3


def test_expand_single_batch_scrolls_once(config):
    page = FakePage([[make_entry()]])

    assert asyncio.run(expand_entries(page, config)) == 1


def test_expansion_appends_without_reordering(config):
    first = [make_entry(title="a"), make_entry(title="b")]
    second = [make_entry(title="c")]
    page = FakePage([first, second])

    asyncio.run(expand_entries(page, config))

    assert page.visible[:2] == first
    assert page.visible[2:] == second


def test_wait_uses_configured_timeout(config):
    page = FakePage([[make_entry()]])

    asyncio.run(wait_for_entries(page, config))

    assert page.wait_timeouts == [30_000]


def test_wait_timeout_raises_builtin_timeout(config):
    page = FakePage([[]])

    with pytest.raises(TimeoutError):
        asyncio.run(wait_for_entries(page, config))
