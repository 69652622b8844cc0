"""Tests for the asyncio facade over the source."""

from __future__ import annotations

import asyncio
import threading
from typing import Any

import pytest

from mplus_source import EXTENSION_ID
from mplus_source.domain.models import (
    ChapterEntry,
    ChapterPages,
    ChapterSeries,
    PageDescriptor,
    SeriesCandidate,
    SeriesSearchResult,
)
from mplus_source.errors import NotFoundError
from mplus_source.source.aio import AsyncMangaPlusSource


class RecordingSource:
    """Blocking source double recording the thread each call runs on."""

    def __init__(self, error: Exception | None = None) -> None:
        """Store an optional error raised by every call."""
        self.error = error
        self.calls: list[tuple[str, Any, str]] = []

    def _record(self, name: str, value: Any) -> None:
        self.calls.append((name, value, threading.current_thread().name))
        if self.error is not None:
            raise self.error

    def search(self, query: str) -> SeriesSearchResult:
        """Return one ranked candidate."""
        self._record("search", query)
        return SeriesSearchResult(results=(SeriesCandidate("One Piece", "100020", rank=0),))

    def list_chapters(self, series_id: str) -> ChapterSeries:
        """Return one chapter."""
        self._record("list_chapters", series_id)
        return ChapterSeries(chapters=(ChapterEntry("1", "Romance Dawn", "1000486"),))

    def get_pages(self, chapter_id: str) -> ChapterPages:
        """Return one page."""
        self._record("get_pages", chapter_id)
        return ChapterPages(pages=(PageDescriptor("h", "ff", "l", "0f"),))

    def download_page(self, page: PageDescriptor, quality: Any) -> bytes:
        """Return fixed image bytes."""
        self._record("download_page", (page.high_url, quality))
        return b"image"


def test_async_operations_delegate_off_the_event_loop_thread() -> None:
    """Verify each coroutine returns the blocking result from a worker thread."""
    source = RecordingSource()
    facade = AsyncMangaPlusSource(source)

    async def run() -> tuple[Any, ...]:
        pages = await facade.get_pages("1000486")
        return (
            await facade.search("one piece"),
            await facade.list_chapters("100020"),
            pages,
            await facade.download_page(pages[0], "low"),
        )

    results, chapters, pages, image = asyncio.run(run())

    assert results[0].name == "One Piece"
    assert chapters[0].identifier == "1000486"
    assert pages[0].low_key == "0f"
    assert image == b"image"
    assert [name for name, _value, _thread in source.calls] == [
        "get_pages",
        "search",
        "list_chapters",
        "download_page",
    ]
    assert all(thread != threading.current_thread().name for _name, _value, thread in source.calls)


def test_async_operations_propagate_errors() -> None:
    """Verify errors raised by the source reach the awaiting caller."""
    facade = AsyncMangaPlusSource(RecordingSource(error=NotFoundError("gone")))

    with pytest.raises(NotFoundError, match="gone"):
        asyncio.run(facade.list_chapters("999999"))


def test_async_facade_shares_source_identifier() -> None:
    """Verify the facade registers under the same source id."""
    assert AsyncMangaPlusSource.identifier == EXTENSION_ID
