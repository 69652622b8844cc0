"""Awaitable facade over ``MangaPlusSource`` for asyncio hosts."""

from __future__ import annotations

import asyncio

from mplus_source.constants import EXTENSION_ID, ImageQuality
from mplus_source.domain.models import ChapterPages, ChapterSeries, PageDescriptor, SeriesSearchResult
from mplus_source.source.init import MangaPlusSource


class AsyncMangaPlusSource:
    """
    Expose the source operations as coroutines.

    Each call runs the blocking ``requests`` based operation in a worker thread
    so the host's event loop is never blocked. Errors propagate unchanged.
    """

    identifier = EXTENSION_ID

    def __init__(self, source: MangaPlusSource | None = None) -> None:
        self.source = source if source is not None else MangaPlusSource()

    async def search(self, query: str) -> SeriesSearchResult:
        return await asyncio.to_thread(self.source.search, query)

    async def list_chapters(self, series_id: str) -> ChapterSeries:
        return await asyncio.to_thread(self.source.list_chapters, series_id)

    async def get_pages(self, chapter_id: str) -> ChapterPages:
        return await asyncio.to_thread(self.source.get_pages, chapter_id)

    async def download_page(
        self,
        page: PageDescriptor,
        quality: ImageQuality | str = ImageQuality.HIGH,
    ) -> bytes:
        return await asyncio.to_thread(self.source.download_page, page, quality)
