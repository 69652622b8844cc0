"""Chapter page resolution across the high and low image tiers."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Mapping, Sequence

from mplus_source.constants import ImageQuality
from mplus_source.domain.models import ChapterPages, PageDescriptor

log = logging.getLogger(__name__)


def usable_manga_page(page: Any) -> Mapping[str, Any] | None:
    """
    Return the ``mangaPage`` record of a viewer entry if it carries an image.

    Viewer entries without image data (last page, interstitials, ads) return
    None.
    """
    if not isinstance(page, Mapping):
        return None
    manga_page = page.get("mangaPage")
    if not isinstance(manga_page, Mapping) or not manga_page.get("imageUrl"):
        return None
    return manga_page


def pair_pages(high_pages: Sequence[Any], low_pages: Sequence[Any]) -> tuple[PageDescriptor, ...]:
    """
    Pair high and low tier viewer entries by position.

    Both tiers are expected to list the same pages in the same order. Only
    indices where both tiers hold a usable page are emitted; anything past
    the shorter tier is dropped.
    """
    descriptors: list[PageDescriptor] = []
    for index in range(min(len(high_pages), len(low_pages))):
        high = usable_manga_page(high_pages[index])
        low = usable_manga_page(low_pages[index])
        if high is None or low is None:
            log.debug("Skipping viewer entry %d without an image in both tiers", index)
            continue
        descriptors.append(
            PageDescriptor(
                high_url=high["imageUrl"],
                high_key=high.get("encryptionKey"),
                low_url=low["imageUrl"],
                low_key=low.get("encryptionKey"),
            )
        )
    if len(high_pages) != len(low_pages):
        log.warning(
            "Image tiers disagree on page count (high=%d, low=%d)",
            len(high_pages),
            len(low_pages),
        )
    return tuple(descriptors)


class PagesMixin:
    def _load_pages(self, chapter_id: str | int, quality: ImageQuality) -> list:
        """Load the viewer page list of ``chapter_id`` for one tier."""
        raise NotImplementedError

    def get_pages(self, chapter_id: str) -> ChapterPages:
        """
        Return the pages of ``chapter_id`` with URLs and keys for both tiers.

        The high and low tier viewers are requested concurrently; a failure
        of either request fails the call.
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            high_future = executor.submit(self._load_pages, chapter_id, ImageQuality.HIGH)
            low_future = executor.submit(self._load_pages, chapter_id, ImageQuality.LOW)
            high_pages = high_future.result()
            low_pages = low_future.result()

        pages = pair_pages(high_pages, low_pages)
        log.debug("Resolved %d page(s) for chapter %s", len(pages), chapter_id)
        return ChapterPages(pages=pages)
