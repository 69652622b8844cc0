"""Flattening of MANGA Plus chapter groups into a uniform chapter list."""

from __future__ import annotations

import logging
from itertools import chain
from typing import Any, Iterator, Mapping

from mplus_source.constants import CHAPTER_LIST_KEYS
from mplus_source.domain.models import ChapterEntry, ChapterSeries
from mplus_source.errors import DecodeError
from mplus_source.utils import epoch_to_datetime, strip_chapter_number

log = logging.getLogger(__name__)


def iter_group_chapters(group: Mapping[str, Any]) -> Iterator[Mapping[str, Any]]:
    """Yield the chapters of one group from its first, mid and last sub-lists."""
    if not isinstance(group, Mapping):
        raise DecodeError("Chapter group is not an object")
    sub_lists = []
    for key in CHAPTER_LIST_KEYS:
        chapters = group.get(key)
        if chapters is None:
            continue
        if not isinstance(chapters, list):
            raise DecodeError(f"Chapter group '{key}' is not a list")
        sub_lists.append(chapters)
    return chain.from_iterable(sub_lists)


def to_chapter_entry(chapter: Mapping[str, Any]) -> ChapterEntry:
    """Map one raw chapter record onto a ``ChapterEntry``."""
    try:
        name = chapter["name"]
        chapter_id = chapter["chapterId"]
    except (KeyError, TypeError) as exc:
        raise DecodeError(f"Chapter record is missing a required field: {exc}") from exc

    if name is None or chapter_id is None:
        raise DecodeError("Chapter record has a null 'name' or 'chapterId'")

    timestamp = chapter.get("startTimeStamp")
    start_date = None
    if timestamp is not None:
        try:
            start_date = epoch_to_datetime(timestamp)
        except (TypeError, ValueError, OverflowError, OSError) as exc:
            raise DecodeError(f"Chapter {chapter_id} has an invalid startTimeStamp: {timestamp!r}") from exc
    return ChapterEntry(
        number=strip_chapter_number(str(name)),
        title=str(chapter.get("subTitle") or ""),
        identifier=str(chapter_id),
        created_at=start_date,
        updated_at=start_date,
        published_at=start_date,
    )


def flatten_chapter_groups(chapter_groups: Any) -> tuple[ChapterEntry, ...]:
    """
    Flatten ``chapterListGroup`` into chapter entries.

    Groups keep their API order and each contributes its first, mid and last
    sub-lists in that order. No sorting or de-duplication happens here.
    """
    if not isinstance(chapter_groups, list):
        raise DecodeError("'chapterListGroup' is not a list")
    return tuple(
        to_chapter_entry(chapter)
        for group in chapter_groups
        for chapter in iter_group_chapters(group)
    )


class ChapterListMixin:
    def _get_title_details(self, title_id: str | int) -> Mapping[str, Any]:
        """Load title detail payload for ``title_id``."""
        raise NotImplementedError

    def list_chapters(self, series_id: str) -> ChapterSeries:
        """
        Return every chapter of ``series_id`` in API order.
        """
        title_details = self._get_title_details(series_id)
        if "chapterListGroup" not in title_details:
            raise DecodeError("'titleDetailView' is missing 'chapterListGroup'")
        chapters = flatten_chapter_groups(title_details["chapterListGroup"])
        log.debug("Listed %d chapter(s) for series %s", len(chapters), series_id)
        return ChapterSeries(chapters=chapters)
