"""Tests for chapter-group flattening and chapter field mapping."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from mplus_source.domain.models import ChapterEntry, ChapterSeries
from mplus_source.errors import DecodeError
from mplus_source.source import chapters


def _chapter(chapter_id: int, name: str, sub_title: str = "", timestamp: int = 1600000000) -> dict[str, Any]:
    return {
        "titleId": 100020,
        "chapterId": chapter_id,
        "name": name,
        "subTitle": sub_title,
        "startTimeStamp": timestamp,
    }


class DummyLister(chapters.ChapterListMixin):
    """ChapterListMixin harness with in-memory title details."""

    def __init__(self, details: dict[str, Any]) -> None:
        """Store title details keyed by title ID."""
        self.details = details
        self.requested: list[str] = []

    def _get_title_details(self, title_id: str | int) -> dict[str, Any]:
        """Return stored details for ``title_id``."""
        self.requested.append(str(title_id))
        return self.details[str(title_id)]


def test_to_chapter_entry_maps_raw_record() -> None:
    """Verify number stripping, id stringification and shared dates."""
    entry = chapters.to_chapter_entry(
        {"name": "#12", "startTimeStamp": 1600000000, "chapterId": 555, "subTitle": "Title"}
    )

    expected_date = datetime.fromtimestamp(1600000000, tz=timezone.utc)
    assert entry == ChapterEntry(
        number="12",
        title="Title",
        identifier="555",
        created_at=expected_date,
        updated_at=expected_date,
        published_at=expected_date,
    )
    assert entry.description == ""
    assert entry.group is None
    assert entry.variant is None


def test_to_chapter_entry_keeps_special_chapter_names() -> None:
    """Verify names without a '#' marker are kept verbatim."""
    entry = chapters.to_chapter_entry({"name": "ex", "chapterId": 1})

    assert entry.number == "ex"
    assert entry.title == ""
    assert entry.published_at is None


def test_to_chapter_entry_requires_name_and_id() -> None:
    """Verify records missing required fields raise ``DecodeError``."""
    with pytest.raises(DecodeError):
        chapters.to_chapter_entry({"name": "#1"})
    with pytest.raises(DecodeError):
        chapters.to_chapter_entry({"chapterId": 1})


def test_to_chapter_entry_treats_null_subtitle_as_empty() -> None:
    """Verify a JSON null subtitle becomes an empty title."""
    entry = chapters.to_chapter_entry({"name": "#1", "chapterId": 1, "subTitle": None})

    assert entry.title == ""


def test_to_chapter_entry_rejects_null_name_or_id() -> None:
    """Verify null required fields raise ``DecodeError``."""
    with pytest.raises(DecodeError):
        chapters.to_chapter_entry({"name": None, "chapterId": 1})
    with pytest.raises(DecodeError):
        chapters.to_chapter_entry({"name": "#1", "chapterId": None})


@pytest.mark.parametrize("timestamp", ["soon", float("nan"), 10**20, [1600000000]])
def test_to_chapter_entry_rejects_malformed_timestamp(timestamp: Any) -> None:
    """Verify unusable start timestamps raise ``DecodeError``."""
    with pytest.raises(DecodeError, match="startTimeStamp"):
        chapters.to_chapter_entry({"name": "#1", "chapterId": 1, "startTimeStamp": timestamp})


def test_list_chapters_concatenates_sub_lists_in_group_order() -> None:
    """Verify first, mid and last sub-lists are joined per group, groups in API order."""
    details = {
        "100020": {
            "chapterListGroup": [
                {
                    "chapterNumbers": "1-50",
                    "firstChapterList": [_chapter(1, "#001"), _chapter(2, "#002")],
                    "midChapterList": [_chapter(3, "#003")],
                    "lastChapterList": [_chapter(4, "#004")],
                },
                {
                    "chapterNumbers": "51-100",
                    "firstChapterList": [_chapter(51, "#051")],
                    "lastChapterList": [_chapter(99, "#099"), _chapter(100, "#100")],
                },
            ]
        }
    }
    lister = DummyLister(details)

    result = lister.list_chapters("100020")

    assert isinstance(result, ChapterSeries)
    assert [entry.identifier for entry in result] == ["1", "2", "3", "4", "51", "99", "100"]
    assert [entry.number for entry in result][:2] == ["001", "002"]
    assert lister.requested == ["100020"]


def test_list_chapters_preserves_total_count_without_dedup() -> None:
    """Verify output length equals the sum of all present sub-list lengths."""
    group = {
        "firstChapterList": [_chapter(1, "#1"), _chapter(1, "#1")],
        "midChapterList": None,
        "lastChapterList": [_chapter(2, "#2"), _chapter(1, "#1")],
    }
    details = {"7": {"chapterListGroup": [group, {}, group]}}

    result = DummyLister(details).list_chapters("7")

    assert len(result) == 8


def test_list_chapters_with_empty_group_list() -> None:
    """Verify a series without chapter groups yields no chapters."""
    assert len(DummyLister({"7": {"chapterListGroup": []}}).list_chapters("7")) == 0


def test_list_chapters_requires_chapter_group_list() -> None:
    """Verify missing or malformed chapter groups raise ``DecodeError``."""
    with pytest.raises(DecodeError, match="chapterListGroup"):
        DummyLister({"7": {"title": {}}}).list_chapters("7")
    with pytest.raises(DecodeError):
        DummyLister({"7": {"chapterListGroup": {"firstChapterList": []}}}).list_chapters("7")
    with pytest.raises(DecodeError):
        DummyLister({"7": {"chapterListGroup": [{"firstChapterList": "nope"}]}}).list_chapters("7")
    with pytest.raises(DecodeError):
        DummyLister({"7": {"chapterListGroup": ["nope"]}}).list_chapters("7")


def test_chapter_list_mixin_placeholder_raises_not_implemented() -> None:
    """Verify the default title-details placeholder raises."""
    with pytest.raises(NotImplementedError):
        chapters.ChapterListMixin._get_title_details(None, 1)  # type: ignore[arg-type]
