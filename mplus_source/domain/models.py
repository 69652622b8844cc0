"""Immutable value objects returned to the host application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterator

from mplus_source.constants import CHAPTER_DATA_VERSION, PAGE_DATA_VERSION
from mplus_source.source.decryption import decrypt_page

# Rank carried by candidates that were not selected by the ranking step.
UNRANKED = -1


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True, slots=True)
class SeriesCandidate:
    """One title from the catalog that may match a search query."""

    name: str
    identifier: str
    cover_url: str | None = None
    rank: int = UNRANKED

    @property
    def is_ranked(self) -> bool:
        """Return whether a ranking step assigned this candidate a position."""
        return self.rank >= 0

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "identifier": self.identifier,
            "cover_url": self.cover_url,
            "rank": self.rank,
        }


@dataclass(frozen=True, slots=True)
class SeriesSearchResult:
    """Search results ordered by ascending rank."""

    results: tuple[SeriesCandidate, ...] = ()

    def __iter__(self) -> Iterator[SeriesCandidate]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index: int) -> SeriesCandidate:
        return self.results[index]

    def as_dict(self) -> dict[str, Any]:
        return {"results": [candidate.as_dict() for candidate in self.results]}


@dataclass(frozen=True, slots=True)
class ChapterEntry:
    """Normalized chapter metadata for one chapter of a series."""

    number: str
    title: str
    identifier: str
    description: str = ""
    group: str | None = None
    variant: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    published_at: datetime | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "title": self.title,
            "identifier": self.identifier,
            "description": self.description,
            "group": self.group,
            "variant": self.variant,
            "created_at": _isoformat(self.created_at),
            "updated_at": _isoformat(self.updated_at),
            "published_at": _isoformat(self.published_at),
        }


@dataclass(frozen=True, slots=True)
class ChapterSeries:
    """All chapters of a series in API order."""

    chapters: tuple[ChapterEntry, ...] = ()

    def __iter__(self) -> Iterator[ChapterEntry]:
        return iter(self.chapters)

    def __len__(self) -> int:
        return len(self.chapters)

    def __getitem__(self, index: int) -> ChapterEntry:
        return self.chapters[index]

    def as_dict(self) -> dict[str, Any]:
        return {"chapters": [chapter.as_dict() for chapter in self.chapters]}


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    """
    One displayable page with its image URL and XOR key for each tier.

    The keys are plain data; ``decrypt_high`` and ``decrypt_low`` delegate to
    the stateless ``decrypt_page`` with the matching tier key.
    """

    high_url: str
    high_key: str | None = None
    low_url: str | None = None
    low_key: str | None = None
    version: str = field(default=PAGE_DATA_VERSION, init=False)

    def decrypt_high(self, data: str | bytes) -> str:
        """Decrypt a base64 high-tier payload and return it base64 encoded."""
        return decrypt_page(self.high_key or "", data)

    def decrypt_low(self, data: str | bytes) -> str:
        """Decrypt a base64 low-tier payload and return it base64 encoded."""
        return decrypt_page(self.low_key or "", data)

    def as_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "high_url": self.high_url,
            "high_key": self.high_key,
            "low_url": self.low_url,
            "low_key": self.low_key,
        }


@dataclass(frozen=True, slots=True)
class ChapterPages:
    """Pages of a chapter in display order."""

    pages: tuple[PageDescriptor, ...] = ()
    version: str = field(default=CHAPTER_DATA_VERSION, init=False)

    def __iter__(self) -> Iterator[PageDescriptor]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __getitem__(self, index: int) -> PageDescriptor:
        return self.pages[index]

    def as_dict(self) -> dict[str, Any]:
        return {"version": self.version, "pages": [page.as_dict() for page in self.pages]}

