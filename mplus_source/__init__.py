"""MANGA Plus content source."""

from mplus_source.constants import EXTENSION_ID
from mplus_source.domain.models import (
    ChapterEntry,
    ChapterPages,
    ChapterSeries,
    PageDescriptor,
    SeriesCandidate,
    SeriesSearchResult,
)
from mplus_source.errors import ApiError, DecodeError, FetchError, NotFoundError, SourceError
from mplus_source.source.aio import AsyncMangaPlusSource
from mplus_source.source.decryption import decrypt_page, xor_decrypt
from mplus_source.source.init import MangaPlusSource

__all__ = [
    "EXTENSION_ID",
    "ApiError",
    "AsyncMangaPlusSource",
    "ChapterEntry",
    "ChapterPages",
    "ChapterSeries",
    "DecodeError",
    "FetchError",
    "MangaPlusSource",
    "NotFoundError",
    "PageDescriptor",
    "SeriesCandidate",
    "SeriesSearchResult",
    "SourceError",
    "decrypt_page",
    "xor_decrypt",
]
