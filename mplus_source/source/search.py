"""Title search over the full MANGA Plus catalog."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from mplus_source.config import SourceSettings
from mplus_source.domain.models import SeriesCandidate, SeriesSearchResult
from mplus_source.errors import DecodeError
from mplus_source.source.ranking import rank_candidates

log = logging.getLogger(__name__)


def _default_language_title(group: Mapping[str, Any]) -> Mapping[str, Any] | None:
    """
    Return the title of ``group`` that has no language tag.

    MANGA Plus leaves the language unset for the English edition, which is
    used as the canonical name of the series.
    """
    titles = group.get("titles")
    if not isinstance(titles, list):
        raise DecodeError("Title group has no 'titles' list")
    for title in titles:
        if isinstance(title, Mapping) and not title.get("language"):
            return title
    return None


def build_candidates(title_groups: list) -> list[SeriesCandidate]:
    """Build unranked candidates from raw title index groups."""
    candidates: list[SeriesCandidate] = []
    for group in title_groups:
        if not isinstance(group, Mapping):
            raise DecodeError("Title group is not an object")
        title = _default_language_title(group)
        if title is None:
            continue
        try:
            candidates.append(
                SeriesCandidate(
                    name=str(title["name"]),
                    identifier=str(title["titleId"]),
                    cover_url=title.get("portraitImageUrl"),
                )
            )
        except KeyError as exc:
            raise DecodeError(f"Title record is missing {exc.args[0]!r}") from exc
    return candidates


class SearchMixin:
    settings: SourceSettings

    def _load_title_index(self) -> list:
        """Load the raw title index groups."""
        raise NotImplementedError

    def search(self, query: str) -> SeriesSearchResult:
        """
        Return the catalog titles closest to ``query``.

        The whole title index is fetched with one request and ranked by
        case-insensitive edit distance; at most ``settings.result_limit``
        candidates are returned, ordered by ascending rank.
        """
        candidates = build_candidates(self._load_title_index())
        ranked = rank_candidates(query, candidates, self.settings.result_limit)
        log.debug(
            "Ranked %d of %d catalog titles for query %r",
            len(ranked),
            len(candidates),
            query,
        )
        return SeriesSearchResult(results=ranked)
