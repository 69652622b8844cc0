"""Edit-distance ranking of catalog titles against a search query."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from rapidfuzz.distance import Levenshtein

from mplus_source.domain.models import SeriesCandidate


def title_distance(query: str, name: str) -> int:
    """Return the case-insensitive Levenshtein distance between ``query`` and ``name``."""
    return Levenshtein.distance(query.lower(), name.lower())


def rank_candidates(
    query: str,
    candidates: Iterable[SeriesCandidate],
    limit: int,
) -> tuple[SeriesCandidate, ...]:
    """
    Return the ``limit`` candidates closest to ``query``, best first.

    Candidates are ordered by ascending edit distance; ``sorted`` is stable so
    equal distances keep their catalog order. Each returned candidate is a new
    value whose ``rank`` is its position. The input candidates are not touched.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    scored = sorted(candidates, key=lambda candidate: title_distance(query, candidate.name))
    return tuple(
        replace(candidate, rank=rank)
        for rank, candidate in enumerate(scored[:limit])
    )
