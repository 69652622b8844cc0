"""Tests for edit-distance ranking of search candidates."""

from __future__ import annotations

import pytest

from mplus_source.domain.models import UNRANKED, SeriesCandidate
from mplus_source.source.ranking import rank_candidates, title_distance


def _candidates(*names: str) -> list[SeriesCandidate]:
    return [SeriesCandidate(name=name, identifier=str(index)) for index, name in enumerate(names)]


def test_title_distance_is_case_insensitive() -> None:
    """Verify case differences do not add to the distance."""
    assert title_distance("one piece", "One Piece") == 0
    assert title_distance("naruto", "Boruto") == 2


def test_rank_candidates_orders_by_distance_and_assigns_positions() -> None:
    """Verify candidates are sorted by distance and ranked from zero."""
    candidates = _candidates("Dandadan", "One Punch-Man", "One Piece", "Kagurabachi")

    ranked = rank_candidates("one piece", candidates, limit=5)

    assert [candidate.name for candidate in ranked][0] == "One Piece"
    assert [candidate.rank for candidate in ranked] == [0, 1, 2, 3]
    distances = [title_distance("one piece", candidate.name) for candidate in ranked]
    assert distances == sorted(distances)


def test_rank_candidates_caps_result_count() -> None:
    """Verify at most ``limit`` candidates are returned."""
    candidates = _candidates(*(f"Title {index}" for index in range(12)))

    ranked = rank_candidates("title", candidates, limit=5)

    assert len(ranked) == 5
    assert sorted(candidate.rank for candidate in ranked) == list(range(5))


def test_rank_candidates_keeps_catalog_order_for_ties() -> None:
    """Verify equal distances keep their input order."""
    candidates = _candidates("abd", "abe", "abf")

    ranked = rank_candidates("abc", candidates, limit=3)

    assert [candidate.identifier for candidate in ranked] == ["0", "1", "2"]


def test_rank_candidates_returns_new_values() -> None:
    """Verify input candidates keep their unranked state."""
    candidates = _candidates("Sakamoto Days", "Chainsaw Man")

    ranked = rank_candidates("chainsaw man", candidates, limit=1)

    assert ranked == (SeriesCandidate(name="Chainsaw Man", identifier="1", rank=0),)
    assert all(candidate.rank == UNRANKED for candidate in candidates)
    assert ranked[0] is not candidates[1]


def test_rank_candidates_handles_empty_catalog() -> None:
    """Verify an empty catalog yields no results."""
    assert rank_candidates("anything", [], limit=5) == ()


def test_rank_candidates_rejects_negative_limit() -> None:
    """Verify a negative limit is refused."""
    with pytest.raises(ValueError):
        rank_candidates("query", _candidates("a"), limit=-1)
