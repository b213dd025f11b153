"""
Post-processing of raw fuzzy candidates: facet filtering, literal-match
boosting and re-sorting. Boosted scores are ranking keys only and may exceed 1.
"""
import re
from typing import Iterable, NamedTuple

from occupation_browser.config import Settings, settings
from occupation_browser.schemas.occupation import Occupation
from occupation_browser.schemas.search import SearchFilters, SearchMatch


class ScoredOccupation(NamedTuple):
    occupation: Occupation
    score: float
    matches: list[SearchMatch]


def matches_filters(occupation: Occupation, filters: SearchFilters | None) -> bool:
    if filters is None:
        return True
    if filters.isco_major_groups:
        major_group = occupation.code[:1]
        if not major_group or major_group not in filters.isco_major_groups:
            return False
    if filters.occupation_types:
        if not occupation.occupation_type or occupation.occupation_type not in filters.occupation_types:
            return False
    return True


def boost_score(score: float, occupation: Occupation, query: str, config: Settings | None = None) -> float:
    config = config or settings
    query_lower = query.lower()
    label = occupation.preferred_label.lower()

    if query_lower in label:
        score *= config.label_boost
    if query_lower in occupation.code.lower():
        score *= config.code_boost
    if re.search(r"\b" + re.escape(query_lower), label):
        score *= config.word_boundary_boost
    return score


def rank_candidates(
    candidates: Iterable[ScoredOccupation],
    query: str,
    filters: SearchFilters | None = None,
    limit: int = 100,
    config: Settings | None = None,
) -> list[ScoredOccupation]:
    kept = [c for c in candidates if matches_filters(c.occupation, filters)]
    boosted = [c._replace(score=boost_score(c.score, c.occupation, query, config)) for c in kept]
    # sorted() is stable, so equal scores keep their fuzzy order
    boosted = sorted(boosted, key=lambda c: c.score, reverse=True)
    return boosted[:max(limit, 0)]
