"""
Weighted multi-field fuzzy search over an in-memory occupation list.

A field matches when some window of it is within `search_threshold * len(query)`
Levenshtein edits of the query. rapidfuzz's partial_ratio narrows each column
to fields that can hold such a window, then every non-overlapping window inside
the error budget is collected for scoring and highlighting.
"""
import logging
import math
import sys
from itertools import islice
from typing import Iterable

from rapidfuzz import fuzz, process
from rapidfuzz.distance import Levenshtein

from occupation_browser.config import Settings, settings
from occupation_browser.schemas.occupation import Occupation
from occupation_browser.schemas.search import AvailableFilters, SearchFilters, SearchMatch, SearchResult
from occupation_browser.services.category_service import breadcrumb
from occupation_browser.services.ranking_service import ScoredOccupation, matches_filters, rank_candidates

logger = logging.getLogger(__name__)

EPSILON = sys.float_info.epsilon


def field_norm(value: str) -> float:
    # Shorter fields weigh more: 1 / sqrt(number of tokens)
    return round(1 / math.sqrt(max(len(value.split()), 1)), 3)


def max_errors(pattern: str, threshold: float) -> int:
    return math.floor(threshold * len(pattern) + 1e-9)


def matching_windows(pattern: str, text: str, threshold: float, min_length: int) -> list[tuple[int, int, int]]:
    """Return (start, end, errors) for every non-overlapping window of text within the error budget.

    Windows are taken best first: fewest edits, then earliest start, then longest.
    """
    if not pattern or len(text) < min_length:
        return []

    budget = max_errors(pattern, threshold)
    shortest = max(len(pattern) - budget, min_length, 1)
    longest = min(len(pattern) + budget, len(text))
    spans = [
        (start, start + length)
        for length in range(shortest, longest + 1)
        for start in range(len(text) - length + 1)
    ]
    hits = process.extract(
        pattern,
        [text[start:end] for start, end in spans],
        scorer=Levenshtein.distance,
        score_cutoff=budget,
        limit=None,
    )
    ranked = sorted((errors, spans[i][0], -spans[i][1]) for _, errors, i in hits)

    windows = []
    for errors, start, neg_end in ranked:
        end = -neg_end
        if all(end <= taken_start or start >= taken_end for taken_start, taken_end, _ in windows):
            windows.append((start, end, errors))
    windows.sort()
    return windows


def highlight_indices(pattern: str, text: str, windows: list[tuple[int, int, int]], min_length: int) -> list[tuple[int, int]]:
    """Runs of characters shared with the pattern inside each window, as inclusive offsets."""
    indices = []
    for window_start, window_end, _ in windows:
        for op in Levenshtein.opcodes(pattern, text[window_start:window_end]):
            if op.tag == "equal" and op.dest_end - op.dest_start >= min_length:
                indices.append((window_start + op.dest_start, window_start + op.dest_end - 1))
    return indices


class SearchIndex:
    def __init__(self, occupations: Iterable[Occupation], config: Settings | None = None):
        if occupations is None:
            raise TypeError("occupations must be an iterable of Occupation, not None")
        self._config = config or settings
        self._occupations: tuple[Occupation, ...] = tuple(occupations)

        weights = {key: w for key, w in self._config.field_weights.items() if w > 0}
        unknown = sorted(set(weights) - set(Occupation.model_fields))
        if unknown:
            raise ValueError(f"Unknown searchable fields: {', '.join(unknown)}")
        total = sum(weights.values())
        if total <= 0:
            raise ValueError("At least one searchable field needs a positive weight")
        self._weights = {key: w / total for key, w in weights.items()}

        self._columns = {
            key: [getattr(o, key).lower() for o in self._occupations] for key in self._weights
        }
        self._norms = {
            key: [field_norm(value) for value in column] for key, column in self._columns.items()
        }
        logger.info("Indexed %d occupations over %d fields", len(self._occupations), len(self._weights))

    def __len__(self) -> int:
        return len(self._occupations)

    @property
    def occupations(self) -> tuple[Occupation, ...]:
        return self._occupations

    def fuzzy_search(self, text: str, limit: int) -> list[ScoredOccupation]:
        """Raw fuzzy candidates, best first, with scores in [0, 1]."""
        pattern = (text or "").strip().lower()
        if limit <= 0 or len(pattern) < self._config.min_match_char_length:
            return []

        hits: dict[int, list[str]] = {}
        for key in self._weights:
            for position in self._prefilter(key, pattern):
                hits.setdefault(position, []).append(key)

        candidates = []
        for position in sorted(hits):
            candidate = self._score(position, pattern, hits[position])
            if candidate is not None:
                candidates.append(candidate)
        candidates.sort(key=lambda c: c.score, reverse=True)
        logger.debug("Query %r: %d fuzzy candidates", pattern, len(candidates))
        return candidates[:limit]

    def _prefilter(self, key: str, pattern: str) -> list[int]:
        """Positions whose value in this column may hold a window within the error budget.

        A window within k edits of the pattern implies a pattern-length window with
        partial_ratio >= 100 * (1 - k / len(pattern)), so the cutoff never drops a
        real match. Values shorter than the pattern have no such window and are
        kept whenever they are long enough to be reached by deletions.
        """
        column = self._columns[key]
        positions = {
            position
            for _, _, position in process.extract(
                pattern,
                column,
                scorer=fuzz.partial_ratio,
                score_cutoff=max(self._config.score_cutoff - 1e-6, 0),
                limit=None,
            )
        }
        shortest = max(len(pattern) - max_errors(pattern, self._config.search_threshold),
                       self._config.min_match_char_length)
        positions.update(
            position for position, value in enumerate(column) if shortest <= len(value) < len(pattern)
        )
        return sorted(positions)

    def _score(self, position: int, pattern: str, keys: list[str]) -> ScoredOccupation | None:
        occupation = self._occupations[position]
        min_length = self._config.min_match_char_length
        total = 1.0
        matches = []
        for key in keys:
            text = self._columns[key][position]
            windows = matching_windows(pattern, text, self._config.search_threshold, min_length)
            indices = highlight_indices(pattern, text, windows, min_length)
            # A field counts only if it has something to highlight.
            if not indices:
                continue
            dissimilarity = min(w[2] for w in windows) / len(pattern)
            total *= max(dissimilarity, EPSILON) ** (self._weights[key] * self._norms[key][position])
            matches.append(SearchMatch(key=key, value=getattr(occupation, key), indices=indices))
        if not matches:
            return None
        return ScoredOccupation(occupation, 1 - total, matches)

    def query(self, text: str, filters: SearchFilters | None = None, limit: int | None = None) -> list[SearchResult]:
        if limit is None:
            limit = self._config.default_limit
        if limit <= 0:
            return []

        text = (text or "").strip()
        if not text:
            # No query text: list the filtered corpus as-is.
            listed = (o for o in self._occupations if matches_filters(o, filters))
            return [self._to_result(ScoredOccupation(o, 1.0, [])) for o in islice(listed, limit)]

        candidates = self.fuzzy_search(text, limit * self._config.candidate_multiplier)
        ranked = rank_candidates(candidates, text, filters, limit, self._config)
        return [self._to_result(c) for c in ranked]

    def available_filters(self) -> AvailableFilters:
        major_groups = set()
        occupation_types = set()
        for occupation in self._occupations:
            if occupation.code:
                major_groups.add(occupation.code[0])
            if occupation.occupation_type:
                occupation_types.add(occupation.occupation_type)
        return AvailableFilters(
            isco_major_groups=sorted(major_groups),
            occupation_types=sorted(occupation_types),
        )

    @staticmethod
    def _to_result(candidate: ScoredOccupation) -> SearchResult:
        return SearchResult(
            occupation=candidate.occupation,
            score=candidate.score,
            matches=candidate.matches,
            breadcrumb=breadcrumb(candidate.occupation),
        )
