import pytest

from occupation_browser.schemas.search import SearchFilters
from occupation_browser.services.ranking_service import ScoredOccupation, boost_score, matches_filters, rank_candidates


class TestMatchesFilters:
    def test_no_filters(self, make_occupation):
        occupation = make_occupation("2512", occupation_type="ESCO occupation")
        assert matches_filters(occupation, None)
        assert matches_filters(occupation, SearchFilters())

    def test_major_group_is_first_code_character(self, make_occupation):
        filters = SearchFilters(isco_major_groups=["2", "3"])
        assert matches_filters(make_occupation("2512"), filters)
        assert not matches_filters(make_occupation("1330"), filters)
        assert not matches_filters(make_occupation(""), filters)

    def test_occupation_type(self, make_occupation):
        filters = SearchFilters(occupation_types=["Local occupation"])
        assert matches_filters(make_occupation("2512", occupation_type="Local occupation"), filters)
        assert not matches_filters(make_occupation("2512", occupation_type="ESCO occupation"), filters)
        assert not matches_filters(make_occupation("2512"), filters)

    def test_both_facets_must_match(self, make_occupation):
        filters = SearchFilters(isco_major_groups=["2"], occupation_types=["ESCO occupation"])
        assert matches_filters(make_occupation("2512", occupation_type="ESCO occupation"), filters)
        assert not matches_filters(make_occupation("1330", occupation_type="ESCO occupation"), filters)
        assert not matches_filters(make_occupation("2512", occupation_type="Local occupation"), filters)


class TestBoostScore:
    def test_label_substring_and_word_boundary(self, make_occupation):
        occupation = make_occupation("2512", "Software developer")
        assert boost_score(0.5, occupation, "software") == pytest.approx(0.5 * 1.3 * 1.1)

    def test_case_insensitive(self, make_occupation):
        occupation = make_occupation("2512", "Software developer")
        assert boost_score(0.5, occupation, "DEVELOPER") == pytest.approx(0.5 * 1.3 * 1.1)

    def test_code_substring(self, make_occupation):
        assert boost_score(0.5, make_occupation("2512", "Software developer"), "2512") == pytest.approx(0.6)

    def test_substring_inside_word_gets_no_boundary_boost(self, make_occupation):
        assert boost_score(0.5, make_occupation("2512", "Software developer"), "ware") == pytest.approx(0.65)

    def test_all_boosts_compound(self, make_occupation):
        occupation = make_occupation("2512", "2512 specialist")
        assert boost_score(0.5, occupation, "2512") == pytest.approx(0.5 * 1.3 * 1.2 * 1.1)

    def test_regex_characters_are_literal(self, make_occupation):
        occupation = make_occupation("2512", "C++ developer")
        assert boost_score(0.5, occupation, "c++") == pytest.approx(0.5 * 1.3 * 1.1)

    def test_no_literal_match(self, make_occupation):
        assert boost_score(0.5, make_occupation("2512", "Software developer"), "sofware") == 0.5

    def test_custom_multipliers(self, make_occupation, config):
        custom = config.model_copy(update={"label_boost": 2.0, "word_boundary_boost": 1.0})
        assert boost_score(0.5, make_occupation("2512", "Software developer"), "software", custom) == pytest.approx(1.0)


class TestRankCandidates:
    def test_boost_can_reorder(self, make_occupation):
        candidates = [
            ScoredOccupation(make_occupation("2511", "Systems analyst"), 0.9, []),
            ScoredOccupation(make_occupation("2512", "Software developer"), 0.8, []),
        ]
        ranked = rank_candidates(candidates, "software")
        assert [c.occupation.code for c in ranked] == ["2512", "2511"]
        assert ranked[0].score == pytest.approx(0.8 * 1.3 * 1.1)
        assert ranked[1].score == 0.9

    def test_ties_keep_original_order(self, make_occupation):
        candidates = [ScoredOccupation(make_occupation(code, "Clerk"), 0.5, []) for code in ("4110", "4120", "4131")]
        ranked = rank_candidates(candidates, "zz")
        assert [c.occupation.code for c in ranked] == ["4110", "4120", "4131"]

    def test_filters_before_truncating(self, make_occupation):
        candidates = [
            ScoredOccupation(make_occupation("1330", "Software manager"), 0.9, []),
            ScoredOccupation(make_occupation("2512", "Software developer"), 0.8, []),
            ScoredOccupation(make_occupation("2514", "Applications programmer"), 0.7, []),
        ]
        ranked = rank_candidates(candidates, "zz", SearchFilters(isco_major_groups=["2"]), limit=1)
        assert [c.occupation.code for c in ranked] == ["2512"]

    def test_zero_limit(self, make_occupation):
        candidates = [ScoredOccupation(make_occupation("2512"), 0.5, [])]
        assert rank_candidates(candidates, "x", limit=0) == []
