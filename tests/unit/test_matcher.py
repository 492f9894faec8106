"""매칭 파이프라인 시나리오 테스트"""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError

import pytest

from catalog_matcher.core.exceptions import InvalidPolicyException
from catalog_matcher.engine import Dictionary, MatchPolicy, MatchResult, MatchStatus, ProductMatcher, Query, match
from tests.fixtures import QUERIES


class TestScenarios:
    """3개 항목 사전 시나리오"""

    def test_listing_title_matches_iphone(self, matcher):
        result = matcher.match(QUERIES["iphone_listing"])
        assert result.status is MatchStatus.MATCHED_FUZZY_MAX
        assert result.product == "iPhone 13 Pro 128GB"
        assert result.brand == "Apple"
        assert result.category == "Smartphones"

    def test_unknown_model_token_is_ignored(self, matcher):
        """s22는 어떤 후보에도 없지만 무시되고 Galaxy가 선택됨"""
        result = matcher.match(QUERIES["galaxy_wrong_model"])
        assert result.status is MatchStatus.MATCHED_FUZZY_MAX
        assert result.product == "Galaxy S21 Ultra"

    def test_unrelated_text_is_no_match(self, matcher):
        result = matcher.match(QUERIES["unrelated"])
        assert result == MatchResult.no_match()

    def test_empty_text_uses_first_entry(self, matcher):
        """토큰이 없으면 전체 후보 + 동점 -> 사전 첫 항목"""
        result = matcher.match(QUERIES["empty"])
        assert result.status is MatchStatus.MATCHED_FUZZY_MAX
        assert result.product == "iPhone 13 Pro 128GB"

    def test_common_token_is_too_many(self, pro_lineup):
        result = match(QUERIES["pro_only"], pro_lineup)
        assert result.status is MatchStatus.TOO_MANY_CANDIDATES

    def test_html_and_units_in_query(self, matcher):
        result = matcher.match(QUERIES["macbook_html"])
        assert result.product == "MacBook Air M1"
        assert result.category == "Laptops"

    def test_none_is_treated_as_empty(self, matcher):
        assert matcher.match(None) == matcher.match("")


class TestPolicy:
    """정책 주입"""

    def test_raised_cutoff_scores_all_with_order_tie_break(self, pro_lineup):
        matcher = ProductMatcher(pro_lineup, MatchPolicy(max_fuzzy_candidates=20))
        result = matcher.match("pro")
        # 11자 항목 3개가 동점 -> 사전 순서상 첫 번째
        assert result.product == "iPad Pro 11"

    def test_invalid_policy(self):
        with pytest.raises(InvalidPolicyException):
            MatchPolicy(token_similarity_threshold=101)
        with pytest.raises(InvalidPolicyException):
            MatchPolicy(max_fuzzy_candidates=0)

    def test_default_policy(self, catalog):
        assert ProductMatcher(catalog).policy == MatchPolicy(90, 10)


class TestEdgeCases:
    def test_empty_dictionary(self):
        assert match("galaxy", Dictionary()).status is MatchStatus.NO_MATCH
        assert match("", Dictionary()).status is MatchStatus.NO_MATCH

    def test_single_entry_dictionary(self):
        dictionary = Dictionary.from_rows([("Galaxy S21 Ultra", "Samsung", "Smartphones")])
        assert match("Used Galaxy phone", dictionary).is_match
        assert match("wireless earbuds", dictionary).status is MatchStatus.NO_MATCH

    def test_query_parse(self):
        query = Query.parse("Galaxy S21 Ultra 256GB")
        assert query.normalized == "galaxy s21 ultra"
        assert query.tokens == ("galaxy", "s21", "ultra")

    def test_entries_are_immutable(self, catalog):
        with pytest.raises(FrozenInstanceError):
            catalog[0].product = "changed"

    def test_concurrent_calls_agree(self, matcher):
        queries = list(QUERIES.values()) * 25
        expected = [matcher.match(q) for q in queries]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(matcher.match, queries))
        assert actual == expected


class TestMatchResult:
    def test_to_dict(self, catalog):
        assert MatchResult.matched(catalog[1]).to_dict() == {
            "status": "matched_fuzzy_max",
            "product": "Galaxy S21 Ultra",
            "brand": "Samsung",
            "category": "Smartphones",
        }
        assert MatchResult.too_many_candidates().to_dict() == {
            "status": "unmatched_too_many_candidates",
            "product": None,
            "brand": None,
            "category": None,
        }
