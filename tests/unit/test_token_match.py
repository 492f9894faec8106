"""토큰 매칭 유닛 테스트"""
from catalog_matcher.utils.text import token_matches


class TestModelTokens:
    """모델 토큰은 정확히 일치해야 함"""

    def test_exact_match(self):
        assert token_matches("s21", "galaxy s21 ultra")

    def test_one_edit_apart_never_matches(self):
        assert not token_matches("s22", "galaxy s21 ultra")
        assert not token_matches("s21", "galaxy s22 ultra")

    def test_prefix_is_not_enough(self):
        assert not token_matches("s2", "galaxy s21 ultra")
        assert not token_matches("m1", "macbook air m1pro")

    def test_threshold_does_not_apply(self):
        assert not token_matches("s22", "galaxy s21 ultra", threshold=0)


class TestDescriptiveTokens:
    """서술 토큰은 유사도 90 이상이면 일치"""

    def test_exact_word(self):
        assert token_matches("galaxy", "galaxy s21 ultra")
        assert token_matches("13", "iphone 13 pro")

    def test_minor_typo(self):
        assert token_matches("wireles", "sony wireless earbuds")
        assert token_matches("ultraa", "galaxy s21 ultra")

    def test_below_threshold(self):
        # ultr vs ultra = 89
        assert not token_matches("ultr", "galaxy s21 ultra")
        assert not token_matches("13", "iphone 12 pro")
        assert not token_matches("pro", "galaxy s21 ultra")

    def test_custom_threshold(self):
        assert token_matches("ultr", "galaxy s21 ultra", threshold=85)

    def test_empty_target(self):
        assert not token_matches("galaxy", "")
