"""phrase_scorer 모듈 단위 테스트."""

import pytest

from french_tutor.analyzers.pronunciation.phrase_scorer import score_phrase, round_half_up_percent


class TestRoundHalfUpPercent:
    """정수 백분율 반올림 테스트."""

    def test_exact(self):
        assert round_half_up_percent(1, 2) == 50
        assert round_half_up_percent(0, 5) == 0
        assert round_half_up_percent(5, 5) == 100

    def test_rounds_half_up(self):
        assert round_half_up_percent(1, 8) == 13  # 12.5
        assert round_half_up_percent(3, 8) == 38  # 37.5

    def test_rounds_to_nearest(self):
        assert round_half_up_percent(2, 3) == 67
        assert round_half_up_percent(1, 3) == 33


class TestMissingInputs:
    """None / 빈 입력 테스트."""

    def test_none(self):
        assert score_phrase(None, 'bonjour') == 0
        assert score_phrase('bonjour', None) == 0

    def test_empty_or_blank(self):
        assert score_phrase('', 'bonjour') == 0
        assert score_phrase('bonjour', '') == 0
        assert score_phrase('   ', 'bonjour') == 0


class TestScoring:
    """구문 점수 계산 테스트."""

    def test_exact_match(self):
        assert score_phrase('bonjour', 'bonjour') == 100

    def test_case_insensitive(self):
        assert score_phrase('BONJOUR', 'bonjour') == 100

    def test_extra_internal_whitespace(self):
        assert score_phrase('  bonjour   monsieur ', 'bonjour monsieur') == 100

    def test_half_matched(self):
        assert score_phrase('merci hello', 'merci beaucoup') == 50
        assert score_phrase('bonjour monde', 'bonjour madame') == 50

    def test_two_of_three(self):
        assert score_phrase('je suis hello', 'je suis bien') == 67

    def test_fuzzy_words_count_as_matched(self):
        assert score_phrase('bonsoir mersi', 'bonjour merci') == 100

    def test_no_match(self):
        assert score_phrase('hello', 'bonjour') == 0

    def test_result_is_int(self):
        assert isinstance(score_phrase('je suis hello', 'je suis bien'), int)


class TestPositionalAlignment:
    """위치 정렬 정책 테스트."""

    def test_extra_trailing_words_ignored(self):
        assert score_phrase('bonjour monsieur madame', 'bonjour monsieur') == 100

    def test_missing_words_count_as_unmatched(self):
        assert score_phrase('bonjour', 'bonjour monsieur') == 50

    def test_dropped_word_misaligns_following_words(self):
        # 'suis'가 빠지면 'bien'은 'suis' 위치와 비교되어 불일치
        assert score_phrase('je bien', 'je suis bien') == 33

    def test_reordered_words_do_not_match(self):
        assert score_phrase('monsieur bonjour', 'bonjour monsieur') == 0

    @pytest.mark.parametrize("spoken,target", [
        ('bonjour', 'bonjour'),
        ('hello world', 'bonjour'),
        ('a b c d e f', 'a'),
        ('x', 'a b c d e f g'),
    ])
    def test_score_in_range(self, spoken, target):
        assert 0 <= score_phrase(spoken, target) <= 100
