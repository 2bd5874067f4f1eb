"""pronunciation_analyzer 모듈 단위 테스트."""

import pytest

from french_tutor.analyzers.pronunciation.pronunciation_analyzer import (
    PronunciationAnalyzer,
    build_feedback,
    classify_score,
    feedback_message,
    get_default_analyzer,
)
from french_tutor.analyzers.pronunciation.feedback_types import FeedbackRecord, FeedbackTier
from french_tutor.analyzers.pronunciation.pronunciation_rules import get_rule
from french_tutor.core.scoring_config import ScoringConfig


class TestClassifyScore:
    """점수 등급 분류 테스트."""

    @pytest.mark.parametrize("score", [90, 95, 100])
    def test_excellent(self, score):
        assert classify_score(score) is FeedbackTier.EXCELLENT

    @pytest.mark.parametrize("score", [70, 75, 89])
    def test_good(self, score):
        assert classify_score(score) is FeedbackTier.GOOD

    @pytest.mark.parametrize("score", [50, 60, 69])
    def test_fair(self, score):
        assert classify_score(score) is FeedbackTier.FAIR

    @pytest.mark.parametrize("score", [0, 25, 49])
    def test_poor(self, score):
        assert classify_score(score) is FeedbackTier.POOR

    def test_fractional_boundaries(self):
        assert classify_score(89.9) is FeedbackTier.GOOD
        assert classify_score(90) is FeedbackTier.EXCELLENT
        assert classify_score(69.9) is FeedbackTier.FAIR
        assert classify_score(49.9) is FeedbackTier.POOR


class TestFeedbackMessage:
    """등급별 메시지 테스트."""

    def test_messages(self):
        assert "Excellent! Tres bien!" in feedback_message(95)
        assert "Good job! Bon travail! Keep practicing." in feedback_message(75)
        assert "Getting there! Let's try again." in feedback_message(55)
        assert "Let's practice this one more. Listen and try again." in feedback_message(25)


class TestBuildFeedback:
    """build_feedback 함수 테스트."""

    def test_complete_record(self):
        result = build_feedback('bonjour', 'bonjour')
        assert isinstance(result, FeedbackRecord)
        assert result.tier is FeedbackTier.EXCELLENT
        assert result.score == 100
        assert "Excellent" in result.message
        assert result.spoken_text == 'bonjour'
        assert result.target_text == 'bonjour'
        assert len(result.tips) <= 2

    def test_tips_follow_table_order(self):
        result = build_feedback('bonjour', 'bonjour')
        assert [tip.description for tip in result.tips] == [
            get_rule('nasal_on').description,
            get_rule('french_r').description,
        ]

    def test_tips_truncated_to_two(self):
        result = build_feedback('les jardins', 'les jardins')
        assert [tip.description for tip in result.tips] == [
            get_rule('silent_endings').description,
            get_rule('nasal_in').description,
        ]

    def test_tips_come_from_target_not_spoken(self):
        result = build_feedback('moi', 'lol')
        assert result.tips == ()

    def test_wrong_pronunciation(self):
        result = build_feedback('hello', 'bonjour')
        assert result.tier is FeedbackTier.POOR
        assert result.score == 0

    def test_partial_match(self):
        result = build_feedback('bonjour monde', 'bonjour madame')
        assert result.tier is FeedbackTier.FAIR
        assert result.score == 50

    def test_good_tier(self):
        result = build_feedback('je suis très content ici', 'je suis très content aussi')
        assert result.score == 80
        assert result.tier is FeedbackTier.GOOD

    def test_case_insensitive(self):
        result = build_feedback('BONJOUR', 'bonjour')
        assert result.score == 100
        assert result.tier is FeedbackTier.EXCELLENT

    def test_missing_spoken_text(self):
        result = build_feedback(None, 'bonjour')
        assert result.score == 0
        assert result.tier is FeedbackTier.POOR
        assert result.spoken_text is None
        assert len(result.tips) == 2

    def test_missing_target_text(self):
        result = build_feedback('bonjour', None)
        assert result.score == 0
        assert result.tips == ()


class TestPronunciationAnalyzer:
    """PronunciationAnalyzer 클래스 테스트."""

    def test_initialization_default(self):
        analyzer = PronunciationAnalyzer()
        assert isinstance(analyzer.config, ScoringConfig)
        assert analyzer.config.max_tips == 2

    def test_default_analyzer_is_shared(self):
        assert get_default_analyzer() is get_default_analyzer()

    def test_operations_delegate(self):
        analyzer = PronunciationAnalyzer()
        assert analyzer.distance('kitten', 'sitting') == 3
        assert analyzer.words_match('bonsoir', 'bonjour') is True
        assert analyzer.score('merci hello', 'merci beaucoup') == 50
        assert len(analyzer.applicable_rules('bonjour')) == 2

    def test_wrappers_use_config_thresholds(self):
        analyzer = PronunciationAnalyzer(ScoringConfig(match_threshold_ratio=0.1, min_match_threshold=0))
        assert analyzer.words_match('bonsoir', 'bonjour') is False
        assert analyzer.score('bonsoir monsieur', 'bonjour monsieur') == 50

    def test_max_tips_config(self):
        analyzer = PronunciationAnalyzer(ScoringConfig(max_tips=0))
        assert analyzer.build_feedback('les jardins', 'les jardins').tips == ()

        analyzer = PronunciationAnalyzer(ScoringConfig(max_tips=5))
        assert len(analyzer.build_feedback('les jardins', 'les jardins').tips) == 3

    def test_match_ratio_config(self):
        strict = PronunciationAnalyzer(ScoringConfig(min_match_threshold=0))
        assert strict.words_match('la', 'le') is False
        assert strict.score('la maison', 'le maison') == 50

        loose = PronunciationAnalyzer(ScoringConfig(match_threshold_ratio=1.0))
        assert loose.words_match('hello', 'bonjour') is True

    def test_custom_thresholds_and_messages(self):
        messages = {
            'excellent': "Parfait!",
            'good': "Bien!",
            'fair': "Encore!",
            'poor': "Courage!",
        }
        analyzer = PronunciationAnalyzer(ScoringConfig(
            excellent_threshold=100, good_threshold=60, fair_threshold=40, tier_messages=messages,
        ))
        assert analyzer.classify_score(95) is FeedbackTier.GOOD
        assert analyzer.feedback_message(45) == "Encore!"
        assert analyzer.build_feedback('bonjour', 'bonjour').message == "Parfait!"
