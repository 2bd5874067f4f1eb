"""
발음 분석 모듈 - 구문 채점, 등급 분류, 발음 팁 생성.

이 모듈은 PronunciationAnalyzer 클래스를 통해 채점 단계들을 조합한
피드백 생성 기능을 제공합니다. 모듈 수준 함수는 기본 설정을 사용합니다.
"""

import logging
from typing import List, Optional, Union

from .edit_distance import levenshtein_distance
from .feedback_types import FeedbackRecord, FeedbackTier, PronunciationTip
from .phrase_scorer import score_phrase
from .pronunciation_rules import applicable_rules
from .word_matcher import words_match
from ...core.scoring_config import ScoringConfig

logger = logging.getLogger(__name__)

Number = Union[int, float]


class PronunciationAnalyzer:
    """
    설정값을 적용해 발음 채점과 피드백 생성을 수행하는 클래스.

    모든 메서드는 입력에만 의존하는 순수 계산이며 인스턴스 상태를 변경하지 않습니다.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        """
        PronunciationAnalyzer 초기화.

        Args:
            config: 채점 설정 (None이면 기본 설정 생성)
        """
        self.config = config if config is not None else ScoringConfig()
        logger.debug(
            f"발음 분석기 초기화 완료 (일치 비율: {self.config.match_threshold_ratio}, "
            f"최대 팁: {self.config.max_tips})"
        )

    def distance(self, a: str, b: str) -> int:
        """두 문자열의 레벤슈타인 편집 거리."""
        return levenshtein_distance(a, b)

    def words_match(self, spoken: Optional[str], target: Optional[str]) -> bool:
        """설정된 허용 편집 거리로 두 단어의 일치 여부를 판정합니다."""
        return words_match(
            spoken, target,
            ratio=self.config.match_threshold_ratio,
            minimum=self.config.min_match_threshold,
        )

    def score(self, spoken_phrase: Optional[str], target_phrase: Optional[str]) -> int:
        """같은 위치의 단어끼리 비교한 0-100 점수."""
        return score_phrase(
            spoken_phrase, target_phrase,
            ratio=self.config.match_threshold_ratio,
            minimum=self.config.min_match_threshold,
        )

    def applicable_rules(self, phrase: Optional[str]) -> List[PronunciationTip]:
        """목표 구문에 해당하는 발음 팁을 규칙 순서대로 반환합니다."""
        return applicable_rules(phrase)

    def classify_score(self, score: Number) -> FeedbackTier:
        """
        점수를 피드백 등급으로 분류합니다.

        각 구간의 하한은 포함되며 소수 점수도 그대로 비교합니다 (89.9 -> GOOD).
        """
        if score >= self.config.excellent_threshold:
            return FeedbackTier.EXCELLENT
        if score >= self.config.good_threshold:
            return FeedbackTier.GOOD
        if score >= self.config.fair_threshold:
            return FeedbackTier.FAIR
        return FeedbackTier.POOR

    def feedback_message(self, score: Number) -> str:
        """점수 등급에 해당하는 안내 메시지."""
        return self.config.tier_messages[self.classify_score(score).value]

    def build_feedback(self, spoken_text: Optional[str], target_text: Optional[str]) -> FeedbackRecord:
        """
        발화와 목표 구문을 비교해 피드백 레코드를 생성합니다.

        Args:
            spoken_text: 음성 인식 결과
            target_text: 목표 구문

        Returns:
            등급, 점수, 메시지, 원문, 최대 max_tips개의 팁을 담은 FeedbackRecord
        """
        score = self.score(spoken_text, target_text)
        tier = self.classify_score(score)
        tips = self.applicable_rules(target_text)[:self.config.max_tips]

        logger.debug(f"피드백 생성: 점수={score}, 등급={tier.value}, 팁={len(tips)}개")

        return FeedbackRecord(
            tier=tier,
            score=score,
            message=self.config.tier_messages[tier.value],
            spoken_text=spoken_text,
            target_text=target_text,
            tips=tuple(tips),
        )


_default_analyzer: Optional[PronunciationAnalyzer] = None


def get_default_analyzer() -> PronunciationAnalyzer:
    """기본 설정을 사용하는 공용 분석기를 반환합니다."""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = PronunciationAnalyzer()
    return _default_analyzer


def classify_score(score: Number) -> FeedbackTier:
    """기본 등급 경계(90/70/50)로 점수를 분류합니다."""
    return get_default_analyzer().classify_score(score)


def feedback_message(score: Number) -> str:
    """기본 메시지 표에서 점수에 맞는 메시지를 반환합니다."""
    return get_default_analyzer().feedback_message(score)


def build_feedback(spoken_text: Optional[str], target_text: Optional[str]) -> FeedbackRecord:
    """기본 설정으로 피드백 레코드를 생성합니다."""
    return get_default_analyzer().build_feedback(spoken_text, target_text)
