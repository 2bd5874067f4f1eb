"""연습 세션 통계 모듈.

한 세션 동안의 발음 시도 결과를 메모리에만 누적합니다. 세션이 끝나면
통계는 사라지며 어떤 저장소에도 기록하지 않습니다.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from .scoring_config import ScoringConfig
from ..analyzers.pronunciation.feedback_types import FeedbackRecord, FeedbackTier

logger = logging.getLogger(__name__)


@dataclass
class PracticeSession:
    """발음 연습 시도 기록과 통계."""
    config: ScoringConfig = field(default_factory=ScoringConfig)
    attempts: int = 0
    good: int = 0  # good 경계 이상 (excellent 포함)
    excellent: int = 0
    history: List[FeedbackRecord] = field(default_factory=list)

    def record(self, feedback: FeedbackRecord) -> None:
        """
        분석 결과 하나를 세션에 기록합니다.

        Args:
            feedback: build_feedback 결과
        """
        self.attempts += 1
        if feedback.score >= self.config.good_threshold:
            self.good += 1
        if feedback.score >= self.config.excellent_threshold:
            self.excellent += 1
        self.history.append(feedback)

        logger.debug(
            f"연습 기록: {feedback.score}점 ({feedback.tier.value}), "
            f"누적 {self.attempts}회"
        )

    @property
    def scores(self) -> List[int]:
        """기록된 점수 목록."""
        return [feedback.score for feedback in self.history]

    @property
    def success_rate(self) -> float:
        """good 이상 비율 (기록이 없으면 0.0)."""
        if self.attempts == 0:
            return 0.0
        return self.good / self.attempts

    @property
    def last_feedback(self) -> Optional[FeedbackRecord]:
        return self.history[-1] if self.history else None

    def tier_counts(self) -> Dict[str, int]:
        """등급별 시도 횟수. 모든 등급 키를 포함합니다."""
        counts = Counter(feedback.tier for feedback in self.history)
        return {tier.value: counts.get(tier, 0) for tier in FeedbackTier}

    def summary(self) -> Dict[str, Any]:
        """
        세션 요약 통계를 생성합니다.

        Returns:
            시도/등급 횟수와 평균, 최고, 최저, 표준편차 점수를 담은 딕셔너리
        """
        if not self.history:
            return {
                'attempts': 0,
                'good': 0,
                'excellent': 0,
                'tier_counts': self.tier_counts(),
                'average_score': 0.0,
                'best_score': 0,
                'worst_score': 0,
                'score_std': 0.0,
                'success_rate': 0.0,
            }

        scores = np.array(self.scores, dtype=float)
        return {
            'attempts': self.attempts,
            'good': self.good,
            'excellent': self.excellent,
            'tier_counts': self.tier_counts(),
            'average_score': round(float(np.mean(scores)), 2),
            'best_score': int(np.max(scores)),
            'worst_score': int(np.min(scores)),
            'score_std': round(float(np.std(scores)), 2),
            'success_rate': round(self.success_rate, 4),
        }

    def reset(self) -> None:
        """세션 기록을 초기화합니다."""
        self.attempts = 0
        self.good = 0
        self.excellent = 0
        self.history.clear()
        logger.info("연습 세션이 초기화되었습니다.")
