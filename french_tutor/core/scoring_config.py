"""발음 채점 설정 통합 관리 모듈."""

from dataclasses import dataclass, field, fields
from typing import List, Dict, Any
import os


DEFAULT_TIER_MESSAGES: Dict[str, str] = {
    'excellent': "Excellent! Tres bien!",
    'good': "Good job! Bon travail! Keep practicing.",
    'fair': "Getting there! Let's try again.",
    'poor': "Let's practice this one more. Listen and try again.",
}

# 1시간, 6시간, 1일, 3일, 1주, 2주, 1달
DEFAULT_REVIEW_INTERVALS_HOURS: List[int] = [1, 6, 24, 72, 168, 336, 720]


def _default_log_level() -> str:
    return os.environ.get('FRENCH_TUTOR_LOG_LEVEL', 'INFO').upper()


@dataclass
class ScoringConfig:
    """발음 채점과 피드백 생성 설정을 통합 관리하는 클래스."""

    # 단어 일치 판정
    match_threshold_ratio: float = 0.3  # 목표 단어 길이 대비 허용 편집 거리 비율
    min_match_threshold: int = 1  # 최소 허용 편집 거리 (짧은 단어용)

    # 피드백 등급 경계 (하한 포함)
    excellent_threshold: float = 90
    good_threshold: float = 70
    fair_threshold: float = 50

    # 피드백 출력
    max_tips: int = 2
    tier_messages: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TIER_MESSAGES))

    # 복습 간격 (시간 단위)
    review_intervals_hours: List[int] = field(default_factory=lambda: list(DEFAULT_REVIEW_INTERVALS_HOURS))

    log_level: str = field(default_factory=_default_log_level)

    def __post_init__(self):
        """초기화 후 설정값 검증."""
        self.validate()

    def validate(self) -> None:
        """
        설정값을 검증합니다.

        Raises:
            ValueError: 설정값이 허용 범위를 벗어난 경우
        """
        if not 0 < self.match_threshold_ratio <= 1:
            raise ValueError(f"match_threshold_ratio는 (0, 1] 범위여야 합니다: {self.match_threshold_ratio}")

        if self.min_match_threshold < 0:
            raise ValueError(f"min_match_threshold는 0 이상이어야 합니다: {self.min_match_threshold}")

        if not 0 <= self.fair_threshold <= self.good_threshold <= self.excellent_threshold <= 100:
            raise ValueError(
                "등급 경계는 0 <= fair <= good <= excellent <= 100 이어야 합니다: "
                f"fair={self.fair_threshold}, good={self.good_threshold}, excellent={self.excellent_threshold}"
            )

        if self.max_tips < 0:
            raise ValueError(f"max_tips는 0 이상이어야 합니다: {self.max_tips}")

        missing = [tier for tier in DEFAULT_TIER_MESSAGES if tier not in self.tier_messages]
        if missing:
            raise ValueError(f"등급 메시지가 누락되었습니다: {missing}")

        intervals = self.review_intervals_hours
        if not intervals:
            raise ValueError("review_intervals_hours는 비어 있을 수 없습니다")
        if any(hours <= 0 for hours in intervals):
            raise ValueError(f"복습 간격은 양수여야 합니다: {intervals}")
        if any(later <= earlier for earlier, later in zip(intervals, intervals[1:])):
            raise ValueError(f"복습 간격은 증가하는 순서여야 합니다: {intervals}")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"지원하지 않는 로그 레벨: {self.log_level}")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ScoringConfig':
        """딕셔너리에서 설정 생성."""
        known = {f.name for f in fields(cls)}
        unknown = set(config_dict) - known
        if unknown:
            raise ValueError(f"알 수 없는 설정 키: {sorted(unknown)}")
        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환."""
        return {
            'match_threshold_ratio': self.match_threshold_ratio,
            'min_match_threshold': self.min_match_threshold,
            'excellent_threshold': self.excellent_threshold,
            'good_threshold': self.good_threshold,
            'fair_threshold': self.fair_threshold,
            'max_tips': self.max_tips,
            'tier_messages': dict(self.tier_messages),
            'review_intervals_hours': list(self.review_intervals_hours),
            'log_level': self.log_level,
        }

    def update(self, **kwargs) -> None:
        """
        설정 업데이트 후 다시 검증합니다.

        데이터클래스 필드만 변경할 수 있으며, 검증 중 어떤 예외가 발생해도
        변경한 값을 모두 이전 값으로 되돌린 뒤 예외를 다시 발생시킵니다.

        Raises:
            ValueError: 알 수 없는 설정 키이거나 검증에 실패한 경우
            TypeError: 값의 타입이 비교 불가능한 경우
        """
        known = {f.name for f in fields(self)}
        unknown = set(kwargs) - known
        if unknown:
            raise ValueError(f"알 수 없는 설정 키: {sorted(unknown)}")

        previous = {key: getattr(self, key) for key in kwargs}
        for key, value in kwargs.items():
            setattr(self, key, value)

        try:
            self.validate()
        except Exception:
            for key, value in previous.items():
                setattr(self, key, value)
            raise
