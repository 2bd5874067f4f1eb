"""Core 모듈 - 설정, 연습 세션, 복습 일정 관리."""

from .scoring_config import ScoringConfig, DEFAULT_TIER_MESSAGES, DEFAULT_REVIEW_INTERVALS_HOURS
from .practice_session import PracticeSession
from .review_scheduler import ReviewScheduler, ReviewItem

__all__ = [
    'ScoringConfig',
    'DEFAULT_TIER_MESSAGES',
    'DEFAULT_REVIEW_INTERVALS_HOURS',
    'PracticeSession',
    'ReviewScheduler',
    'ReviewItem',
]
