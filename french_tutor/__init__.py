"""프랑스어 구술 시험 연습용 발음 채점 라이브러리."""

from .analyzers.pronunciation import (
    PronunciationAnalyzer,
    FeedbackRecord,
    FeedbackTier,
    PronunciationRule,
    PronunciationTip,
    PRONUNCIATION_RULES,
    RULE_TABLE,
    levenshtein_distance,
    words_match,
    score_phrase,
    applicable_rules,
    classify_score,
    feedback_message,
    build_feedback,
)
from .core import ScoringConfig, PracticeSession, ReviewScheduler

__version__ = "0.1.0"

__all__ = [
    'PronunciationAnalyzer',
    'FeedbackRecord',
    'FeedbackTier',
    'PronunciationRule',
    'PronunciationTip',
    'PRONUNCIATION_RULES',
    'RULE_TABLE',
    'levenshtein_distance',
    'words_match',
    'score_phrase',
    'applicable_rules',
    'classify_score',
    'feedback_message',
    'build_feedback',
    'ScoringConfig',
    'PracticeSession',
    'ReviewScheduler',
]
