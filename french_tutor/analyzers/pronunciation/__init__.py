"""
발음 채점 모듈.

이 패키지는 발화 텍스트 채점을 위한 컴포넌트를 제공합니다:

주요 컴포넌트:
- levenshtein_distance: 편집 거리 계산
- words_match: 단어 단위 유사 일치 판정
- score_phrase: 위치 정렬 기반 구문 점수 (0-100)
- applicable_rules: 발음 규칙 표 기반 팁 추출
- PronunciationAnalyzer / build_feedback: 점수, 등급, 메시지, 팁을 조합한 피드백

공용 타입:
- FeedbackTier, FeedbackRecord, PronunciationRule, PronunciationTip
"""

from .edit_distance import levenshtein_distance
from .word_matcher import words_match, match_threshold
from .phrase_scorer import score_phrase
from .pronunciation_rules import (
    RULE_TABLE,
    PRONUNCIATION_RULES,
    applicable_rules,
    get_rule,
    matching_rules,
)
from .pronunciation_analyzer import (
    PronunciationAnalyzer,
    build_feedback,
    classify_score,
    feedback_message,
)
from .feedback_types import (
    FeedbackTier,
    FeedbackRecord,
    PronunciationRule,
    PronunciationTip,
)

__all__ = [
    # 채점 단계
    'levenshtein_distance',
    'words_match',
    'match_threshold',
    'score_phrase',
    'applicable_rules',
    'matching_rules',
    'get_rule',
    'RULE_TABLE',
    'PRONUNCIATION_RULES',

    # 피드백
    'PronunciationAnalyzer',
    'build_feedback',
    'classify_score',
    'feedback_message',

    # 타입
    'FeedbackTier',
    'FeedbackRecord',
    'PronunciationRule',
    'PronunciationTip',
]
