"""
구문 단위 발음 점수 계산.

목표 구문과 발화 구문을 같은 위치의 단어끼리 비교합니다(위치 정렬).
최적 정렬을 탐색하지 않으므로 앞쪽에서 단어가 빠지거나 끼어들면
이후 단어들이 모두 어긋나 불일치로 집계됩니다. 대본을 그대로 읽는
연습을 가정한 단순화이며 알려진 한계입니다.
"""

import logging
from typing import Optional

from .word_matcher import words_match, MATCH_THRESHOLD_RATIO, MIN_MATCH_THRESHOLD
from ...utils.text_processing import normalize_text, split_words

logger = logging.getLogger(__name__)


def round_half_up_percent(matched: int, total: int) -> int:
    """matched / total 비율을 0-100 정수로 반올림합니다 (0.5는 올림)."""
    return (matched * 200 + total) // (2 * total)


def score_phrase(spoken_phrase: Optional[str], target_phrase: Optional[str],
                 ratio: float = MATCH_THRESHOLD_RATIO,
                 minimum: int = MIN_MATCH_THRESHOLD) -> int:
    """
    발화 구문의 발음 점수를 계산합니다.

    Args:
        spoken_phrase: 인식된 발화 텍스트
        target_phrase: 목표 구문
        ratio: 단어 일치 판정 비율
        minimum: 단어 일치 최소 허용 편집 거리

    Returns:
        0-100 정수 점수
    """
    normalized_spoken = normalize_text(spoken_phrase)
    normalized_target = normalize_text(target_phrase)

    if not normalized_spoken or not normalized_target:
        return 0

    if normalized_spoken == normalized_target:
        return 100

    spoken_words = split_words(normalized_spoken)
    target_words = split_words(normalized_target)

    if not target_words or not spoken_words:
        return 0

    matched = 0
    for i, target_word in enumerate(target_words):
        # 발화가 짧으면 남은 목표 단어는 불일치
        if i < len(spoken_words) and words_match(spoken_words[i], target_word, ratio, minimum):
            matched += 1

    score = round_half_up_percent(matched, len(target_words))
    logger.debug(f"구문 채점: {matched}/{len(target_words)} 단어 일치 -> {score}점")
    return score
