"""발화 단어와 목표 단어의 유사 일치 판정."""

import math
from typing import Optional

from .edit_distance import levenshtein_distance
from ...utils.text_processing import normalize_text

MATCH_THRESHOLD_RATIO = 0.3
MIN_MATCH_THRESHOLD = 1


def match_threshold(target_length: int,
                    ratio: float = MATCH_THRESHOLD_RATIO,
                    minimum: int = MIN_MATCH_THRESHOLD) -> int:
    """목표 단어 길이에 따른 허용 편집 거리. 최소 minimum 글자는 항상 허용됩니다."""
    return max(minimum, math.floor(target_length * ratio))


def words_match(spoken: Optional[str], target: Optional[str],
                ratio: float = MATCH_THRESHOLD_RATIO,
                minimum: int = MIN_MATCH_THRESHOLD) -> bool:
    """
    발화 단어가 목표 단어와 충분히 가까운지 판정합니다.

    두 입력 모두 앞뒤 공백을 제거하고 소문자로 비교합니다.
    None이거나 공백만 있는 입력은 항상 불일치입니다.

    Args:
        spoken: 인식된 단어
        target: 목표 단어
        ratio: 목표 단어 길이 대비 허용 편집 거리 비율
        minimum: 최소 허용 편집 거리

    Returns:
        편집 거리가 허용 범위 이내이면 True
    """
    normalized_spoken = normalize_text(spoken)
    normalized_target = normalize_text(target)

    if not normalized_spoken or not normalized_target:
        return False

    if normalized_spoken == normalized_target:
        return True

    threshold = match_threshold(len(normalized_target), ratio, minimum)
    return levenshtein_distance(normalized_spoken, normalized_target) <= threshold
