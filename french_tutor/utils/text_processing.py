"""발화/목표 텍스트 정규화 유틸리티."""

import re
from typing import List, Optional

_WHITESPACE_RE = re.compile(r'\s+')


def safe_strip(text: Optional[str]) -> str:
    """안전한 공백 제거."""
    if text is None:
        return ""
    return str(text).strip()


def safe_lower(text: Optional[str]) -> str:
    """안전한 소문자 변환."""
    if text is None:
        return ""
    return str(text).lower()


def normalize_text(text: Optional[str]) -> str:
    """앞뒤 공백을 제거하고 소문자로 변환합니다. None은 빈 문자열이 됩니다."""
    return safe_lower(safe_strip(text))


def split_words(text: Optional[str]) -> List[str]:
    """
    연속 공백을 기준으로 단어를 분리합니다.

    빈 토큰은 포함하지 않으므로 앞뒤 공백이나 연속 공백이 있어도
    결과는 항상 비어 있지 않은 단어들의 순서 있는 리스트입니다.
    """
    if not text:
        return []
    return [word for word in _WHITESPACE_RE.split(str(text)) if word]
