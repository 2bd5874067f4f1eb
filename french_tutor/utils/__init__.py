"""유틸리티 모듈."""

from .text_processing import (
    safe_lower,
    safe_strip,
    normalize_text,
    split_words,
)
from .logging_config import configure_logging, get_log_file

__all__ = [
    # 텍스트 정규화
    'safe_lower',
    'safe_strip',
    'normalize_text',
    'split_words',
    # 로깅
    'configure_logging',
    'get_log_file',
]
