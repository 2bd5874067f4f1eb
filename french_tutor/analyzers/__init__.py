"""분석기 모듈 패키지."""

from .pronunciation import PronunciationAnalyzer

__all__ = [
    'PronunciationAnalyzer',
]
