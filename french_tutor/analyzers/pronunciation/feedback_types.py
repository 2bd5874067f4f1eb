"""
발음 피드백을 위한 공용 타입 정의.

이 모듈은 채점기, 규칙 주석기, 피드백 생성기가 공유하는
불변 데이터 타입을 정의합니다.

주요 구성요소:
- FeedbackTier: 피드백 등급 열거형
- PronunciationRule: 발음 규칙 (패턴, 설명, 예시)
- PronunciationTip: 구문에 적용되는 발음 팁
- FeedbackRecord: 한 번의 분석 결과
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Pattern, Tuple


class FeedbackTier(Enum):
    """점수 구간별 피드백 등급."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


@dataclass(frozen=True)
class PronunciationTip:
    """구문에 적용되는 발음 팁."""
    description: str
    examples: Tuple[str, ...]
    ipa: Optional[str] = None
    mouth_position: Optional[str] = None
    common_mistake: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """팁을 딕셔너리로 변환."""
        return {
            'description': self.description,
            'examples': list(self.examples),
            'ipa': self.ipa,
            'mouth_position': self.mouth_position,
            'common_mistake': self.common_mistake,
        }


@dataclass(frozen=True)
class PronunciationRule:
    """
    발음 규칙.

    pattern은 구문 어디에서든 검색(search)되며, 컴파일된 정규식 객체는
    검색 위치를 보존하지 않으므로 matches()는 상태 없는 판정 함수입니다.

    Attributes:
        identifier: 규칙 식별자 (예: 'silent_endings')
        pattern: 대소문자 무시 정규식
        description: 규칙 설명
        examples: 패턴과 일치해야 하는 예시 단어/구문
        ipa: IPA 표기 또는 짧은 음성 힌트
        mouth_position: 입 모양 안내
        common_mistake: 영어 화자가 흔히 하는 실수
    """
    identifier: str
    pattern: Pattern[str]
    description: str
    examples: Tuple[str, ...]
    ipa: Optional[str] = None
    mouth_position: Optional[str] = None
    common_mistake: Optional[str] = None

    def __post_init__(self):
        if not self.examples:
            raise ValueError(f"규칙 '{self.identifier}'에 예시가 없습니다")
        if not self.pattern.flags & re.IGNORECASE:
            raise ValueError(f"규칙 '{self.identifier}'의 패턴은 대소문자를 무시해야 합니다")

    def matches(self, phrase: Optional[str]) -> bool:
        """구문 어디에서든 패턴이 일치하는지 확인합니다."""
        if not phrase:
            return False
        return self.pattern.search(phrase) is not None

    def to_tip(self) -> PronunciationTip:
        """규칙을 사용자에게 보여줄 팁으로 변환."""
        return PronunciationTip(
            description=self.description,
            examples=self.examples,
            ipa=self.ipa,
            mouth_position=self.mouth_position,
            common_mistake=self.common_mistake,
        )


@dataclass(frozen=True)
class FeedbackRecord:
    """
    발음 분석 결과.

    분석 호출마다 새로 생성되며 호출자에게 전달된 뒤 보관되지 않습니다.

    Attributes:
        tier: 피드백 등급
        score: 0-100 정수 점수
        message: 등급별 안내 메시지
        spoken_text: 인식된 발화 원문
        target_text: 목표 구문 원문
        tips: 표 순서대로 최대 max_tips개의 발음 팁
    """
    tier: FeedbackTier
    score: int
    message: str
    spoken_text: Optional[str]
    target_text: Optional[str]
    tips: Tuple[PronunciationTip, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """결과를 JSON 직렬화 가능한 딕셔너리로 변환."""
        return {
            'tier': self.tier.value,
            'score': self.score,
            'message': self.message,
            'spoken_text': self.spoken_text,
            'target_text': self.target_text,
            'tips': [tip.to_dict() for tip in self.tips],
        }
