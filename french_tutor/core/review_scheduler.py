"""간격 반복(복습 일정) 관리 모듈."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from .scoring_config import ScoringConfig

logger = logging.getLogger(__name__)


@dataclass
class ReviewItem:
    """구문 하나의 복습 상태."""
    phrase_id: str
    level: int = 0
    next_review: datetime = field(default_factory=datetime.now)
    last_score: float = 0
    last_practiced: Optional[datetime] = None

    def is_due(self, now: datetime) -> bool:
        return self.next_review <= now

    def to_dict(self) -> Dict[str, Any]:
        """복습 상태를 딕셔너리로 변환."""
        return {
            "phrase_id": self.phrase_id,
            "level": self.level,
            "next_review": self.next_review.isoformat(),
            "last_score": self.last_score,
            "last_practiced": self.last_practiced.isoformat() if self.last_practiced else None,
        }


class ReviewScheduler:
    """
    점수에 따라 구문별 복습 간격을 조정하는 클래스.

    excellent 경계(기본 90점) 이상이면 한 단계 올리고 fair 경계(기본 50점) 미만이면
    한 단계 내립니다. 단계는 0부터 간격 표의 마지막 인덱스까지입니다.
    상태는 메모리에만 보관합니다.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        """
        ReviewScheduler 초기화.

        Args:
            config: 복습 간격과 등급 경계를 담은 채점 설정 (None이면 기본 설정 생성)
        """
        self.config = config if config is not None else ScoringConfig()
        self._items: Dict[str, ReviewItem] = {}

    @staticmethod
    def phrase_id(level: str, lesson_id: str, phrase: str) -> str:
        """CEFR 레벨, 레슨 ID, 구문으로 구문 ID를 만듭니다."""
        return f"{level}_{lesson_id}_{phrase}"

    @property
    def intervals_hours(self) -> List[int]:
        return self.config.review_intervals_hours

    @property
    def max_level(self) -> int:
        return len(self.intervals_hours) - 1

    def get(self, phrase_id: str) -> Optional[ReviewItem]:
        return self._items.get(phrase_id)

    def update(self, phrase_id: str, score: float, now: Optional[datetime] = None) -> ReviewItem:
        """
        연습 점수를 반영해 구문의 복습 단계와 다음 복습 시각을 갱신합니다.

        Args:
            phrase_id: 구문 ID
            score: 0-100 점수
            now: 기준 시각 (None이면 현재 시각)

        Returns:
            갱신된 ReviewItem
        """
        now = now or datetime.now()
        item = self._items.get(phrase_id)
        if item is None:
            item = ReviewItem(phrase_id, next_review=now)
            self._items[phrase_id] = item

        if score >= self.config.excellent_threshold:
            item.level = min(item.level + 1, self.max_level)
        elif score < self.config.fair_threshold:
            item.level = max(item.level - 1, 0)
        item.level = min(item.level, self.max_level)

        item.next_review = now + timedelta(hours=self.intervals_hours[item.level])
        item.last_score = score
        item.last_practiced = now

        logger.debug(f"복습 일정 갱신: {phrase_id} -> 단계 {item.level}, 다음 복습 {item.next_review}")
        return item

    def due_for_review(self, now: Optional[datetime] = None) -> List[ReviewItem]:
        """복습 시각이 지난 구문들을 다음 복습 시각이 이른 순서로 반환합니다."""
        now = now or datetime.now()
        due = [item for item in self._items.values() if item.is_due(now)]
        return sorted(due, key=lambda item: item.next_review)

    def __len__(self) -> int:
        return len(self._items)
