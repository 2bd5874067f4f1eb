"""단어/구문 간 레벤슈타인 편집 거리 계산."""

from typing import List


def levenshtein_distance(a: str, b: str) -> int:
    """
    두 문자열 사이의 레벤슈타인 거리를 계산합니다.

    삽입, 삭제, 치환 비용은 모두 1이며 대소문자를 구분하고
    코드 포인트 단위로 비교합니다. (len(b)+1) x (len(a)+1) 비용 표를
    두 개의 행만 유지하며 채웁니다.

    Args:
        a: 첫 번째 문자열
        b: 두 번째 문자열

    Returns:
        a를 b로 바꾸는 데 필요한 최소 편집 횟수
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous: List[int] = list(range(len(a) + 1))
    for i in range(1, len(b) + 1):
        current = [i] + [0] * len(a)
        for j in range(1, len(a) + 1):
            cost_sub = 0 if b[i - 1] == a[j - 1] else 1
            current[j] = min(
                previous[j - 1] + cost_sub,  # 치환
                current[j - 1] + 1,          # 삽입
                previous[j] + 1,             # 삭제
            )
        previous = current

    return previous[len(a)]
