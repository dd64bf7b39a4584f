"""상위 N개 단어 선택 및 표시 순서 정렬."""

from __future__ import annotations

from collections.abc import Mapping

RankedEntry = tuple[str, int]


def count_order(entry: RankedEntry) -> tuple[int, str]:
    """빈도 내림차순, 동률이면 단어 오름차순(대소문자 무시) 정렬 키."""
    word, count = entry
    return -count, word.lower()


def alpha_order(entry: RankedEntry) -> tuple[str, int]:
    """단어 오름차순(대소문자 무시), 동률이면 빈도 내림차순 정렬 키."""
    word, count = entry
    return word.lower(), -count


def select_top_n(table: Mapping[str, int], n: int) -> list[RankedEntry]:
    """빈도 상위 n개 단어를 알파벳 순서로 반환한다.

    n이 고유 단어 수보다 크면 고유 단어 수로 줄인다.

    Args:
        table: 병합된 단어 빈도
        n: 선택할 단어 수 (1 이상)

    Returns:
        (단어, 빈도) 목록. 단어 오름차순, 동률이면 빈도 내림차순

    Raises:
        ValueError: n이 1 미만이거나 빈도표가 비어 있는 경우
    """
    if n <= 0:
        raise ValueError(f"선택 단어 수는 1 이상이어야 합니다: {n}")
    if not table:
        raise ValueError("빈도표가 비어 있습니다.")

    ranked = sorted(table.items(), key=count_order)
    return sorted(ranked[: min(n, len(ranked))], key=alpha_order)
