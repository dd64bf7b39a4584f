"""단어 빈도 집계 및 대소문자 변형 병합."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from tagcloud.cloud.tokenizer import is_countable, iter_runs
from tagcloud.utils.logging_config import get_logger

logger = get_logger(__name__)


def count_words(lines: Iterable[str]) -> Counter[str]:
    """줄 단위로 토큰화하여 집계 대상 단어의 출현 횟수를 센다.

    대소문자를 구분하며, 구분자 구간과 불용어, 한 글자 토큰은 제외한다.

    Args:
        lines: 텍스트 줄 이터러블

    Returns:
        단어별 출현 횟수
    """
    counter: Counter[str] = Counter()
    line_count = 0
    for line in lines:
        line_count += 1
        counter.update(run for run in iter_runs(line) if is_countable(run))
    logger.debug("%d줄에서 고유 단어 %d개 집계", line_count, len(counter))
    return counter


def capitalize_first(word: str) -> str:
    """첫 글자만 대문자로 바꾸고 나머지는 그대로 둔다."""
    return word[:1].upper() + word[1:]


def merge_case_variants(table: dict[str, int]) -> dict[str, int]:
    """소문자 표기와 첫 글자 대문자 표기를 하나의 항목으로 병합한다.

    두 표기가 모두 존재하면 합산한 빈도를 원래 빈도가 더 높은 표기로 기록한다.
    동률이면 소문자 표기를 남긴다. 같은 쌍은 처음 만났을 때만 기록되며,
    세 가지 이상의 표기가 겹쳐도 쌍 단위 규칙만 적용한다.

    Args:
        table: 대소문자를 구분한 단어 빈도

    Returns:
        병합된 단어 빈도 (삽입 순서는 입력 순서를 따른다)
    """
    merged: dict[str, int] = {}
    pair_count = 0
    for word in list(table):
        upper = capitalize_first(word)
        lower = word.lower()
        # 대소문자가 없는 단어는 자기 자신과 쌍을 이루지 않는다
        if upper != lower and upper in table and lower in table:
            spelling = upper if table[upper] > table[lower] else lower
            if spelling not in merged:
                merged[spelling] = table[upper] + table[lower]
                pair_count += 1
        else:
            merged[word] = table[word]

    logger.debug("대소문자 변형 %d쌍 병합 (%d → %d개)", pair_count, len(table), len(merged))
    return merged


def build_frequency_table(lines: Iterable[str]) -> dict[str, int]:
    """집계와 병합을 차례로 수행한 최종 빈도표를 반환한다."""
    return merge_case_variants(count_words(lines))
