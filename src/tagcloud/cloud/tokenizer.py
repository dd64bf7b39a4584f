"""구분자 기반 토크나이저와 토큰 분류기.

한 줄을 구분자 문자의 최대 연속 구간 또는 비구분자 문자의 최대 연속 구간으로 나눈다.
"""

from __future__ import annotations

from typing import Iterator

from tagcloud.constants import SEPARATORS, STOPWORDS


def is_separator(char: str) -> bool:
    """문자가 구분자 집합에 속하는지 확인한다."""
    return char in SEPARATORS


def next_run(line: str, position: int) -> str:
    """position에서 시작하는 구분자 구간 또는 단어 구간을 반환한다.

    Args:
        line: 입력 줄
        position: 시작 위치 (0 <= position < len(line))

    Returns:
        position부터 같은 종류의 문자가 이어지는 최대 부분 문자열
    """
    separator = is_separator(line[position])
    end = position + 1
    while end < len(line) and is_separator(line[end]) == separator:
        end += 1
    return line[position:end]


def iter_runs(line: str) -> Iterator[str]:
    """줄의 처음부터 끝까지 연속 구간을 순서대로 생성한다."""
    position = 0
    while position < len(line):
        run = next_run(line, position)
        yield run
        position += len(run)


def is_separator_token(token: str) -> bool:
    """구분자 구간인지 확인한다. 구간은 동질적이므로 첫 문자만 본다."""
    return is_separator(token[0])


def is_excluded(token: str) -> bool:
    """한 글자 토큰이거나 불용어(대소문자 구분)이면 True."""
    return len(token) == 1 or token in STOPWORDS


def is_countable(token: str) -> bool:
    return not (is_separator_token(token) or is_excluded(token))
