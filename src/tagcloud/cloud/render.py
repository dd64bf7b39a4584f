"""빈도를 글꼴 크기로 변환하여 HTML 태그 클라우드를 만든다."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Iterable, Sequence

from tagcloud.cloud.selection import RankedEntry
from tagcloud.constants import DEFAULT_STYLESHEET, FONT_SIZE_RANGE, FONT_SIZE_SMALLEST


@dataclass(frozen=True, slots=True)
class TagCloudEntry:
    """글꼴 크기가 정해진 태그 클라우드 항목."""

    word: str
    count: int
    font_size: int


def font_size(count: int, lowest: int, highest: int) -> int:
    """빈도를 [FONT_SIZE_SMALLEST, FONT_SIZE_SMALLEST + FONT_SIZE_RANGE] 범위의 글꼴 크기로 변환한다.

    Args:
        count: 단어 빈도
        lowest: 선택된 단어 중 최소 빈도
        highest: 선택된 단어 중 최대 빈도

    Returns:
        글꼴 크기 클래스 번호
    """
    if highest == lowest:
        return FONT_SIZE_SMALLEST
    # floor(비율 × FONT_SIZE_RANGE)를 정수 연산으로 계산
    return FONT_SIZE_SMALLEST + (count - lowest) * FONT_SIZE_RANGE // (highest - lowest)


def scale_entries(entries: Sequence[RankedEntry]) -> list[TagCloudEntry]:
    """선택된 항목 전체의 최소/최대 빈도를 기준으로 글꼴 크기를 매긴다."""
    if not entries:
        return []
    counts = [count for _, count in entries]
    lowest, highest = min(counts), max(counts)
    return [TagCloudEntry(word, count, font_size(count, lowest, highest)) for word, count in entries]


def render_span(entry: TagCloudEntry) -> str:
    return (
        f'<span style="cursor:default" class="f{entry.font_size}" '
        f'title="count:{entry.count}">{escape(entry.word)}</span>'
    )


def render_document(entries: Iterable[TagCloudEntry], size: int, label: str, stylesheet: str) -> str:
    """글꼴 크기가 정해진 항목으로 HTML 문서를 조립한다."""
    heading = escape(f"Top {size} words in {label}")
    lines = [
        "<html>",
        "<head>",
        f"<title>{heading}</title>",
        f'<link href="{escape(stylesheet)}" rel="stylesheet" type="text/css">',
        "</head>",
        "<body>",
        f"<h2>{heading}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]
    lines.extend(render_span(entry) for entry in entries)
    lines.extend(["</p>", "</div>", "</body>", "</html>"])
    return "\n".join(lines) + "\n"


def render_tag_cloud(
    entries: Sequence[RankedEntry],
    label: str,
    stylesheet: str = DEFAULT_STYLESHEET,
) -> str:
    """표시 순서로 정렬된 (단어, 빈도) 목록을 태그 클라우드 HTML로 렌더링한다.

    Args:
        entries: 표시 순서의 (단어, 빈도) 목록
        label: 제목에 표시할 입력 이름
        stylesheet: 글꼴 크기 클래스(f11~f37)를 정의한 CSS 주소

    Returns:
        HTML 문서 문자열
    """
    return render_document(scale_entries(entries), len(entries), label, stylesheet)
