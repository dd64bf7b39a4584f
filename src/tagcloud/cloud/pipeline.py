"""토큰화 → 빈도 집계 → 선택 → 렌더링 파이프라인."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, TypedDict

import pyarrow as pa
import pyarrow.parquet as pq

from tagcloud.cloud.files import open_input
from tagcloud.cloud.frequency import build_frequency_table
from tagcloud.cloud.render import render_tag_cloud
from tagcloud.cloud.selection import count_order, select_top_n
from tagcloud.constants import DEFAULT_STYLESHEET
from tagcloud.errors import EmptyVocabularyError, OutputWriteError
from tagcloud.utils.logging_config import get_logger

logger = get_logger(__name__)


class FrequencyResult(TypedDict):
    """빈도 내보내기 결과 타입"""

    total_words: int
    unique_words: int
    frequency_path: Path


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """텍스트 스트림에서 줄바꿈을 뗀 줄을 생성한다."""
    for line in stream:
        yield line.rstrip("\n")


def analyze_stream(stream: Iterable[str]) -> dict[str, int]:
    """텍스트 스트림을 끝까지 읽어 병합된 빈도표를 만든다."""
    return build_frequency_table(iter_lines(stream))


def analyze_file(path: Path, encoding: str) -> dict[str, int]:
    """입력 파일을 읽어 병합된 빈도표를 만든다.

    Raises:
        InputUnreadableError: 파일을 열 수 없는 경우
        InputReadError: 읽는 도중 실패한 경우
    """
    with open_input(path, encoding) as handle:
        table = analyze_stream(handle)
    logger.info("📂 %s에서 고유 단어 %d개를 집계했습니다.", path, len(table))
    return table


def generate_tag_cloud(
    table: dict[str, int],
    n: int,
    label: str,
    stylesheet: str = DEFAULT_STYLESHEET,
) -> str:
    """병합된 빈도표에서 상위 n개 단어를 골라 HTML 문서를 만든다.

    Raises:
        EmptyVocabularyError: 빈도표가 비어 있는 경우
    """
    if not table:
        raise EmptyVocabularyError(f"집계할 단어가 없습니다: {label}")
    entries = select_top_n(table, n)
    logger.debug("상위 %d개 단어 선택 완료", len(entries))
    return render_tag_cloud(entries, label, stylesheet)


def run_pipeline(
    stream: Iterable[str],
    n: int,
    label: str = "",
    stylesheet: str = DEFAULT_STYLESHEET,
) -> str:
    """텍스트 스트림에서 태그 클라우드 HTML 문서를 만든다.

    Args:
        stream: 줄 단위로 읽을 텍스트 스트림
        n: 선택할 단어 수 (고유 단어 수보다 크면 줄어든다)
        label: 제목에 표시할 입력 이름
        stylesheet: CSS 주소

    Returns:
        HTML 문서 문자열
    """
    return generate_tag_cloud(analyze_stream(stream), n, label, stylesheet)


def write_frequency_parquet(table: dict[str, int], output_path: Path) -> FrequencyResult:
    """병합된 빈도표를 빈도 내림차순으로 parquet에 저장한다."""
    rows = sorted(table.items(), key=count_order)
    words = [word for word, _ in rows]
    counts = [count for _, count in rows]
    arrow_table = pa.Table.from_pydict({"word": words, "count": counts})
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        pq.write_table(arrow_table, output_path)
    except OSError as exc:
        raise OutputWriteError(f"빈도 파일을 기록할 수 없습니다: {output_path}") from exc

    logger.info("📄 단어 빈도 저장: %s", output_path)
    return FrequencyResult(
        total_words=sum(counts),
        unique_words=len(rows),
        frequency_path=output_path,
    )
