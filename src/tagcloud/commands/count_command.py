"""단어 빈도 내보내기 커맨드.

대소문자 변형을 병합한 단어 빈도표를 parquet 파일로 저장한다.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from tagcloud.cloud.pipeline import analyze_file, write_frequency_parquet
from tagcloud.cloud.selection import count_order
from tagcloud.constants import FREQUENCY_FILE
from tagcloud.errors import EmptyVocabularyError
from tagcloud.parser import CliHelpFormatter, encoding_name, positive_int

from .base import Command, SubparsersLike

logger = logging.getLogger(__name__)


class CountCommand(Command):
    """단어 빈도 내보내기 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_path: 입력 텍스트 파일 경로
        output_path: 빈도 parquet 출력 경로
        top: 화면에 보여줄 상위 단어 수
        encoding: 입력 파일 인코딩
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser("count", help="단어 빈도표 parquet 내보내기", formatter_class=CliHelpFormatter)
        parser.add_argument("--input", type=Path, required=True, help="입력 텍스트 파일")
        parser.add_argument("--output", type=Path, default=FREQUENCY_FILE, help="단어 빈도 parquet 출력 경로")
        parser.add_argument("--top", type=positive_int, default=10, help="화면에 보여줄 상위 단어 수")
        parser.add_argument("--encoding", type=encoding_name, default=None, help="입력 파일 인코딩 (설정 파일보다 우선)")

    def __init__(
        self,
        console: Console,
        input_path: Path,
        output_path: Path,
        top: int,
        encoding: str,
    ):
        self.console = console
        self.input_path = input_path
        self.output_path = output_path
        self.top = top
        self.encoding = encoding

    def execute(self) -> dict[str, Any]:
        """빈도표를 집계하여 저장한다.

        Returns:
            결과 딕셔너리 (frequency_path, total_words, unique_words)
        """
        with self.console.status("단어 빈도 집계 중..."):
            table = analyze_file(self.input_path, self.encoding)
        if not table:
            raise EmptyVocabularyError(f"입력 파일에 집계할 단어가 없습니다: {self.input_path}")

        result = write_frequency_parquet(table, self.output_path)

        avg_frequency = result["total_words"] / result["unique_words"]

        table_view = Table(title="✨ 단어 빈도 분석 결과", show_header=True, title_style="bold green")
        table_view.add_column("항목", style="bold cyan", width=20)
        table_view.add_column("값", style="yellow", justify="right")

        table_view.add_row("총 단어 수", f"{result['total_words']:,}개")
        table_view.add_row("고유 단어 수", f"{result['unique_words']:,}개")
        table_view.add_row("평균 빈도", f"{avg_frequency:.2f}회")
        table_view.add_row("", "")
        table_view.add_row("빈도 파일", str(self.output_path))

        self.console.print()
        self.console.print(table_view)

        top_table = Table(title=f"🏆 상위 {self.top}개 빈도 단어", show_header=True, border_style="dim")
        top_table.add_column("순위", style="dim", width=6, justify="center")
        top_table.add_column("단어", style="cyan", width=20)
        top_table.add_column("빈도", style="yellow", width=15, justify="right")

        for idx, (word, count) in enumerate(sorted(table.items(), key=count_order)[: self.top], 1):
            rank_style = "bold green" if idx <= 3 else "dim"
            top_table.add_row(f"{idx}", word, f"{count:,}회", style=rank_style)

        self.console.print()
        self.console.print(top_table)
        self.console.print()

        return {
            "frequency_path": result["frequency_path"],
            "total_words": result["total_words"],
            "unique_words": result["unique_words"],
        }

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "count"
        """
        return "count"
