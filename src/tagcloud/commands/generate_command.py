"""태그 클라우드 생성 커맨드.

입력 파일의 단어 빈도를 집계하고 상위 N개 단어를 HTML 태그 클라우드로 저장한다.
인자로 주어지지 않은 입력 경로, 출력 이름, 단어 수는 대화형으로 입력받는다.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from tagcloud.cloud.files import derive_output_path, write_document
from tagcloud.cloud.pipeline import analyze_file, generate_tag_cloud
from tagcloud.cloud.selection import count_order
from tagcloud.config import RenderSettings
from tagcloud.errors import EmptyVocabularyError, SelectionCountOutOfRangeError
from tagcloud.parser import CliHelpFormatter, encoding_name, output_name, positive_int

from .base import Command, SubparsersLike

logger = logging.getLogger(__name__)


def prompt_top(console: Console, available: int) -> int:
    """1 이상 available 이하의 단어 수를 입력받을 때까지 다시 묻는다."""
    while True:
        value = IntPrompt.ask(f"표시할 단어 수 (1~{available})", console=console)
        if 1 <= value <= available:
            return value
        console.print(
            f"[red]올바르지 않은 단어 수입니다. 1 이상 {available} 이하의 정수를 입력하세요.[/red]"
        )


class GenerateCommand(Command):
    """태그 클라우드 생성 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_label: 입력한 그대로의 입력 파일 경로, 제목에 표시됨 (None이면 입력받음)
        output_name: 출력 파일 이름 (None이면 입력받음)
        top: 표시할 단어 수 (None이면 입력받음)
        settings: 렌더링/출력 설정
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser("generate", help="HTML 태그 클라우드 생성", formatter_class=CliHelpFormatter)
        parser.add_argument("--input", default=None, help="입력 텍스트 파일 (생략하면 입력받음)")
        parser.add_argument("--output", type=output_name, default=None, help="출력 파일 이름, 디렉토리와 확장자는 무시됨 (생략하면 입력받음)")
        parser.add_argument("--top", type=positive_int, default=None, help="표시할 단어 수 (생략하면 입력받음)")
        parser.add_argument("--output-dir", type=Path, default=None, help="HTML 저장 디렉토리 (설정 파일보다 우선)")
        parser.add_argument("--stylesheet", default=None, help="CSS 주소 (설정 파일보다 우선)")
        parser.add_argument("--encoding", type=encoding_name, default=None, help="입력 파일 인코딩 (설정 파일보다 우선)")

    def __init__(
        self,
        console: Console,
        input_label: str | None,
        output_name: str | None,
        top: int | None,
        settings: RenderSettings,
    ):
        self.console = console
        self.input_label = input_label
        self.output_name = output_name
        self.top = top
        self.settings = settings

    def resolve_top(self, available: int) -> int:
        """인자로 받은 단어 수를 검증하거나 대화형으로 입력받는다.

        Raises:
            SelectionCountOutOfRangeError: 인자로 받은 값이 범위를 벗어난 경우
        """
        if self.top is None:
            return prompt_top(self.console, available)
        if not 1 <= self.top <= available:
            raise SelectionCountOutOfRangeError(self.top, available)
        return self.top

    def execute(self) -> dict[str, Any]:
        """태그 클라우드를 생성한다.

        Returns:
            생성 결과 딕셔너리 (input_path, output_path, unique_words, selected)
        """
        input_label = self.input_label or Prompt.ask("입력 파일 경로", console=self.console)
        input_path = Path(input_label)
        logger.info("입력 파일: %s", input_path)

        with self.console.status("단어 빈도 집계 중..."):
            table = analyze_file(input_path, self.settings.encoding)
        if not table:
            raise EmptyVocabularyError(f"입력 파일에 집계할 단어가 없습니다: {input_path}")

        name = self.output_name or Prompt.ask("출력 파일 이름", console=self.console)
        output_path = derive_output_path(name, self.settings.output_dir)

        top = self.resolve_top(len(table))
        logger.info("표시할 단어 수: %d", top)

        with self.console.status("태그 클라우드 생성 중..."):
            document = generate_tag_cloud(table, top, input_label, self.settings.stylesheet)
            write_document(output_path, document)
        logger.info("📄 태그 클라우드 저장: %s", output_path)

        # Rich 테이블로 결과 출력
        summary = Table(title="☁️  태그 클라우드 생성 결과", show_header=True, title_style="bold green")
        summary.add_column("항목", style="bold cyan", width=20)
        summary.add_column("값", style="yellow", justify="right")

        summary.add_row("입력 파일", escape(input_label))
        summary.add_row("고유 단어 수", f"{len(table):,}개")
        summary.add_row("표시 단어 수", f"{top:,}개")
        summary.add_row("", "")
        summary.add_row("출력 파일", str(output_path))

        self.console.print()
        self.console.print(summary)

        top_words = sorted(table.items(), key=count_order)[: min(top, 10)]
        preview = Table(title="🏆 상위 빈도 단어", show_header=True, border_style="dim")
        preview.add_column("순위", style="dim", width=6, justify="center")
        preview.add_column("단어", style="cyan", width=20)
        preview.add_column("빈도", style="yellow", width=12, justify="right")
        for idx, (word, count) in enumerate(top_words, 1):
            rank_style = "bold green" if idx <= 3 else "dim"
            preview.add_row(f"{idx}", word, f"{count:,}회", style=rank_style)

        self.console.print()
        self.console.print(preview)
        self.console.print()
        self.console.print(
            Panel(
                f"[bold green]✅ 태그 클라우드가 생성되었습니다[/bold green]\n[dim]{escape(str(output_path))}[/dim]",
                border_style="green",
                padding=(1, 2),
            )
        )

        return {
            "input_path": input_path,
            "output_path": output_path,
            "unique_words": len(table),
            "selected": top,
        }

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "generate"
        """
        return "generate"
