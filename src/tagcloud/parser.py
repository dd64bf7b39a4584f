"""CLI 인자 파서와 인자 타입 검증.

단어 수, 입력 인코딩, 출력 파일 이름을 파싱 단계에서 검증하여
잘못된 값이 파이프라인까지 전달되지 않게 한다.
"""

from __future__ import annotations

import argparse
import codecs
from collections.abc import Iterable
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.panel import Panel

from tagcloud.cloud.files import derive_output_path
from tagcloud.errors import OutputPathInvalidError

if TYPE_CHECKING:
    from tagcloud.commands.base import Command

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
    """기본값 표시와 원시 텍스트 도움말을 함께 지원하는 포맷터."""


class CliArgumentParser(argparse.ArgumentParser):
    """인자 오류를 Rich 패널로 보여주는 argparse 파서.

    Attributes:
        console: 오류 패널을 출력할 Rich 콘솔
    """

    def __init__(self, console: Console | None = None, **kwargs: Any) -> None:
        self.console = console or Console()
        super().__init__(**kwargs)

    def error(self, message: str) -> None:
        self.console.print(
            Panel.fit(
                f"[bold red]인자 오류[/bold red]\n{message}\n\n[dim]도움말: {self.prog} --help[/dim]",
                title="tagcloud 입력 오류",
                border_style="red",
            )
        )
        raise SystemExit(2)


def positive_int(value: str) -> int:
    """1 이상의 정수(선택 단어 수 등)를 검증한다.

    Raises:
        argparse.ArgumentTypeError: 정수가 아니거나 1보다 작은 경우
    """
    try:
        parsed = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"정수를 입력해야 합니다: {value!r}") from e
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"1 이상의 정수만 허용됩니다: {parsed}")
    return parsed


def encoding_name(value: str) -> str:
    """파이썬 코덱으로 등록된 인코딩 이름인지 검증한다.

    Raises:
        argparse.ArgumentTypeError: 알 수 없는 인코딩인 경우
    """
    try:
        codecs.lookup(value)
    except LookupError as e:
        raise argparse.ArgumentTypeError(f"알 수 없는 인코딩입니다: {value!r}") from e
    return value


def output_name(value: str) -> str:
    """.html 저장 경로를 만들 수 있는 출력 이름인지 검증한다.

    디렉토리와 확장자는 나중에 제거되므로 원래 문자열을 그대로 반환한다.

    Raises:
        argparse.ArgumentTypeError: 디렉토리와 확장자를 뗀 이름이 비어 있는 경우
    """
    try:
        derive_output_path(value, Path("."))
    except OutputPathInvalidError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return value


def setup_parser(console: Console, commands: Iterable[type[Command]]) -> argparse.ArgumentParser:
    """전역 옵션과 각 커맨드의 서브파서를 등록한 파서를 만든다.

    Args:
        console: 인자 오류를 출력할 Rich 콘솔
        commands: configure_parser()로 서브커맨드를 등록할 Command 서브클래스들

    Returns:
        설정된 ArgumentParser 객체
    """
    parser = CliArgumentParser(
        console,
        prog="tagcloud",
        description="텍스트 파일의 단어 빈도로 HTML 태그 클라우드를 만드는 CLI",
        formatter_class=CliHelpFormatter,
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="콘솔 로깅 레벨")
    parser.add_argument("--config", type=Path, default=None, help="YAML 설정 파일 경로")
    parser.add_argument("--no-banner", action="store_true", help="시작 배너를 출력하지 않음")
    parser.add_argument("--no-log-file", action="store_true", help="로그 파일을 만들지 않음")

    # 서브커맨드 인자 오류도 같은 콘솔로 출력한다
    subparsers = parser.add_subparsers(
        dest="command", required=True, metavar="command", parser_class=partial(CliArgumentParser, console)
    )
    for cmd_cls in commands:
        cmd_cls.configure_parser(subparsers)

    return parser
