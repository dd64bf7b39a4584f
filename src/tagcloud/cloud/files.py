"""입력 파일 열기, 출력 경로 정리, 원자적 출력 기록."""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from tagcloud.constants import OUTPUT_SUFFIX
from tagcloud.errors import (
    InputReadError,
    InputUnreadableError,
    OutputPathInvalidError,
    OutputWriteError,
)
from tagcloud.utils.logging_config import get_logger

logger = get_logger(__name__)


@contextmanager
def open_input(path: Path, encoding: str) -> Iterator[TextIO]:
    """입력 파일을 열고, 읽기 오류를 입력 오류 타입으로 바꾼다.

    Raises:
        InputUnreadableError: 파일을 열 수 없는 경우
        InputReadError: 읽는 도중 입출력 또는 디코딩 오류가 발생한 경우
    """
    try:
        handle = path.open("r", encoding=encoding)
    except OSError as exc:
        raise InputUnreadableError(f"입력 파일을 열 수 없습니다: {path}") from exc

    with handle:
        try:
            yield handle
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"입력 파일을 읽는 중 오류가 발생했습니다: {path}") from exc


def derive_output_path(name: str, output_dir: Path) -> Path:
    """사용자가 입력한 출력 이름에서 디렉토리와 확장자를 떼어 저장 경로를 만든다.

    예: ``reports/cloud.txt`` → ``<output_dir>/cloud.html``

    Args:
        name: 사용자가 입력한 출력 파일 이름
        output_dir: 저장 디렉토리

    Returns:
        output_dir 아래의 .html 경로

    Raises:
        OutputPathInvalidError: 이름이 비어 있거나 확장자를 뗀 결과가 비어 있는 경우
    """
    base = name.strip().replace("\\", "/").rsplit("/", 1)[-1]
    stem = base.rsplit(".", 1)[0] if "." in base else base
    if not stem:
        raise OutputPathInvalidError(f"출력 파일 이름이 올바르지 않습니다: {name!r}")
    return output_dir / f"{stem}{OUTPUT_SUFFIX}"


def write_document(path: Path, text: str, encoding: str = "utf-8") -> Path:
    """임시 파일에 기록한 뒤 교체하여, 실패 시 불완전한 파일을 남기지 않는다.

    Raises:
        OutputWriteError: 디렉토리 생성이나 기록에 실패한 경우
    """
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding=encoding, dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp", delete=False
        ) as handle:
            tmp_name = handle.name
            handle.write(text)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise OutputWriteError(f"출력 파일을 기록할 수 없습니다: {path}") from exc

    logger.debug("출력 파일 기록 완료: %s (%d자)", path, len(text))
    return path
