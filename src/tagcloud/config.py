"""YAML 기반 렌더링/출력 설정 로드."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from tagcloud.constants import DEFAULT_ENCODING, DEFAULT_STYLESHEET, OUTPUT_DIR
from tagcloud.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """태그 클라우드 렌더링 및 출력 설정.

    Attributes:
        stylesheet: 글꼴 크기 클래스를 정의한 CSS 주소
        output_dir: HTML 파일을 저장할 디렉토리
        encoding: 입력 파일 인코딩
    """

    stylesheet: str = DEFAULT_STYLESHEET
    output_dir: Path = OUTPUT_DIR
    encoding: str = DEFAULT_ENCODING

    def with_overrides(self, **overrides: Any) -> RenderSettings:
        """None이 아닌 값만 덮어쓴 새 설정을 반환한다."""
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


def load_settings(config_path: Path | None = None) -> RenderSettings:
    """설정 파일을 읽어 RenderSettings를 만든다.

    Args:
        config_path: YAML 설정 파일 경로 (None이면 기본값 사용)

    Returns:
        설정 객체

    Raises:
        FileNotFoundError: 지정한 설정 파일이 없는 경우
        ValueError: 설정 형식이 올바르지 않거나 알 수 없는 키가 있는 경우
    """
    if config_path is None:
        return RenderSettings()

    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"설정 파일 최상위는 매핑이어야 합니다: {config_path}")

    allowed = {field.name for field in fields(RenderSettings)}
    unknown = sorted(set(raw) - allowed)
    if unknown:
        raise ValueError(f"알 수 없는 설정 키: {', '.join(map(str, unknown))}")

    # 모든 설정 값은 문자열로 적는다
    for key, value in raw.items():
        if not isinstance(value, str):
            raise ValueError(f"설정 '{key}' 값은 문자열이어야 합니다: {value!r}")

    if "encoding" in raw:
        try:
            codecs.lookup(raw["encoding"])
        except LookupError as e:
            raise ValueError(f"알 수 없는 인코딩입니다: {raw['encoding']!r}") from e

    if "output_dir" in raw:
        raw["output_dir"] = Path(raw["output_dir"])

    logger.info("⚙️  설정 파일 로드: %s", config_path)
    return RenderSettings(**raw)
