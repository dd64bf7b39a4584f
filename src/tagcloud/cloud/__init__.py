"""태그 클라우드 핵심 파이프라인.

구분자 기반 토큰화, 대소문자 변형 병합을 포함한 빈도 집계,
상위 N개 선택과 알파벳 정렬, 글꼴 크기 매핑 및 HTML 렌더링을 제공한다.
"""

from __future__ import annotations

from .frequency import build_frequency_table, count_words, merge_case_variants
from .pipeline import analyze_file, analyze_stream, generate_tag_cloud, run_pipeline
from .render import TagCloudEntry, font_size, render_tag_cloud
from .selection import select_top_n
from .tokenizer import is_excluded, is_separator_token, next_run

__all__ = [
    "TagCloudEntry",
    "analyze_file",
    "analyze_stream",
    "build_frequency_table",
    "count_words",
    "font_size",
    "generate_tag_cloud",
    "is_excluded",
    "is_separator_token",
    "merge_case_variants",
    "next_run",
    "render_tag_cloud",
    "run_pipeline",
    "select_top_n",
]
