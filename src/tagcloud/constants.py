"""중앙화된 경로 및 렌더링 상수 관리

이 모듈은 프로젝트 전체에서 사용되는 산출물 경로와 토큰화/렌더링 상수를 중앙에서 관리한다.
모든 하드코딩된 값은 이 모듈의 상수를 참조해야 한다.
"""

from __future__ import annotations

from pathlib import Path

# ====================================================================
# 📁 루트 디렉토리
# ====================================================================

ARTIFACTS_ROOT = Path("artifacts")

# ====================================================================
# 📄 출력 경로
# ====================================================================

OUTPUT_DIR = Path("data")
OUTPUT_SUFFIX = ".html"
FREQUENCY_FILE = ARTIFACTS_ROOT / "frequency" / "word_frequency.parquet"

# ====================================================================
# 📝 로그 경로
# ====================================================================

LOGS_DIR = ARTIFACTS_ROOT / "logs"

# ====================================================================
# 🔤 토큰화 규칙
# ====================================================================

SEPARATORS = frozenset("\"\t\n\r, `-.!?[]';:/()*\\_")
STOPWORDS = frozenset({"and", "a", "the"})

# ====================================================================
# 🎨 렌더링 설정
# ====================================================================

FONT_SIZE_SMALLEST = 11
FONT_SIZE_RANGE = 26
DEFAULT_STYLESHEET = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css"
)
DEFAULT_ENCODING = "utf-8"
