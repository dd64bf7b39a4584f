"""태그 클라우드 생성 과정의 오류 타입.

모든 오류는 TagCloudError와 대응되는 내장 예외를 함께 상속하여
호출 측에서 FileNotFoundError, ValueError 등으로도 처리할 수 있다.
"""

from __future__ import annotations


class TagCloudError(Exception):
    """태그 클라우드 오류의 기반 클래스."""


class InputUnreadableError(TagCloudError, FileNotFoundError):
    """입력 파일이 없거나 열 수 없는 경우."""


class InputReadError(TagCloudError, OSError):
    """입력 파일을 읽는 도중 실패한 경우."""


class EmptyVocabularyError(TagCloudError, ValueError):
    """필터링 후 집계할 단어가 하나도 없는 경우."""


class OutputPathInvalidError(TagCloudError, ValueError):
    """출력 파일 이름에서 저장 경로를 만들 수 없는 경우."""


class OutputWriteError(TagCloudError, OSError):
    """출력 파일을 기록할 수 없는 경우."""


class SelectionCountOutOfRangeError(TagCloudError, ValueError):
    """선택할 단어 수가 1 미만이거나 고유 단어 수를 넘는 경우."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(f"선택 단어 수 {requested}는 1 이상 {available} 이하여야 합니다.")
