"""태그 클라우드 생성 패키지.

텍스트 파일의 단어 빈도를 집계하고, 대소문자 변형을 병합한 뒤
상위 N개 단어를 글꼴 크기로 빈도를 표현하는 HTML 태그 클라우드로 렌더링한다.
"""

__version__ = "0.1.0"
