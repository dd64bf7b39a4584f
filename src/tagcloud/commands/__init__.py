"""CLI 커맨드 모듈.

모든 커맨드는 Command 인터페이스를 구현하며, CLI에서 서브커맨드로 호출된다.
"""

from .base import Command
from .count_command import CountCommand
from .generate_command import GenerateCommand

__all__ = [
    "Command",
    "CountCommand",
    "GenerateCommand",
]
