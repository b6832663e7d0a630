"""Core 모듈.

공통 예외 클래스와 로깅 설정을 제공합니다.
"""

from triplegen.core.exceptions import (
    AppError,
    IllegalStateError,
    UserInputError,
)
from triplegen.core.logging import get_logger, setup_logging

__all__ = [
    "AppError",
    "IllegalStateError",
    "UserInputError",
    "get_logger",
    "setup_logging",
]
