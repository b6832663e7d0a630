"""커스텀 예외 클래스 모듈.

트리플 생성기 전역에서 사용되는 예외 클래스를 정의합니다.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AppError(Exception):
    """애플리케이션 기본 예외.

    모든 커스텀 예외의 기반 클래스입니다.
    """

    exit_code: int = 1
    error_code: str = "INTERNAL_ERROR"
    message: str = "Internal error."

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환."""
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class UserInputError(AppError):
    """잘못된 호출 인자 예외.

    인자 개수, 대상 디렉토리, 개수 검증 실패를 모두 포함합니다.
    """

    exit_code = 2
    error_code = "USER_INPUT_ERROR"
    message = "Invalid input."


class IllegalStateError(AppError):
    """호출 순서 오류 예외."""

    exit_code = 70
    error_code = "ILLEGAL_STATE"
    message = "Illegal calling sequence."
