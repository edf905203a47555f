"""
애플리케이션 예외 정의

서비스 계층은 검증 실패 시 아래 예외를 던지고,
main.py의 예외 핸들러가 ErrorResponse로 변환합니다.
"""
from typing import Any, Optional


class AppException(Exception):
    """애플리케이션 기본 예외"""

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        detail: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class DuplicateError(AppException):
    """username 또는 nick_name이 다른 사용자와 중복될 때"""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(
            message=f"이미 사용 중인 {field}입니다.",
            status_code=409,
            detail=f"{field} '{value}'은(는) 이미 사용 중입니다.",
        )


class InvalidAccessError(AppException):
    """요청 대상 ID와 인증된 사용자 ID가 다를 때"""

    def __init__(self) -> None:
        super().__init__(
            message="접근 권한이 없습니다.",
            status_code=403,
            detail="본인 정보에만 접근할 수 있습니다.",
        )


class AuthenticationError(AppException):
    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message=message, status_code=401)
