"""
API 스키마 모듈

Request/Response 스키마들을 정의합니다.
API 데이터 형식을 정의합니다.
"""

from .auth import TokenPair, TokenRefreshRequest
from .user_schema import (CreateUserRequest, ErrorResponse, UpdateUserRequest,
                          UserResponse)

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
    "ErrorResponse",
    "TokenPair",
    "TokenRefreshRequest",
]
