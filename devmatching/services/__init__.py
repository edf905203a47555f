"""
서비스 계층 모듈

비즈니스 로직을 담당합니다.
Repository와 Router 사이의 중간 계층입니다.
"""

from .auth_service import AuthService
from .user_service import UserService, check_owner

__all__ = [
    "AuthService",
    "UserService",
    "check_owner",
]
