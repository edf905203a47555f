"""
컨트롤러 모듈

API 엔드포인트들을 정의합니다.
외부 HTTP 요청을 받아 적절한 서비스로 라우팅합니다.
"""

from .auth import router as auth_router
from .user import router as user_router

__all__ = [
    "auth_router",
    "user_router",
]
