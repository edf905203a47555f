# utils/dependencies.py
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from devmatching.core.exceptions import AuthenticationError
from devmatching.database import get_session
from devmatching.models.user import User
from devmatching.repositories.user_repository import UserRepository
from devmatching.services.auth_service import AuthService
from devmatching.services.protocols import UserStore
from devmatching.services.user_service import UserService
from devmatching.utils.security import BcryptPasswordHasher, decode_token


# Swagger에서 Authorize → 토큰만 입력해도 Bearer 자동으로 붙음
# 헤더가 없으면 None → get_current_user에서 401
auth_scheme = HTTPBearer(auto_error=False)


def get_user_repository(db: AsyncSession = Depends(get_session)) -> UserStore:
    """
    요청 단위 세션에 묶인 UserRepository
    (get_current_user와 서비스가 같은 인스턴스를 공유한다)
    """
    return UserRepository(db)


def get_user_service(user_store: UserStore = Depends(get_user_repository)) -> UserService:
    """
    사용자 서비스 의존성 주입 (FastAPI Depends용)
    """
    return UserService(user_store, BcryptPasswordHasher())


def get_auth_service(user_store: UserStore = Depends(get_user_repository)) -> AuthService:
    """
    AuthService 의존성 주입용 팩토리 함수.
    """
    return AuthService(user_store, BcryptPasswordHasher())


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(auth_scheme),
    user_store: UserStore = Depends(get_user_repository),
) -> User:
    """
    JWT Access Token을 해독하고 현재 로그인한 사용자 반환
    """
    if credentials is None:
        raise AuthenticationError("Not authenticated")

    token = credentials.credentials  # <-- "Bearer xxx"에서 xxx 추출
    payload = decode_token(token)

    if not payload or payload.get("scope") != "access":
        raise AuthenticationError("Invalid or expired token")

    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub:
        raise AuthenticationError("Invalid token payload (sub)")

    user = await user_store.find_by_username(sub)
    if not user:
        raise AuthenticationError("User not found")

    return user
