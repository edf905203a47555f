# services/auth_service.py
import logging
from typing import Optional

from devmatching.core.exceptions import AuthenticationError
from devmatching.services.protocols import UserStore
from devmatching.utils.security import (
    BcryptPasswordHasher,
    create_access_token,
    create_refresh_token,
    decode_token,
)

logger = logging.getLogger(__name__)


class AuthService:
    """
    JWT 기반 인증 로직 담당
    """

    def __init__(self, user_store: UserStore, password_hasher: Optional[BcryptPasswordHasher] = None):
        self.user_store = user_store
        self.password_hasher = password_hasher or BcryptPasswordHasher()

    async def login(self, username: str, password: str) -> tuple[str, str]:
        """
        로그인 처리 및 JWT 토큰 발급
        """
        user = await self.user_store.find_by_username(username)
        if not user:
            logger.warning(f"Login failed: user not found ({username})")
            raise AuthenticationError("Invalid username or password")

        if not self.password_hasher.verify(password, user.password):
            logger.warning(f"Login failed: invalid password ({username})")
            raise AuthenticationError("Invalid username or password")

        access_token = create_access_token(sub=user.username)
        refresh_token = create_refresh_token(sub=user.username)

        logger.info(f"User login success: {user.username}")
        return access_token, refresh_token

    async def refresh(self, refresh_token: str) -> tuple[str, str]:
        """
        Refresh Token을 검증하고 새로운 Access/Refresh Token 발급
        """
        payload = decode_token(refresh_token)
        if not payload or payload.get("scope") != "refresh":
            raise AuthenticationError("Invalid refresh token")

        username = payload.get("sub")
        user = await self.user_store.find_by_username(username) if isinstance(username, str) else None
        if not user:
            raise AuthenticationError("User not found")

        new_access = create_access_token(sub=user.username)
        new_refresh = create_refresh_token(sub=user.username)

        logger.info(f"Token refreshed for {user.username}")
        return new_access, new_refresh
