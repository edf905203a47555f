from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import jwt, JWTError

from devmatching.core.config import settings

BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher:
    """
    PasswordHasher 구현체 (bcrypt)

    bcrypt는 앞 72바이트만 사용하므로, 넘치는 비밀번호는 UTF-8 문자 경계에서 잘라서 다룹니다.
    """

    @staticmethod
    def _encode(plaintext: str) -> bytes:
        encoded = plaintext.encode("utf-8")
        if len(encoded) <= BCRYPT_MAX_BYTES:
            return encoded
        # 잘린 멀티바이트 문자의 꼬리는 버린다
        return encoded[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore").encode("utf-8")

    def hash(self, plaintext: str) -> str:
        return bcrypt.hashpw(self._encode(plaintext), bcrypt.gensalt()).decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        return bcrypt.checkpw(self._encode(plaintext), hashed.encode("utf-8"))


def _issue_token(sub: str, scope: str, lifetime: timedelta) -> str:
    claims = {
        "sub": sub,
        "scope": scope,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def create_access_token(sub: str) -> str:
    return _issue_token(sub, "access", timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))


def create_refresh_token(sub: str) -> str:
    return _issue_token(sub, "refresh", timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS))


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """
    서명/만료 검증에 실패하면 None
    """
    try:
        claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None
    return claims
