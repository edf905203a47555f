from __future__ import annotations
from typing import Optional, Protocol

from devmatching.models.user import User


class UserStore(Protocol):
    async def find_by_id(self, user_id: int) -> Optional[User]: ...

    async def find_by_username(self, username: str) -> Optional[User]: ...

    async def find_by_nick_name(self, nick_name: str) -> Optional[User]: ...

    async def save(self, user: User) -> User: ...

    async def delete(self, user: User) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, plaintext: str) -> str: ...
