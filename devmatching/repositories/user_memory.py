import itertools
from threading import Lock
from typing import Dict, Optional

from devmatching.models.user import User


class UserMemoryRepository:
    """
    In-memory UserStore

    저장 시점의 필드 스냅샷을 보관하고, 조회할 때마다 새 User 객체를 만들어 반환합니다.
    ID는 1부터 증가하며 삭제 후에도 재사용하지 않습니다.
    """

    def __init__(self):
        self._rows: Dict[int, dict] = {}
        self._ids = itertools.count(1)
        self._lock = Lock()

    def _load(self, row: Optional[dict]) -> Optional[User]:
        return User(**row) if row is not None else None

    async def find_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._load(self._rows.get(user_id))

    async def find_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            row = next((r for r in self._rows.values() if r["username"] == username), None)
            return self._load(row)

    async def find_by_nick_name(self, nick_name: str) -> Optional[User]:
        with self._lock:
            row = next((r for r in self._rows.values() if r["nick_name"] == nick_name), None)
            return self._load(row)

    async def save(self, user: User) -> User:
        with self._lock:
            if user.id is None:
                user.id = next(self._ids)
            self._rows[user.id] = user.model_dump()
            return user

    async def delete(self, user: User) -> None:
        with self._lock:
            self._rows.pop(user.id, None)

    def count(self) -> int:
        with self._lock:
            return len(self._rows)
