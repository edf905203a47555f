import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from devmatching.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """
    사용자 데이터베이스 접근을 담당하는 Repository 클래스 (UserStore 구현체)

    DB 오류는 롤백 후 그대로 다시 던집니다.
    username / nick_name 유니크 제약 위반은 IntegrityError로 올라갑니다.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find_one(self, *criteria) -> Optional[User]:
        try:
            result = await self.db.execute(select(User).where(*criteria))
            return result.scalars().first()
        except SQLAlchemyError as e:
            # 읽기 쿼리에서는 rollback이 필수는 아니지만 일관성 위해 유지
            await self.db.rollback()
            logger.error(f"사용자 조회 오류: {e}")
            raise

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        ID로 사용자를 조회합니다.
        """
        return await self._find_one(User.id == user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        username으로 사용자를 조회합니다.
        """
        return await self._find_one(User.username == username)

    async def find_by_nick_name(self, nick_name: str) -> Optional[User]:
        """
        nick_name으로 사용자를 조회합니다.
        """
        return await self._find_one(User.nick_name == nick_name)

    async def save(self, user: User) -> User:
        """
        사용자를 저장합니다. 신규 사용자는 이 시점에 ID가 할당됩니다.

        Args:
            user: 저장할 사용자 객체 (신규 또는 세션에 로드된 객체)

        Returns:
            refresh된 사용자 객체
        """
        try:
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)

            logger.info(f"사용자 저장 완료: id={user.id}")
            return user

        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"사용자 저장 오류 (username={user.username}): {e}")
            raise

    async def delete(self, user: User) -> None:
        """
        사용자를 삭제합니다.
        """
        try:
            await self.db.delete(user)
            await self.db.commit()

            logger.info(f"사용자 삭제 완료: id={user.id}")

        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"사용자 삭제 오류 (user_id={user.id}): {e}")
            raise
