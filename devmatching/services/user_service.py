import logging

from devmatching.core.exceptions import DuplicateError, InvalidAccessError
from devmatching.models.user import User
from devmatching.schemas import CreateUserRequest, UpdateUserRequest, UserResponse
from devmatching.services.protocols import PasswordHasher, UserStore

logger = logging.getLogger(__name__)


def check_owner(target_id: int, acting_user: User) -> None:
    """
    요청 대상 ID가 인증된 사용자 본인의 ID인지 확인합니다. (본인만 접근 가능)
    """
    if target_id != acting_user.id:
        raise InvalidAccessError()


class UserService:
    """
    사용자 관련 비즈니스 로직을 담당하는 Service 클래스

    모든 검증을 먼저 수행하고, 저장소 변경 호출은 작업당 최대 한 번만 합니다.
    저장소/해시 오류는 감싸지 않고 그대로 전파합니다.
    """

    def __init__(self, user_store: UserStore, password_hasher: PasswordHasher):
        self.user_store = user_store
        self.password_hasher = password_hasher

    async def create_user(self, request: CreateUserRequest) -> UserResponse:
        """
        새로운 사용자를 생성합니다.

        Args:
            request: 사용자 생성 요청 데이터 (username, password, nick_name, school_name)

        Returns:
            생성된 사용자 응답 (비밀번호 제외)

        Raises:
            DuplicateError: username 또는 nick_name이 이미 사용 중인 경우
        """
        if await self.user_store.find_by_username(request.username):
            logger.warning(f"username 중복 생성 시도: {request.username}")
            raise DuplicateError("username", request.username)

        if await self.user_store.find_by_nick_name(request.nick_name):
            logger.warning(f"nick_name 중복 생성 시도: {request.nick_name}")
            raise DuplicateError("nick_name", request.nick_name)

        password_hash = self.password_hasher.hash(request.password)
        user = await self.user_store.save(request.to_entity(password_hash))

        logger.info(f"사용자 생성 서비스 완료: id={user.id}")
        return UserResponse.of(user)

    async def get_user(self, target_id: int, acting_user: User) -> UserResponse:
        """
        본인 정보를 조회합니다.
        """
        self._check_owner(target_id, acting_user)
        return UserResponse.of(acting_user)

    async def update_user(
        self, request: UpdateUserRequest, target_id: int, acting_user: User
    ) -> UserResponse:
        """
        본인 정보를 수정합니다. (nick_name, school_name, github_url, introduce)

        nick_name 중복 검사는 본인 레코드를 제외합니다.
        """
        self._check_owner(target_id, acting_user)

        existing_user = await self.user_store.find_by_nick_name(request.nick_name)
        if existing_user and existing_user.id != acting_user.id:
            logger.warning(f"nick_name 중복 수정 시도: user_id={acting_user.id}, nick_name={request.nick_name}")
            raise DuplicateError("nick_name", request.nick_name)

        acting_user.update(
            nick_name=request.nick_name,
            school_name=request.school_name,
            github_url=request.github_url,
            introduce=request.introduce,
        )
        user = await self.user_store.save(acting_user)

        logger.info(f"사용자 수정 서비스 완료: id={user.id}")
        return UserResponse.of(user)

    async def delete_user(self, target_id: int, acting_user: User) -> None:
        """
        본인 계정을 삭제합니다.
        """
        self._check_owner(target_id, acting_user)
        await self.user_store.delete(acting_user)
        logger.info(f"사용자 삭제 서비스 완료: id={acting_user.id}")

    @staticmethod
    def _check_owner(target_id: int, acting_user: User) -> None:
        try:
            check_owner(target_id, acting_user)
        except InvalidAccessError:
            logger.warning(f"타인 정보 접근 시도: target_id={target_id}, user_id={acting_user.id}")
            raise
