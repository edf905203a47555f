from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field

from devmatching.models.base import BaseModel


class User(BaseModel, table=True):
    """
    사용자 정보를 저장하는 테이블
    - username, nick_name은 유니크 인덱스로 중복을 막는다 (서비스 사전 검사의 최종 보루)
    - 비밀번호는 bcrypt 해시로만 저장
    """

    __tablename__ = "users"  # ✅ SQL 예약어 충돌 방지

    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        description="사용자 고유 ID",
        sa_column_kwargs={"autoincrement": True}
    )

    username: str = Field(
        max_length=50,
        nullable=False,
        unique=True,
        index=True,
        description="로그인 아이디 (변경 불가)"
    )

    password: str = Field(
        max_length=255,
        nullable=False,
        description="bcrypt로 해시된 비밀번호"
    )

    nick_name: str = Field(
        max_length=50,
        nullable=False,
        unique=True,
        index=True,
        description="닉네임 (표시용 이름)"
    )

    school_name: str = Field(
        max_length=100,
        nullable=False,
        description="학교명"
    )

    github_url: Optional[str] = Field(
        default=None,
        max_length=255,
        description="GitHub 주소"
    )

    introduce: Optional[str] = Field(
        default=None,
        sa_type=Text,
        description="자기소개"
    )

    def update(
        self,
        nick_name: str,
        school_name: str,
        github_url: Optional[str],
        introduce: Optional[str],
    ) -> None:
        """
        변경 가능한 네 필드만 갱신합니다. (username, password는 건드리지 않음)
        """
        self.nick_name = nick_name
        self.school_name = school_name
        self.github_url = github_url
        self.introduce = introduce

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', nick_name='{self.nick_name}')>"
