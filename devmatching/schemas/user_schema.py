from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from devmatching.models.user import User


class CreateUserRequest(BaseModel):
    """
    사용자 생성 요청 스키마
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "radar",
                "password": "securepassword123",
                "nick_name": "레이더",
                "school_name": "한국대학교",
            }
        }
    )

    username: str = Field(..., min_length=1, max_length=50, description="로그인 아이디")
    password: str = Field(..., min_length=1, description="비밀번호 (길이 제한 없음, 해시만 저장)")
    nick_name: str = Field(..., min_length=1, max_length=50, description="닉네임")
    school_name: str = Field(..., min_length=1, max_length=100, description="학교명")

    def to_entity(self, password_hash: str) -> User:
        """
        해시된 비밀번호로 User 엔티티를 만듭니다. (평문 비밀번호는 엔티티로 넘어가지 않음)
        """
        return User(
            username=self.username,
            password=password_hash,
            nick_name=self.nick_name,
            school_name=self.school_name,
        )


class UpdateUserRequest(BaseModel):
    """
    사용자 정보 수정 요청 스키마 (username, password는 수정 불가)
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "nick_name": "새닉네임",
                "school_name": "한국대학교",
                "github_url": "https://github.com/radar",
                "introduce": "백엔드 개발자입니다.",
            }
        }
    )

    nick_name: str = Field(..., min_length=1, max_length=50, description="닉네임")
    school_name: str = Field(..., min_length=1, max_length=100, description="학교명")
    github_url: Optional[str] = Field(None, max_length=255, description="GitHub 주소")
    introduce: Optional[str] = Field(None, description="자기소개")


class UserResponse(BaseModel):
    """
    사용자 정보 응답 스키마 (비밀번호 제외)
    """
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "username": "radar",
                "nick_name": "레이더",
                "school_name": "한국대학교",
                "github_url": "https://github.com/radar",
                "introduce": "백엔드 개발자입니다.",
            }
        },
    )

    id: int = Field(..., description="사용자 ID")
    username: str = Field(..., description="로그인 아이디")
    nick_name: str = Field(..., description="닉네임")
    school_name: str = Field(..., description="학교명")
    github_url: Optional[str] = Field(None, description="GitHub 주소")
    introduce: Optional[str] = Field(None, description="자기소개")

    @classmethod
    def of(cls, user: User) -> "UserResponse":
        return cls.model_validate(user)


class ErrorResponse(BaseModel):
    """
    에러 응답 스키마
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "이미 사용 중인 nick_name입니다.",
                "detail": "nick_name '레이더'은(는) 이미 사용 중입니다.",
            }
        }
    )

    error: str = Field(..., description="에러 메시지")
    detail: Optional[str] = Field(None, description="상세 에러 정보")
