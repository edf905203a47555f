# routers/user.py
from typing import Annotated

from fastapi import Depends, Response, status

from devmatching.models.user import User
from devmatching.schemas import (
    CreateUserRequest,
    ErrorResponse,
    UpdateUserRequest,
    UserResponse,
)
from devmatching.services.user_service import UserService
from devmatching.utils.dependencies import get_current_user, get_user_service
from devmatching.utils.router_utils import get_router

# 라우터 생성
router = get_router("user")


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="사용자 생성",
    description="새로운 사용자를 생성합니다 (회원가입).",
    responses={
        201: {"model": UserResponse, "description": "사용자 생성 성공"},
        409: {"model": ErrorResponse, "description": "이미 사용 중인 username 또는 nick_name"},
    },
)
async def create_user(
    request: CreateUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """
    새로운 사용자를 생성합니다.

    - **username**: 로그인 아이디 (중복 불가)
    - **password**: 비밀번호
    - **nick_name**: 닉네임 (중복 불가)
    - **school_name**: 학교명
    """
    return await service.create_user(request)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="사용자 조회",
    description="본인 정보를 조회합니다 (JWT 필요).",
    responses={
        401: {"model": ErrorResponse, "description": "인증 실패 또는 토큰 없음"},
        403: {"model": ErrorResponse, "description": "본인이 아닌 사용자 조회"},
    },
)
async def get_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    return await service.get_user(user_id, current_user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="사용자 정보 수정",
    description="본인 정보를 수정합니다 (JWT 필요).",
    responses={
        401: {"model": ErrorResponse, "description": "인증 실패 또는 토큰 없음"},
        403: {"model": ErrorResponse, "description": "본인이 아닌 사용자 수정"},
        409: {"model": ErrorResponse, "description": "이미 사용 중인 nick_name"},
    },
)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """
    본인 정보를 수정합니다 (JWT 필요).

    - **nick_name**: 새 닉네임 (본인의 기존 닉네임 유지 가능)
    - **school_name**: 학교명
    - **github_url**: GitHub 주소 (선택사항)
    - **introduce**: 자기소개 (선택사항)
    """
    return await service.update_user(request, user_id, current_user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="사용자 삭제",
    description="본인 계정을 삭제합니다 (JWT 필요).",
    responses={
        401: {"model": ErrorResponse, "description": "인증 실패 또는 토큰 없음"},
        403: {"model": ErrorResponse, "description": "본인이 아닌 사용자 삭제"},
    },
)
async def delete_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    await service.delete_user(user_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
