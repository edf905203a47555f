# routers/auth.py
from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordRequestForm

from devmatching.models.user import User
from devmatching.schemas import TokenPair, TokenRefreshRequest, UserResponse
from devmatching.services.auth_service import AuthService
from devmatching.utils.dependencies import get_auth_service, get_current_user
from devmatching.utils.router_utils import get_router

router = get_router("auth")


# 폼 방식(OAuth2PasswordRequestForm) - Swagger Try it out에 잘 맞음
@router.post("/login", response_model=TokenPair)
async def login(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    access, refresh = await service.login(
        username=form_data.username,
        password=form_data.password,
    )
    return TokenPair(access_token=access, refresh_token=refresh)


@router.post("/refresh", response_model=TokenPair)
async def refresh(
    req: TokenRefreshRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    access, refresh = await service.refresh(req.refresh_token)
    return TokenPair(access_token=access, refresh_token=refresh)


@router.get("/me", response_model=UserResponse)
async def me(current_user: Annotated[User, Depends(get_current_user)]):
    return UserResponse.of(current_user)
