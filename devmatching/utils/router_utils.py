from typing import List, Optional

from fastapi import APIRouter

from devmatching.core.config import settings


def join_prefix(base: str, resource: str) -> str:
    """
    "/devmatching/api/" + "/User/" -> "/devmatching/api/user"
    """
    resource = resource.strip("/").lower()
    if not resource:
        raise ValueError("router prefix must not be empty")
    return f"{base.rstrip('/')}/{resource}"


def get_router(resource: str, tags: Optional[List[str]] = None) -> APIRouter:
    """
    API_PREFIX 아래에 리소스 라우터를 만듭니다.

    tags를 생략하면 리소스 이름이 Swagger 태그가 됩니다.
    """
    full_prefix = join_prefix(settings.API_PREFIX, resource)
    return APIRouter(prefix=full_prefix, tags=tags or [full_prefix.rsplit("/", 1)[-1]])
