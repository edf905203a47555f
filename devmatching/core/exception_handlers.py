"""
전역 예외 핸들러 등록
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from devmatching.core.exceptions import AppException
from devmatching.schemas import ErrorResponse

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message, detail=exc.detail).model_dump(),
        headers=headers,
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    # 동시 요청이 서비스의 중복 검사를 함께 통과한 경우 유니크 인덱스가 막는다
    logger.warning(f"무결성 제약 위반: {exc.orig}")
    return JSONResponse(
        status_code=409,
        content=ErrorResponse(
            error="이미 존재하는 데이터입니다.",
            detail="username 또는 nick_name이 이미 사용 중입니다.",
        ).model_dump(),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 사용자 친화적인 에러 메시지 생성
    errors = exc.errors()
    error_messages = []

    for error in errors:
        field = error.get("loc", [])[-1] if error.get("loc") else "unknown"
        msg = error.get("msg", "")

        # 한글 메시지로 변환
        if "at least" in msg and "character" in msg:
            min_length = error.get("ctx", {}).get("min_length", "")
            error_messages.append(f"{field}는 최소 {min_length}자 이상으로 설정해주세요.")
        elif "missing" in msg.lower():
            error_messages.append(f"{field}는 필수 입력 항목입니다.")
        else:
            error_messages.append(f"{field}: {msg}")

    # 로그 출력
    for message in error_messages:
        logger.warning(message)

    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            error="요청 데이터가 올바르지 않습니다.",
            detail=" / ".join(error_messages),
        ).model_dump(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
