"""
Main.py works as a main function for the application
Api app starts from here
"""

from contextlib import asynccontextmanager
from logging import getLogger
from logging.config import dictConfig

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devmatching.core.config import settings
from devmatching.core.exception_handlers import setup_exception_handlers
from devmatching.database import init_db
from devmatching.routers import auth_router, user_router
from devmatching.utils.logger import build_logging_config

# ----------------------------------------------------------------------
# 로거 설정
# ----------------------------------------------------------------------
dictConfig(build_logging_config(settings.LOG_LEVEL))

logger = getLogger(__name__)


# ----------------------------------------------------------------------
# Lifespan: 앱 시작 시 DB 초기화
# ----------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info(f"DevMatching API 시작 (phase={settings.DEPLOY_PHASE})")
    yield
    logger.info("DevMatching API 종료")


# ----------------------------------------------------------------------
# FastAPI 애플리케이션 생성
# ----------------------------------------------------------------------
app = FastAPI(
    title="DevMatching",
    description="FastAPI 기반 DevMatching 사용자 관리 API",
    version="1.0.0",
    docs_url=(
        f"{settings.API_PREFIX}/docs"
        if settings.DEPLOY_PHASE in ("dev", "local")
        else None
    ),
    lifespan=lifespan,
)

# ----------------------------------------------------------------------
# 예외 핸들러
# ----------------------------------------------------------------------
setup_exception_handlers(app)

# ----------------------------------------------------------------------
# CORS 설정
# ----------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ----------------------------------------------------------------------
# 라우터 등록
# ----------------------------------------------------------------------
app.include_router(auth_router)  # JWT 관련 라우터 등록
app.include_router(user_router)  # 사용자 CRUD 라우터 등록


@app.get("/")
async def root():
    return {"message": "Hello, DevMatching!"}
