"""
Bale Access API

FastAPI 애플리케이션 진입점
창고 관리 애플리케이션의 권한 평가 및 라우트 가드 서비스
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import permissions_router, route_registry_router, warehouse_router
from src.auth.route_config import ROUTE_PERMISSIONS
from src.config import get_settings
from src.domain.exceptions import (
    AuthorizationError,
    BaleError,
    ValidationError,
)

# 로깅 설정
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format=settings.log_format,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    애플리케이션 라이프사이클 관리

    라우트 레지스트리와 역할 매핑은 읽기 전용이므로 시작 시 상태만 기록합니다.
    """
    logger.info("Starting Bale Access API...")
    logger.info(f"Route registry loaded: {len(ROUTE_PERMISSIONS)} routes")
    logger.info(
        f"Role permissions loaded: {sorted(settings.role_permissions)} "
        f"(default_role={settings.default_role})"
    )

    yield

    logger.info("Shutting down Bale Access API...")


# FastAPI 앱 생성
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="와일드카드 권한 매칭 기반 창고 라우트 가드 API",
    lifespan=lifespan,
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Role", "X-User-ID"],
)


# ============================================
# 글로벌 예외 핸들러
# ============================================


@app.exception_handler(AuthorizationError)
async def authorization_error_handler(
    request: Request, exc: AuthorizationError
) -> JSONResponse:
    """인가 실패 시 403 응답"""
    logger.info(f"Permission denied on {request.url.path}: {exc.permission}")
    return JSONResponse(
        status_code=403,
        content={"detail": {"message": exc.message, "code": exc.code}},
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """입력 검증 실패 시 400 응답"""
    return JSONResponse(
        status_code=400,
        content={"detail": {"message": exc.message, "code": exc.code}},
    )


@app.exception_handler(BaleError)
async def bale_error_handler(request: Request, exc: BaleError) -> JSONResponse:
    """기타 도메인 예외 시 500 응답"""
    settings = get_settings()
    if settings.is_production:
        logger.error(f"BaleError: {exc.code}")
    else:
        logger.error(f"BaleError: {exc.message}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": {"message": exc.message, "code": exc.code}},
    )


# 라우터 등록
app.include_router(permissions_router)
app.include_router(route_registry_router)
app.include_router(warehouse_router, prefix=settings.warehouse_route_prefix)


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
