# app\main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

# Config & Logger
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.fs import ensure_dirs
from app.core.logger import setup_logging
from app.core.state import get_roster, get_store

# Routers
from app.api.v1.api import api_router


# ==============================================================================
# 1. Lifespan (수명 주기 관리)
# ==============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    # [Startup]
    setup_logging()
    ensure_dirs()
    env = settings.APP_ENV
    logger.info(
        "Project Dashboard starting (env={}, projects={}, users={})",
        env,
        len(get_store()),
        len(get_roster()),
    )

    yield

    # [Shutdown] 인메모리 상태는 여기서 사라짐 (export로만 보존)
    logger.info("Project Dashboard shutting down")


# ==============================================================================
# 2. FastAPI App 초기화
# ==============================================================================
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

# ==============================================================================
# 3. Middleware (CORS)
# ==============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(o).rstrip("/") for o in settings.BACKEND_CORS_ORIGINS] or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# ==============================================================================
# 4. Router Registration
# ==============================================================================
app.include_router(api_router, prefix=settings.API_V1_STR)


# ==============================================================================
# 5. Root Endpoint
# ==============================================================================
@app.get("/", include_in_schema=False)
def root() -> Dict[str, Any]:
    """서버 상태 확인용 루트 엔드포인트"""
    return {
        "message": "Welcome to Project Dashboard API",
        "docs_url": "/docs",
        "status": "running",
    }


@app.get("/health", include_in_schema=False)
def health_check():
    """로드밸런서용 단순 헬스 체크"""
    return {"status": "ok"}
