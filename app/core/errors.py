# ./app/core/errors.py
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

__all__ = [
    "StoreError",
    "ValidationError",
    "DuplicateNameError",
    "NotFoundError",
    "register_exception_handlers",
]


# =============================================================================
# Domain errors
# =============================================================================
class StoreError(Exception):
    """스토어 연산 실패의 공통 부모."""

    code = "STORE_ERROR"
    status_code = 400


class ValidationError(StoreError, ValueError):
    """필드 값이 규칙을 어김 (이름 길이, progress 범위 등)."""

    code = "INVALID_INPUT"
    status_code = 422


class DuplicateNameError(StoreError):
    """같은 이름의 프로젝트가 이미 존재."""

    code = "DUPLICATE_NAME"
    status_code = 409

    def __init__(self, name: str) -> None:
        super().__init__(f'A project with the name "{name}" already exists')
        self.name = name


class NotFoundError(StoreError, LookupError):
    """존재해야 하는 대상(project/todo)이 없음."""

    code = "NOT_FOUND"
    status_code = 404


# =============================================================================
# HTTP mapping
# =============================================================================
def _build_problem_response(
    *,
    status_code: int,
    code: str,
    message: str,
    detail: Any | None = None,
) -> JSONResponse:
    """애플리케이션 공통 에러 응답 포맷 생성."""
    payload: dict[str, Any] = {
        "code": code,
        "message": message,
    }
    if detail is not None:
        payload["detail"] = detail

    return JSONResponse(
        status_code=status_code,
        content=payload,
        headers={
            "Content-Type": "application/problem+json",
        },
    )


def _convert_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """FastAPI RequestValidationError → 단순화된 에러 리스트로 변환."""
    return [
        {
            "loc": e.get("loc"),
            "msg": e.get("msg"),
            "type": e.get("type"),
        }
        for e in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """
    FastAPI 앱 전역 예외 핸들러 등록.

    - StoreError: 도메인 에러 (422 / 409 / 404)
    - RequestValidationError: 입력 검증 실패(422)
    - HTTPException / StarletteHTTPException: 일반 HTTP 에러
    - Exception: 그 외 모든 예외(500)
    """

    @app.exception_handler(StoreError)
    async def store_exception_handler(
        request: Request,
        exc: StoreError,
    ) -> JSONResponse:
        logger.info(
            "Store error: {} {} -> {} ({})",
            request.method,
            request.url.path,
            exc.code,
            exc,
        )
        return _build_problem_response(
            status_code=exc.status_code,
            code=exc.code,
            message=str(exc),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """요청 바디/쿼리/패스 파라미터 검증 실패 핸들러."""
        errors = _convert_validation_errors(exc)

        logger.info(
            "Request validation failed: {} {} ({} errors)",
            request.method,
            request.url.path,
            len(errors),
        )

        return _build_problem_response(
            status_code=422,
            code="INVALID_INPUT",
            message="입력 검증 실패",
            detail=errors,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        logger.warning(
            "HTTPException: {} {} -> {} ({})",
            request.method,
            request.url.path,
            exc.status_code,
            exc.detail,
        )

        return _build_problem_response(
            status_code=exc.status_code,
            code="NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR",
            message=str(exc.detail) if exc.detail else "HTTP error",
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """최상위 핸들러: 예상치 못한 모든 예외를 500으로 포장."""
        logger.opt(exception=exc).error(
            "Unhandled exception: {} {}",
            request.method,
            request.url.path,
        )

        return _build_problem_response(
            status_code=500,
            code="INTERNAL_SERVER_ERROR",
            message="알 수 없는 오류가 발생했습니다.",
        )
