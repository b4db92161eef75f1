"""FastAPI 앱 팩토리 — 공통 lifespan, 에러 핸들러, liveness 엔드포인트.

Usage:
    from doc_actuator.services.base import create_app

    app = create_app(get_config())
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from doc_actuator.domain.config import AppConfig, get_config
from doc_actuator.domain.context import ServerContext
from doc_actuator.domain.health import LivenessStatus
from doc_actuator.services.actuator import build_aggregator

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig | None = None,
    *,
    lifespan: Callable | None = None,
) -> FastAPI:
    """FastAPI 앱 생성.

    ServerContext(시작 시각, 앱 식별 정보)는 앱 생성 시 한 번 만들어
    app.state에 보관하고, 핸들러는 Depends로 꺼내 쓴다.

    Args:
        config: 앱 설정 (기본: get_config())
        lifespan: 커스텀 lifespan context manager (startup/shutdown)
    """
    if config is None:
        config = get_config()
    context = ServerContext.from_config(config)

    @asynccontextmanager
    async def wrapped_lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("[%s] Starting v%s on port %d", context.app_name, context.app_version, context.port)
        if lifespan:
            async with lifespan(app):
                yield
        else:
            yield
        logger.info("[%s] Shutting down", context.app_name)

    app = FastAPI(
        title=config.name,
        version=config.version,
        description=config.description,
        lifespan=wrapped_lifespan,
        # /docs, /redoc 경로는 마크다운 문서 이름으로 쓸 수 있도록 비활성화
        docs_url=None,
        redoc_url=None,
    )
    app.state.config = config
    app.state.context = context
    app.state.aggregator = build_aggregator(config, context)
    app.state.docs_dir = Path(config.docs.dir)

    # --- Error Handlers ---

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": exc.errors(), "message": "Validation error"},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)[:200], "message": "Internal server error"},
        )

    # --- Liveness ---

    @app.get("/health", name="liveness")
    def health() -> LivenessStatus:
        return LivenessStatus(app=context.app_name, version=context.app_version)

    return app
