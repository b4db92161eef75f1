"""doc-actuator 웹 앱 — 마크다운 문서 + actuator 엔드포인트.

- /actuator/*  : health / info / metrics / env
- /dashboard   : 상태 요약 HTML
- /            : 문서 목록
- /{doc_name}  : <doc_name>.md 렌더링 (catch-all)
"""

from fastapi import APIRouter, FastAPI

from doc_actuator.domain.config import AppConfig
from doc_actuator.services.base import create_app

from .routers import actuator, pages

# 등록 순서 = 매칭 우선순위. 문서 catch-all(/{doc_name})은 반드시 마지막.
ROUTERS: tuple[APIRouter, ...] = (
    actuator.router,
    pages.router,
    pages.documents_router,
)


def build_app(config: AppConfig | None = None) -> FastAPI:
    app = create_app(config)
    for router in ROUTERS:
        app.include_router(router)
    return app


app = build_app()
