"""FastAPI Depends 기반 DI — app.state에 보관된 객체 조회.

Usage:
    from doc_actuator.services.deps import get_aggregator

    @router.get("/health")
    def health(aggregator: StatusAggregator = Depends(get_aggregator)):
        ...
"""

from pathlib import Path

from fastapi import Request

from doc_actuator.domain.context import ServerContext
from doc_actuator.services.actuator import StatusAggregator


def get_aggregator(request: Request) -> StatusAggregator:
    return request.app.state.aggregator


def get_server_context(request: Request) -> ServerContext:
    return request.app.state.context


def get_docs_dir(request: Request) -> Path:
    """마크다운 문서 디렉터리."""
    return request.app.state.docs_dir
