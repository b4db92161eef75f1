"""HTML 페이지 — 문서 인덱스, 대시보드, 마크다운 문서 (Jinja2 템플릿)."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from doc_actuator.domain.context import ServerContext
from doc_actuator.domain.info import GitInfo
from doc_actuator.infra.docs import find_document, list_documents, read_document, render_markdown
from doc_actuator.services.actuator import StatusAggregator
from doc_actuator.services.deps import get_aggregator, get_docs_dir, get_server_context

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter(tags=["pages"])
documents_router = APIRouter(tags=["documents"])

# 고정 엔드포인트 이름: 같은 이름의 .md 파일이 있어도 문서로 해석하지 않음
RESERVED_NAMES = frozenset({"health", "actuator", "dashboard", "openapi.json"})


@router.get("/", response_class=HTMLResponse, name="index")
def index(
    request: Request,
    docs_dir: Path = Depends(get_docs_dir),
    context: ServerContext = Depends(get_server_context),
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"app_name": context.app_name, "docs": list_documents(docs_dir)},
    )


@router.get("/dashboard", response_class=HTMLResponse, name="dashboard")
def dashboard(
    request: Request,
    docs_dir: Path = Depends(get_docs_dir),
    context: ServerContext = Depends(get_server_context),
    aggregator: StatusAggregator = Depends(get_aggregator),
) -> HTMLResponse:
    git = aggregator.get_git_info()
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "app_name": context.app_name,
            "server": context,
            "health": aggregator.get_health(),
            "git": git,
            "git_available": isinstance(git, GitInfo),
            "docs": list_documents(docs_dir),
        },
    )


@documents_router.get("/{doc_name}", response_class=HTMLResponse, name="document")
def document(
    request: Request,
    doc_name: str,
    docs_dir: Path = Depends(get_docs_dir),
    context: ServerContext = Depends(get_server_context),
) -> HTMLResponse:
    """<doc_name>.md 렌더링. 없으면 404."""
    path = None if doc_name in RESERVED_NAMES else find_document(docs_dir, doc_name)
    if path is None:
        raise HTTPException(status_code=404, detail=f"Document '{doc_name}' not found")

    content = render_markdown(read_document(path))
    logger.debug("Rendered %s", path)
    return templates.TemplateResponse(
        request,
        "document.html",
        {"app_name": context.app_name, "doc_name": doc_name, "content": content},
    )
