"""Actuator API — health, info, metrics, env + 탐색 인덱스."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from doc_actuator.domain.env import EnvReport
from doc_actuator.domain.info import InfoReport
from doc_actuator.domain.metrics import MetricsReport
from doc_actuator.services.actuator import StatusAggregator
from doc_actuator.services.deps import get_aggregator

router = APIRouter(prefix="/actuator", tags=["actuator"])

# _links 키 → 라우트 이름
_LINKS = {
    "self": "actuator_index",
    "health": "actuator_health",
    "info": "actuator_info",
    "metrics": "actuator_metrics",
    "env": "actuator_env",
}


@router.get("", name="actuator_index")
def actuator_index(request: Request) -> dict:
    """요청과 같은 scheme/host의 절대 URL 링크 목록."""
    return {"_links": {key: {"href": str(request.url_for(route))} for key, route in _LINKS.items()}}


@router.get("/health", name="actuator_health")
def actuator_health(aggregator: StatusAggregator = Depends(get_aggregator)) -> JSONResponse:
    """UP이면 200, DOWN이면 503."""
    report = aggregator.get_health()
    return JSONResponse(
        status_code=report.http_status,
        content=report.model_dump(mode="json", by_alias=True),
    )


@router.get("/info", name="actuator_info")
def actuator_info(aggregator: StatusAggregator = Depends(get_aggregator)) -> InfoReport:
    return aggregator.get_info()


@router.get("/metrics", name="actuator_metrics")
def actuator_metrics(aggregator: StatusAggregator = Depends(get_aggregator)) -> MetricsReport:
    return aggregator.get_metrics()


@router.get("/env", name="actuator_env")
def actuator_env(aggregator: StatusAggregator = Depends(get_aggregator)) -> EnvReport:
    return aggregator.get_env()
