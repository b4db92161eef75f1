"""헬스 체크 모델."""

from typing import Self

from pydantic import BaseModel, model_validator

from .enums import HealthState


class ComponentHealth(BaseModel):
    """개별 컴포넌트 상태."""

    status: HealthState
    details: dict[str, str] = {}

    @property
    def is_up(self) -> bool:
        return self.status == HealthState.UP


class HealthReport(BaseModel):
    """전체 헬스 상태 — 모든 컴포넌트가 UP일 때만 UP."""

    status: HealthState
    components: dict[str, ComponentHealth] = {}

    @model_validator(mode="after")
    def check_status_vs_components(self) -> Self:
        expected = _aggregate(self.components)
        if self.status != expected:
            raise ValueError(f"status({self.status}) != aggregated components({expected})")
        return self

    @classmethod
    def from_components(cls, components: dict[str, ComponentHealth]) -> "HealthReport":
        return cls(status=_aggregate(components), components=components)

    @property
    def http_status(self) -> int:
        return 200 if self.status == HealthState.UP else 503


def _aggregate(components: dict[str, ComponentHealth]) -> HealthState:
    if all(c.is_up for c in components.values()):
        return HealthState.UP
    return HealthState.DOWN


class LivenessStatus(BaseModel):
    """경량 liveness 응답 (/health)."""

    status: str = "ok"
    app: str
    version: str
