"""메트릭 모델 (/actuator/metrics)."""

from pydantic import BaseModel


class Measurement(BaseModel):
    """단일 메트릭 측정값."""

    value: float | int
    unit: str
    description: str
    formatted: str | None = None


class MetricsReport(BaseModel):
    """메트릭 이름 목록(보고 순서) + 이름별 측정값."""

    names: list[str] = []
    measurements: dict[str, Measurement] = {}

    def add(self, name: str, measurement: Measurement) -> None:
        if name not in self.measurements:
            self.names.append(name)
        self.measurements[name] = measurement
