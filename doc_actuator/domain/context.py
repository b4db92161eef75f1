"""ServerContext — 프로세스 시작 시 한 번 생성되는 불변 컨텍스트.

시작 시각과 앱 식별 정보를 담아 aggregator에 명시적으로 전달한다.
"""

import time
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict

from .config import AppConfig


class ServerContext(BaseModel):
    """서버 프로세스 컨텍스트."""

    model_config = ConfigDict(frozen=True)

    started_at: datetime
    started_monotonic: float
    app_name: str
    app_version: str
    app_description: str
    port: int
    port_from_env: bool = False
    profiles: tuple[str, ...] = ()

    @classmethod
    def from_config(cls, config: AppConfig) -> "ServerContext":
        return cls(
            started_at=datetime.now(UTC),
            started_monotonic=time.monotonic(),
            app_name=config.name,
            app_version=config.version,
            app_description=config.description,
            port=config.server.port,
            port_from_env=config.server.port_from_env,
            profiles=tuple(config.profiles),
        )

    def uptime_seconds(self) -> float:
        return time.monotonic() - self.started_monotonic
