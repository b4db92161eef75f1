"""통합 설정 모델 — Pydantic Settings 기반.

모든 설정값은 환경 변수로 주입. 우선순위:
  1. 환경 변수 (docker-compose env, .env)
  2. Pydantic Settings 기본값
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class ServerConfig(BaseSettings):
    """HTTP 리스너 설정 (prefix 없음: PORT, HOST)."""

    port: int = 3000
    host: str = "0.0.0.0"

    @property
    def port_from_env(self) -> bool:
        """PORT 환경 변수로 지정되었는지 여부."""
        return "port" in self.model_fields_set


class DocsConfig(BaseSettings):
    """마크다운 문서 디렉터리 설정."""

    dir: str = "."

    model_config = {"env_prefix": "DOCS_"}


class GitConfig(BaseSettings):
    """버전 관리 메타데이터 설정."""

    info_path: str = "git-info.json"  # 빌드 시 미리 생성된 메타데이터 파일
    timeout_seconds: float = 5.0
    executable: str = "git"

    model_config = {"env_prefix": "GIT_"}


class HealthConfig(BaseSettings):
    """헬스 체크 임계값."""

    memory_threshold_pct: float = 90.0

    model_config = {"env_prefix": "HEALTH_"}


class AppConfig(BaseSettings):
    """최상위 설정 — 서브 설정 객체를 조합.

    Usage:
        from doc_actuator.domain.config import get_config
        config = get_config()
        print(config.server.port)
    """

    name: str = "doc-actuator"
    version: str = "1.0.0"
    description: str = "Markdown documentation server with actuator endpoints"
    env: str = Field(default="default", description="콤마 구분 프로파일 (예: dev,local)")
    log_level: str = "INFO"
    json_logs: bool = True

    server: ServerConfig = Field(default_factory=ServerConfig)
    docs: DocsConfig = Field(default_factory=DocsConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    health: HealthConfig = Field(default_factory=HealthConfig)

    model_config = {"env_prefix": "APP_"}

    @property
    def profiles(self) -> list[str]:
        return [p.strip() for p in self.env.split(",") if p.strip()]


@lru_cache
def get_config() -> AppConfig:
    """싱글턴 설정 인스턴스.

    프로세스 내에서 한 번만 환경 변수를 읽고 캐싱.
    테스트에서는 get_config.cache_clear()로 초기화.
    """
    return AppConfig()
