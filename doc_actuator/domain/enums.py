"""열거형 정의 — 시스템 전체에서 사용하는 상수값."""

from enum import StrEnum


class HealthState(StrEnum):
    """컴포넌트/전체 헬스 상태"""

    UP = "UP"
    DOWN = "DOWN"


class PropertyOrigin(StrEnum):
    """환경 프로퍼티 출처"""

    SYSTEM_ENVIRONMENT = "System Environment"
    PACKAGE_METADATA = "Package Metadata"
    ENVIRONMENT = "Environment"
    DEFAULT = "Default"
