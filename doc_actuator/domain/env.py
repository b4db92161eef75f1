"""환경 정보 모델 (/actuator/env)."""

from .enums import PropertyOrigin
from .types import CamelModel


class PropertyValue(CamelModel):
    value: str
    origin: PropertyOrigin


class PropertySource(CamelModel):
    """프로퍼티 그룹 (systemEnvironment, applicationConfig)."""

    name: str
    properties: dict[str, PropertyValue] = {}


class EnvReport(CamelModel):
    active_profiles: list[str] = []
    property_sources: list[PropertySource] = []
