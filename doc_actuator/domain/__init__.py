"""doc-actuator 도메인 모델 — actuator 응답 계약의 Single Source of Truth.

Usage:
    from doc_actuator.domain import HealthReport, InfoReport, ServerContext
    from doc_actuator.domain.config import AppConfig
"""

# --- Types ---
from .types import CamelModel

# --- Enums ---
from .enums import HealthState, PropertyOrigin

# --- Context ---
from .context import ServerContext

# --- Health ---
from .health import ComponentHealth, HealthReport, LivenessStatus

# --- Info ---
from .info import (
    GIT_UNAVAILABLE_ERROR,
    AppInfo,
    BuildInfo,
    GitAuthor,
    GitCommit,
    GitInfo,
    GitUnavailable,
    InfoReport,
)

# --- Metrics ---
from .metrics import Measurement, MetricsReport

# --- Env ---
from .env import EnvReport, PropertySource, PropertyValue

# --- Docs ---
from .docs import DocEntry

__all__ = [
    # Types
    "CamelModel",
    # Enums
    "HealthState",
    "PropertyOrigin",
    # Context
    "ServerContext",
    # Health
    "ComponentHealth",
    "HealthReport",
    "LivenessStatus",
    # Info
    "GIT_UNAVAILABLE_ERROR",
    "AppInfo",
    "BuildInfo",
    "GitAuthor",
    "GitCommit",
    "GitInfo",
    "GitUnavailable",
    "InfoReport",
    # Metrics
    "Measurement",
    "MetricsReport",
    # Env
    "EnvReport",
    "PropertySource",
    "PropertyValue",
    # Docs
    "DocEntry",
]
