"""Domain model unit tests — 계약 검증."""

import time
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from doc_actuator.domain import (
    GIT_UNAVAILABLE_ERROR,
    ComponentHealth,
    EnvReport,
    GitInfo,
    GitUnavailable,
    HealthReport,
    HealthState,
    Measurement,
    MetricsReport,
    PropertyOrigin,
    PropertySource,
    PropertyValue,
    ServerContext,
)
from doc_actuator.domain.config import AppConfig

_GIT_JSON = {
    "commit": {
        "hash": "3f2a9c1d8e7b6a5f4e3d2c1b0a9f8e7d6c5b4a39",
        "shortHash": "3f2a9c1",
        "message": "Add dashboard page",
        "author": {"name": "Dana Kim", "email": "dana@example.com"},
        "date": "2026-10-01T12:34:56+09:00",
    },
    "branch": "main",
}


# ─── HealthReport ────────────────────────────────────────────────


class TestHealthReport:
    def test_all_up(self):
        report = HealthReport.from_components(
            {
                "memory": ComponentHealth(status=HealthState.UP),
                "uptime": ComponentHealth(status=HealthState.UP),
            }
        )
        assert report.status == HealthState.UP
        assert report.http_status == 200

    def test_any_down(self):
        report = HealthReport.from_components(
            {
                "memory": ComponentHealth(status=HealthState.DOWN, details={"usedPercent": "95.00%"}),
                "uptime": ComponentHealth(status=HealthState.UP),
            }
        )
        assert report.status == HealthState.DOWN
        assert report.http_status == 503

    def test_inconsistent_status_rejected(self):
        with pytest.raises(ValidationError, match="status"):
            HealthReport(
                status=HealthState.UP,
                components={"memory": ComponentHealth(status=HealthState.DOWN)},
            )

    def test_json_shape(self):
        report = HealthReport.from_components({"uptime": ComponentHealth(status=HealthState.UP)})
        data = report.model_dump(mode="json", by_alias=True)
        assert data == {"status": "UP", "components": {"uptime": {"status": "UP", "details": {}}}}


# ─── Git ────────────────────────────────────────────────────────


class TestGitModels:
    def test_parse_camel_case(self):
        info = GitInfo.model_validate(_GIT_JSON)
        assert info.commit.short_hash == "3f2a9c1"
        assert info.commit.author.email == "dana@example.com"

    def test_dump_round_trips_wire_shape(self):
        info = GitInfo.model_validate(_GIT_JSON)
        assert info.model_dump(by_alias=True) == _GIT_JSON

    def test_missing_field_rejected(self):
        bad = {"branch": "main", "commit": {"hash": "abc"}}
        with pytest.raises(ValidationError):
            GitInfo.model_validate(bad)

    def test_unavailable_default_error(self):
        value = GitUnavailable(message="git executable not found")
        assert value.model_dump() == {"error": GIT_UNAVAILABLE_ERROR, "message": "git executable not found"}


# ─── Metrics ────────────────────────────────────────────────────


class TestMetricsReport:
    def test_add_preserves_order(self):
        report = MetricsReport()
        report.add("b", Measurement(value=1, unit="x", description="b"))
        report.add("a", Measurement(value=2, unit="x", description="a"))
        assert report.names == ["b", "a"]

    def test_add_same_name_replaces(self):
        report = MetricsReport()
        report.add("a", Measurement(value=1, unit="x", description="a"))
        report.add("a", Measurement(value=3, unit="x", description="a"))
        assert report.names == ["a"]
        assert report.measurements["a"].value == 3


# ─── Env ────────────────────────────────────────────────────────


class TestEnvReport:
    def test_camel_case_keys(self):
        report = EnvReport(
            active_profiles=["dev"],
            property_sources=[
                PropertySource(
                    name="systemEnvironment",
                    properties={"HOME": PropertyValue(value="/root", origin=PropertyOrigin.SYSTEM_ENVIRONMENT)},
                )
            ],
        )
        data = report.model_dump(mode="json", by_alias=True)
        assert data["activeProfiles"] == ["dev"]
        assert data["propertySources"][0]["properties"]["HOME"] == {
            "value": "/root",
            "origin": "System Environment",
        }


# ─── ServerContext ──────────────────────────────────────────────


class TestServerContext:
    def test_from_config(self):
        config = AppConfig(name="handbook", version="2.0.0", env="dev,local")
        ctx = ServerContext.from_config(config)
        assert ctx.app_name == "handbook"
        assert ctx.app_version == "2.0.0"
        assert ctx.profiles == ("dev", "local")
        assert ctx.started_at.tzinfo is not None

    def test_frozen(self):
        ctx = ServerContext(
            started_at=datetime(2026, 10, 1, tzinfo=UTC),
            started_monotonic=time.monotonic(),
            app_name="a",
            app_version="1",
            app_description="d",
            port=3000,
        )
        with pytest.raises(ValidationError):
            ctx.port = 8080

    def test_uptime_positive(self):
        ctx = ServerContext(
            started_at=datetime(2026, 10, 1, tzinfo=UTC),
            started_monotonic=time.monotonic() - 10,
            app_name="a",
            app_version="1",
            app_description="d",
            port=3000,
        )
        assert ctx.uptime_seconds() >= 10
