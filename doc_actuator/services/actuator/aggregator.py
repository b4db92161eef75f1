"""StatusAggregator — 프로세스/OS/Git/환경 정보를 actuator 응답 계약으로 정규화.

모든 리포트는 요청마다 새로 계산 (캐시 없음). 어떤 메서드도 예외를 던지지 않으며,
Git 정보 부재는 GitUnavailable 값으로 표현한다.

Usage:
    aggregator = StatusAggregator(context, git_chain=build_default_chain(config.git))
    report = aggregator.get_health()
"""

import logging
import os
import platform
from collections.abc import Mapping

import psutil

from doc_actuator.domain.config import AppConfig
from doc_actuator.domain.context import ServerContext
from doc_actuator.domain.enums import HealthState, PropertyOrigin
from doc_actuator.domain.env import EnvReport, PropertySource, PropertyValue
from doc_actuator.domain.health import ComponentHealth, HealthReport
from doc_actuator.domain.info import AppInfo, BuildInfo, GitInfo, GitUnavailable, InfoReport
from doc_actuator.domain.metrics import Measurement, MetricsReport
from doc_actuator.infra.git import GitMetadataChain, build_default_chain

from .formatting import format_bytes, format_uptime
from .redaction import redact

logger = logging.getLogger(__name__)

DEFAULT_MEMORY_THRESHOLD_PCT = 90.0


class StatusAggregator:
    """actuator 리포트 생성기."""

    def __init__(
        self,
        context: ServerContext,
        *,
        git_chain: GitMetadataChain,
        memory_threshold_pct: float = DEFAULT_MEMORY_THRESHOLD_PCT,
        environ: Mapping[str, str] | None = None,
    ):
        self._context = context
        self._git_chain = git_chain
        self._memory_threshold_pct = memory_threshold_pct
        self._environ = environ

    # --- Health ---

    def get_health(self) -> HealthReport:
        vm = psutil.virtual_memory()
        used_pct = _memory_used_percent(vm.total, vm.available)
        uptime = self._context.uptime_seconds()
        rss = psutil.Process().memory_info().rss

        memory = ComponentHealth(
            status=HealthState.UP if used_pct < self._memory_threshold_pct else HealthState.DOWN,
            details={
                "total": format_bytes(vm.total),
                "free": format_bytes(vm.available),
                "usedPercent": f"{used_pct:.2f}%",
                "threshold": f"{self._memory_threshold_pct:g}%",
                "processRss": format_bytes(rss),
            },
        )
        uptime_component = ComponentHealth(
            status=HealthState.UP if uptime > 0 else HealthState.DOWN,
            details={
                "uptime": format_uptime(uptime),
                "startedAt": self._context.started_at.isoformat(),
            },
        )

        report = HealthReport.from_components({"memory": memory, "uptime": uptime_component})
        if report.status == HealthState.DOWN:
            logger.warning(
                "Health DOWN: memory used %.2f%% (threshold %g%%)", used_pct, self._memory_threshold_pct
            )
        return report

    # --- Info ---

    def get_info(self) -> InfoReport:
        return InfoReport(
            app=AppInfo(
                name=self._context.app_name,
                version=self._context.app_version,
                description=self._context.app_description,
            ),
            git=self.get_git_info(),
            build=BuildInfo(
                time=self._context.started_at.isoformat(),
                runtime_version=f"{platform.python_implementation()} {platform.python_version()}",
            ),
        )

    def get_git_info(self) -> GitInfo | GitUnavailable:
        return self._git_chain.resolve()

    # --- Metrics ---

    def get_metrics(self) -> MetricsReport:
        proc = psutil.Process()
        cpu = proc.cpu_times()
        mem = proc.memory_info()
        vm = psutil.virtual_memory()
        uptime = self._context.uptime_seconds()
        load_1, load_5, load_15 = psutil.getloadavg()

        report = MetricsReport()
        report.add(
            "process.uptime",
            Measurement(
                value=round(uptime, 3),
                unit="seconds",
                description="Process uptime",
                formatted=format_uptime(uptime),
            ),
        )
        report.add(
            "process.cpu.time",
            Measurement(
                value=round(cpu.user + cpu.system, 3),
                unit="seconds",
                description="Process CPU time (user + system)",
            ),
        )
        report.add(
            "system.cpu.count",
            Measurement(
                value=psutil.cpu_count(logical=True) or 0,
                unit="cores",
                description="Logical CPU cores",
            ),
        )
        for name, value in (("1m", load_1), ("5m", load_5), ("15m", load_15)):
            report.add(
                f"system.load.average.{name}",
                Measurement(value=round(value, 2), unit="load", description=f"System load average ({name})"),
            )

        _add_bytes(report, "process.memory.rss", mem.rss, "Resident set size")
        _add_bytes(report, "process.memory.vms", mem.vms, "Virtual memory size")
        try:
            uss = proc.memory_full_info().uss
        except psutil.AccessDenied:
            logger.debug("USS not readable for pid %s", proc.pid)
        else:
            _add_bytes(report, "process.memory.uss", uss, "Unique set size")
        _add_bytes(report, "system.memory.total", vm.total, "Total system memory")
        _add_bytes(report, "system.memory.free", vm.available, "Available system memory")
        return report

    # --- Env ---

    def get_env(self) -> EnvReport:
        environ = self._environ if self._environ is not None else os.environ

        system_env = PropertySource(
            name="systemEnvironment",
            properties={
                key: PropertyValue(value=redact(key, value), origin=PropertyOrigin.SYSTEM_ENVIRONMENT)
                for key, value in sorted(environ.items())
            },
        )

        port_origin = PropertyOrigin.ENVIRONMENT if self._context.port_from_env else PropertyOrigin.DEFAULT
        app_props = {
            "app.name": (self._context.app_name, PropertyOrigin.PACKAGE_METADATA),
            "app.version": (self._context.app_version, PropertyOrigin.PACKAGE_METADATA),
            "server.port": (str(self._context.port), port_origin),
        }
        app_config = PropertySource(
            name="applicationConfig",
            properties={
                key: PropertyValue(value=redact(key, value), origin=origin)
                for key, (value, origin) in sorted(app_props.items())
            },
        )

        return EnvReport(
            active_profiles=list(self._context.profiles),
            property_sources=[system_env, app_config],
        )


def build_aggregator(config: AppConfig, context: ServerContext) -> StatusAggregator:
    """설정 기반 StatusAggregator 생성."""
    return StatusAggregator(
        context,
        git_chain=build_default_chain(config.git),
        memory_threshold_pct=config.health.memory_threshold_pct,
    )


def _memory_used_percent(total: int, free: int) -> float:
    if total <= 0:
        return 0.0
    return (total - free) / total * 100


def _add_bytes(report: MetricsReport, name: str, value: int, description: str) -> None:
    report.add(
        name,
        Measurement(value=value, unit="bytes", description=description, formatted=format_bytes(value)),
    )
