"""Structured logging — structlog 기반 설정.

Usage:
    from doc_actuator.infra.observability.logging import setup_logging

    setup_logging(service_name="doc-actuator")
    logger = logging.getLogger(__name__)
    logger.info("git metadata loaded from %s", path)
"""

import logging
import sys

import structlog

# 서드파티 로거: 레벨과 무관하게 WARNING 이상만 출력
_NOISY_LOGGERS = ("MARKDOWN", "watchfiles")


def setup_logging(
    service_name: str = "doc-actuator",
    *,
    log_level: str = "INFO",
    json_output: bool = True,
) -> None:
    """전역 structlog + stdlib 로깅 설정.

    Args:
        service_name: 로그에 포함할 서비스 이름
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        json_output: True면 JSON 형식, False면 사람이 읽기 쉬운 형식
    """
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level_int,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # uvicorn 로거도 같은 포매터로 출력
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    root = logging.getLogger()
    for handler in root.handlers:
        handler.setFormatter(formatter)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level_int, logging.WARNING))

    structlog.contextvars.bind_contextvars(service=service_name)
