"""프로세스 엔트리포인트 — 설정 로드, 로깅 설정, uvicorn 실행.

Usage:
    doc-actuator
    PORT=8080 DOCS_DIR=./docs doc-actuator
"""

import uvicorn
from dotenv import load_dotenv

from doc_actuator.domain.config import get_config
from doc_actuator.infra.observability import setup_logging


def main() -> None:
    load_dotenv()
    config = get_config()
    setup_logging(config.name, log_level=config.log_level, json_output=config.json_logs)

    # load_dotenv 이후 import: app 모듈은 import 시점에 get_config()를 캐싱한다
    from doc_actuator.services.web.app import build_app

    uvicorn.run(
        build_app(config),
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
