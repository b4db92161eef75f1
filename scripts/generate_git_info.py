#!/usr/bin/env python3
"""빌드 시 git-info.json 생성 — 배포 산출물에 Git 메타데이터를 미리 포함.

작업 트리 히스토리가 없는 배포 환경에서는 서버가 이 파일을 우선 읽는다.

Usage:
    uv run python scripts/generate_git_info.py
    uv run python scripts/generate_git_info.py --output build/git-info.json --repo .
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from doc_actuator.domain.config import get_config
from doc_actuator.infra.git import LiveToolMetadataSource, MetadataUnavailable

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    config = get_config()
    parser = argparse.ArgumentParser(description="git-info.json 생성")
    parser.add_argument(
        "--output",
        default=config.git.info_path,
        help=f"출력 경로 (기본: {config.git.info_path})",
    )
    parser.add_argument(
        "--repo",
        default=".",
        help="Git 저장소 경로 (기본: 현재 디렉터리)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.git.timeout_seconds,
        help="git 호출 타임아웃 (초)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args(argv)

    source = LiveToolMetadataSource(
        executable=get_config().git.executable,
        timeout=args.timeout,
        cwd=args.repo,
    )
    try:
        info = source.fetch()
    except MetadataUnavailable as e:
        logger.error("Git metadata unavailable: %s", e)
        return 1

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(info.model_dump_json(by_alias=True, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote %s (%s @ %s)", output, info.commit.short_hash, info.branch)
    return 0


if __name__ == "__main__":
    sys.exit(main())
