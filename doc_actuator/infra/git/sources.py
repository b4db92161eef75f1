"""Git 메타데이터 소스 — 사전 생성 파일 → git CLI 순서의 전략 체인.

Usage:
    from doc_actuator.infra.git import build_default_chain

    chain = build_default_chain(config.git)
    info = chain.resolve()  # GitInfo | GitUnavailable, 예외 없음
"""

import json
import logging
import subprocess
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from doc_actuator.domain.config import GitConfig
from doc_actuator.domain.info import GitAuthor, GitCommit, GitInfo, GitUnavailable

logger = logging.getLogger(__name__)

# git log 필드 구분자 (NUL). 커밋 메시지는 여러 줄일 수 있으므로 마지막 필드.
_LOG_FORMAT = "%H%x00%h%x00%an%x00%ae%x00%cI%x00%B"


class MetadataUnavailable(Exception):
    """소스가 메타데이터를 제공할 수 없음."""


class MetadataSource(Protocol):
    """GitInfo 제공자. 실패 시 MetadataUnavailable을 던진다."""

    name: str

    def fetch(self) -> GitInfo: ...


class FileMetadataSource:
    """빌드 파이프라인이 미리 생성한 git-info.json 읽기."""

    name = "file"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch(self) -> GitInfo:
        if not self.path.is_file():
            raise MetadataUnavailable(f"{self.path} not found")
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return GitInfo.model_validate(raw)
        except (OSError, ValueError, ValidationError) as e:
            # 손상된 파일은 live 소스로 넘어가되 로그로 남긴다
            logger.warning("Invalid git metadata file %s, falling back: %s", self.path, e)
            raise MetadataUnavailable(f"{self.path} is not valid git metadata") from e


class LiveToolMetadataSource:
    """git CLI를 직접 호출 (타임아웃 적용)."""

    name = "git"

    def __init__(
        self,
        *,
        executable: str = "git",
        timeout: float = 5.0,
        cwd: str | Path | None = None,
    ):
        self.executable = executable
        self.timeout = timeout
        self.cwd = cwd

    def fetch(self) -> GitInfo:
        log_output = self._run("log", "-1", f"--format={_LOG_FORMAT}")
        parts = log_output.split("\x00", 5)
        if len(parts) != 6:
            raise MetadataUnavailable("Unexpected git log output")
        full_hash, short_hash, author_name, author_email, date, message = parts
        branch = self._run("rev-parse", "--abbrev-ref", "HEAD").strip()

        return GitInfo(
            commit=GitCommit(
                hash=full_hash.strip(),
                short_hash=short_hash.strip(),
                message=message.strip(),
                author=GitAuthor(name=author_name, email=author_email),
                date=date.strip(),
            ),
            branch=branch,
        )

    def _run(self, *args: str) -> str:
        try:
            result = subprocess.run(
                [self.executable, *args],
                cwd=self.cwd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise MetadataUnavailable(f"{self.executable} executable not found") from e
        except subprocess.TimeoutExpired as e:
            raise MetadataUnavailable(f"{self.executable} timed out after {self.timeout}s") from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit code {e.returncode}"
            raise MetadataUnavailable(f"{self.executable} {args[0]} failed: {detail}") from e
        except OSError as e:
            raise MetadataUnavailable(f"{self.executable} could not be run: {e}") from e
        return result.stdout


class GitMetadataChain:
    """소스를 순서대로 시도, 전부 실패하면 GitUnavailable 값 반환."""

    def __init__(self, sources: list[MetadataSource]):
        self.sources = sources

    def resolve(self) -> GitInfo | GitUnavailable:
        reasons: list[str] = []
        for source in self.sources:
            try:
                info = source.fetch()
            except MetadataUnavailable as e:
                reasons.append(str(e))
                continue
            except Exception as e:
                logger.warning("Git metadata source %s failed: %s", source.name, e)
                reasons.append(f"{source.name} source failed: {e}")
                continue
            logger.debug("Git metadata resolved from %s source", source.name)
            return info

        message = "; ".join(reasons) or "No metadata sources configured"
        logger.info("Git metadata unavailable: %s", message)
        return GitUnavailable(message=message)


def build_default_chain(config: GitConfig, *, cwd: str | Path | None = None) -> GitMetadataChain:
    """설정 기반 기본 체인 (file → git)."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    return GitMetadataChain(
        [
            FileMetadataSource(base / config.info_path),
            LiveToolMetadataSource(
                executable=config.executable,
                timeout=config.timeout_seconds,
                cwd=base,
            ),
        ]
    )
