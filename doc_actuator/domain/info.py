"""애플리케이션/빌드/Git 정보 모델 (/actuator/info)."""

from pydantic import ConfigDict

from .types import CamelModel

GIT_UNAVAILABLE_ERROR = "Git information not available"


class GitAuthor(CamelModel):
    model_config = ConfigDict(extra="allow")

    name: str
    email: str


class GitCommit(CamelModel):
    """커밋 식별 정보."""

    model_config = ConfigDict(extra="allow")

    hash: str
    short_hash: str
    message: str
    author: GitAuthor
    date: str  # ISO 8601 (git %cI)


class GitInfo(CamelModel):
    """정규화된 버전 관리 메타데이터.

    git-info.json의 추가 키(tag, buildNumber 등)는 그대로 보존된다.
    """

    model_config = ConfigDict(extra="allow")

    commit: GitCommit
    branch: str


class GitUnavailable(CamelModel):
    """메타데이터를 어떤 소스에서도 얻지 못한 경우 — 에러가 아닌 값으로 표현."""

    error: str = GIT_UNAVAILABLE_ERROR
    message: str


class AppInfo(CamelModel):
    name: str
    version: str
    description: str


class BuildInfo(CamelModel):
    time: str
    runtime_version: str


class InfoReport(CamelModel):
    app: AppInfo
    git: GitInfo | GitUnavailable
    build: BuildInfo
