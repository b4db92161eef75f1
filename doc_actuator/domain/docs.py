"""문서 목록 모델."""

from pydantic import BaseModel


class DocEntry(BaseModel):
    """docs 디렉터리의 마크다운 문서 하나."""

    name: str  # URL 경로 (/{name})
    filename: str
    title: str
