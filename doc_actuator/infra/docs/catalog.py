"""문서 카탈로그 — docs 디렉터리의 *.md 파일 탐색/조회."""

import logging
import re
from pathlib import Path

from doc_actuator.domain.docs import DocEntry

logger = logging.getLogger(__name__)

# 디렉터리 구분자/상위 경로 없이 파일명 한 단계만 허용
_DOC_NAME = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]*$")
_HEADING = re.compile(r"^#\s+(.+?)\s*#*\s*$")


def list_documents(docs_dir: str | Path) -> list[DocEntry]:
    """docs_dir 바로 아래 *.md 파일 목록 (이름순)."""
    base = Path(docs_dir)
    if not base.is_dir():
        logger.warning("Docs directory %s does not exist", base)
        return []

    entries = []
    for path in sorted(base.glob("*.md")):
        if not path.is_file():
            continue
        entries.append(DocEntry(name=path.stem, filename=path.name, title=_read_title(path)))
    return entries


def find_document(docs_dir: str | Path, name: str) -> Path | None:
    """/{name} 요청을 <name>.md 경로로 해석. 없거나 허용되지 않는 이름이면 None."""
    if not _DOC_NAME.match(name) or ".." in name:
        return None
    if name.endswith(".md"):
        name = name[:-3]
    path = Path(docs_dir) / f"{name}.md"
    return path if path.is_file() else None


def read_document(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _read_title(path: Path) -> str:
    """첫 번째 '# ' 헤딩, 없으면 파일 stem."""
    try:
        with path.open(encoding="utf-8") as f:
            for line in f:
                m = _HEADING.match(line.strip())
                if m:
                    return m.group(1)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read title from %s: %s", path, e)
    return path.stem
