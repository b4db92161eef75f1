"""마크다운 → HTML 렌더러 (Python-Markdown).

```mermaid 펜스 블록은 이스케이프 없이 <pre class="mermaid">로 통과시켜
클라이언트의 mermaid.js가 다이어그램으로 그리도록 한다.
"""

import re

import markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

_MERMAID_BLOCK = re.compile(
    r"^(?P<fence>`{3,}|~{3,})[ \t]*mermaid[ \t]*\n(?P<source>.*?)(?<=\n)(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


class MermaidPreprocessor(Preprocessor):
    """mermaid 블록을 htmlStash에 raw HTML로 보관."""

    def run(self, lines: list[str]) -> list[str]:
        text = "\n".join(lines)

        def _stash(match: re.Match[str]) -> str:
            source = match.group("source").rstrip("\n")
            placeholder = self.md.htmlStash.store(f'<pre class="mermaid">\n{source}\n</pre>')
            return f"\n\n{placeholder}\n\n"

        return _MERMAID_BLOCK.sub(_stash, text).split("\n")


class MermaidExtension(Extension):
    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # normalize_whitespace(30) 이후, fenced_code(25) 이전
        md.preprocessors.register(MermaidPreprocessor(md), "mermaid", 28)


def render_markdown(text: str) -> str:
    """마크다운 원문 → HTML 조각."""
    md = markdown.Markdown(
        extensions=[MermaidExtension(), "fenced_code", "tables", "toc", "sane_lists"],
        output_format="html",
    )
    return md.convert(text)
