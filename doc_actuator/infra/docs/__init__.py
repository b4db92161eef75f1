from .catalog import find_document, list_documents, read_document
from .renderer import render_markdown

__all__ = ["list_documents", "find_document", "read_document", "render_markdown"]
