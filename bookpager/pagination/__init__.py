"""Pagination of cleaned text into numbered reader pages.

Responsibilities:
    - Character-based fixed-size chunking
    - Sequential page numbering with gap-preserving length filter
    - Optional section splitting (legacy chapter-pinned layout)
"""

from bookpager.pagination.paginator import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MIN_LENGTH,
    chunk_text,
    paginate,
)
from bookpager.pagination.splitters import (
    MarkerSectionSplitter,
    Section,
    SectionSplitter,
    WholeDocumentSplitter,
    paginate_sections,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_MIN_LENGTH",
    "MarkerSectionSplitter",
    "Section",
    "SectionSplitter",
    "WholeDocumentSplitter",
    "chunk_text",
    "paginate",
    "paginate_sections",
]
