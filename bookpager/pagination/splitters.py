"""Section splitting strategies applied before pagination.

A splitter turns cleaned text into sections, each paginated independently
from its own start page. The canonical strategy keeps the whole document as
one section starting at page 1. ``MarkerSectionSplitter`` reproduces the
legacy layout where front matter is paginated from page 1 and the first
chapter is pinned to a fixed page number.
"""

import logging
import re
from collections.abc import Iterable
from typing import NamedTuple, Protocol

from bookpager.models.schemas import Page
from bookpager.pagination.paginator import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MIN_LENGTH,
    chunk_text,
    paginate,
)

logger = logging.getLogger(__name__)

DEFAULT_CHAPTER_MARKER = r"CHAPTER I|Down the Rabbit-Hole"
DEFAULT_CHAPTER_PREFIX = "CHAPTER I"
DEFAULT_CHAPTER_START_PAGE = 8


class Section(NamedTuple):
    """A contiguous run of text and the page number its first chunk gets."""

    text: str
    start_page: int


class SectionSplitter(Protocol):
    """Protocol for section splitting strategies."""

    def split(self, text: str) -> list[Section]:
        """Split cleaned text into sections.

        Args:
            text: Cleaned document text.

        Returns:
            Sections in document order.
        """
        ...


class WholeDocumentSplitter:
    """Paginates the whole document uniformly from page 1."""

    def split(self, text: str) -> list[Section]:
        return [Section(text=text, start_page=1)]


class MarkerSectionSplitter:
    """Legacy front matter / main content split at a chapter marker.

    Text before the first marker match is front matter, paginated from
    page 1. The marker itself is replaced by ``chapter_prefix`` and the
    rest is paginated from ``chapter_start_page`` regardless of how many
    front matter pages were produced. Without a marker match, the whole
    text is treated as main content.
    """

    def __init__(
        self,
        marker: str = DEFAULT_CHAPTER_MARKER,
        chapter_prefix: str = DEFAULT_CHAPTER_PREFIX,
        chapter_start_page: int = DEFAULT_CHAPTER_START_PAGE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if chapter_start_page < 1:
            raise ValueError(f"chapter_start_page must be at least 1, got {chapter_start_page}")
        self._marker = re.compile(marker)
        self._chapter_prefix = chapter_prefix
        self._chapter_start_page = chapter_start_page
        self._chunk_size = chunk_size

    def split(self, text: str) -> list[Section]:
        parts = self._marker.split(text, maxsplit=1)
        if len(parts) == 2:
            front_matter, chapter = parts[0], self._chapter_prefix + parts[1]
        else:
            front_matter, chapter = "", text

        sections: list[Section] = []
        if front_matter:
            front_chunks = len(chunk_text(front_matter, self._chunk_size))
            if front_chunks >= self._chapter_start_page:
                logger.warning(
                    f"Front matter spans {front_chunks} pages; page numbers from "
                    f"{self._chapter_start_page} onward will repeat"
                )
            sections.append(Section(text=front_matter, start_page=1))
        if chapter:
            sections.append(Section(text=chapter, start_page=self._chapter_start_page))
        return sections


def paginate_sections(
    sections: Iterable[Section],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> list[Page]:
    """Paginate each section from its own start page, in order."""
    pages: list[Page] = []
    for section in sections:
        pages.extend(paginate(section.text, chunk_size, min_length, start_page=section.start_page))
    return pages
