"""Extraction capability used by the pagination pipeline.

The pipeline depends only on the ``Extractor`` protocol so it can run on
synthetic text in tests; ``PdfExtractor`` is the pypdf-backed default.
"""

import logging
from pathlib import Path
from typing import Protocol

from bookpager.models.schemas import ExtractedDocument
from bookpager.parsing.pdf_parser import MAX_FILE_SIZE, ExtractionError, parse_pdf

logger = logging.getLogger(__name__)


class Extractor(Protocol):
    """Protocol for document text extractors."""

    def extract(self, path: str | Path) -> ExtractedDocument:
        """Extract text and metadata from the document at ``path``.

        Raises:
            ExtractionError: If the document cannot be read or parsed.
        """
        ...


class PdfExtractor:
    """Reads a PDF from disk and extracts it with pypdf."""

    def __init__(self, max_file_size: int = MAX_FILE_SIZE) -> None:
        self._max_file_size = max_file_size

    def extract(self, path: str | Path) -> ExtractedDocument:
        pdf_path = Path(path)
        if not pdf_path.exists():
            raise ExtractionError(f"PDF file not found: {pdf_path}")
        if not pdf_path.is_file():
            raise ExtractionError(f"Path is not a file: {pdf_path}")

        try:
            content = pdf_path.read_bytes()
        except OSError as e:
            raise ExtractionError(f"Failed to read {pdf_path}: {e}") from e

        logger.info(f"Extracting text from {pdf_path} ({len(content)} bytes)")
        return parse_pdf(content, max_file_size=self._max_file_size)
