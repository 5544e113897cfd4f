"""PDF parsing module using pypdf.

Extracts text content and metadata from PDF files with validation.
"""

import io
import logging

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from bookpager.models.schemas import ExtractedDocument

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"
PAGE_SEPARATOR = "\n\n"

_METADATA_FIELDS = {
    "title": "/Title",
    "author": "/Author",
    "subject": "/Subject",
    "creator": "/Creator",
    "producer": "/Producer",
    "creation_date": "/CreationDate",
    "modification_date": "/ModDate",
}


class ExtractionError(Exception):
    """Raised when text extraction from a document fails."""

    pass


def _validate_pdf_bytes(file_content: bytes, max_file_size: int) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.
        max_file_size: Largest accepted size in bytes.

    Raises:
        ExtractionError: If validation fails.
    """
    if not file_content:
        raise ExtractionError("Empty file provided")

    if len(file_content) > max_file_size:
        size_mb = len(file_content) / (1024 * 1024)
        limit_mb = max_file_size / (1024 * 1024)
        raise ExtractionError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)"
        )

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise ExtractionError("Invalid PDF: file does not start with PDF header")


def _extract_metadata(reader: PdfReader) -> dict[str, str]:
    """Extract metadata from PDF reader.

    Args:
        reader: Initialized PdfReader instance.

    Returns:
        Dictionary of the metadata fields present in the document.
    """
    metadata: dict[str, str] = {}

    try:
        if reader.metadata:
            for name, key in _METADATA_FIELDS.items():
                value = reader.metadata.get(key)
                # Dates can be complex PDF date objects
                if value is not None:
                    metadata[name] = str(value)
    except Exception as e:
        logger.warning(f"Failed to extract some metadata: {e}")

    return metadata


def parse_pdf(file_content: bytes, max_file_size: int = MAX_FILE_SIZE) -> ExtractedDocument:
    """Parse a PDF file and extract its text content.

    Args:
        file_content: Raw bytes of the PDF file.
        max_file_size: Largest accepted size in bytes.

    Returns:
        ExtractedDocument with extracted text, page count, and metadata.

    Raises:
        ExtractionError: If the file is invalid, too large, empty, or corrupt.
    """
    _validate_pdf_bytes(file_content, max_file_size)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise ExtractionError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise ExtractionError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise ExtractionError("PDF contains no pages")

    # Extract text from all pages
    text_parts: list[str] = []
    for i, page in enumerate(reader.pages):
        try:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
        except Exception as e:
            logger.warning(f"Failed to extract text from page {i + 1}: {e}")
            continue

    text = PAGE_SEPARATOR.join(text_parts)

    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return ExtractedDocument(
        text=text,
        pages=pages,
        metadata=_extract_metadata(reader),
    )
