"""PDF parsing utilities for document processing.

Responsibilities:
    - PDF text extraction with pypdf
    - Metadata extraction (title, author, dates)
    - Validation of size, header and structure

Extraction is the only stage that can fail; every failure surfaces as
ExtractionError with a descriptive message.
"""

from bookpager.parsing.extractor import Extractor, PdfExtractor
from bookpager.parsing.pdf_parser import MAX_FILE_SIZE, ExtractionError, parse_pdf

__all__ = ["MAX_FILE_SIZE", "ExtractionError", "Extractor", "PdfExtractor", "parse_pdf"]
