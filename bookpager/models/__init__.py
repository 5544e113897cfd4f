"""Pydantic models for page records and API responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Page: One numbered reader page
    - ExtractedDocument: Raw text, page count and metadata from extraction
    - PaginatedDocument: Pages plus rendered metadata for one document
    - PaginationResponse: Upload endpoint response
"""

from bookpager.models.schemas import (
    ExtractedDocument,
    Page,
    PaginatedDocument,
    PaginationResponse,
)

__all__ = ["ExtractedDocument", "Page", "PaginatedDocument", "PaginationResponse"]
