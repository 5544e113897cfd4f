from pydantic import BaseModel, Field


class Page(BaseModel):
    """A single reader page cut from the cleaned document text.

    Attributes:
        page_number: Position of the source chunk, starting at 1. Filtered
            chunks leave gaps; survivors are never renumbered.
        text_content: Trimmed text of the chunk.
    """

    page_number: int = Field(..., ge=1)
    text_content: str


class ExtractedDocument(BaseModel):
    """Raw extraction result for one PDF.

    Attributes:
        text: Combined text content from all source pages.
        pages: Number of pages in the source PDF.
        metadata: Document metadata (title, author, etc.).
    """

    text: str
    pages: int = Field(ge=0)
    metadata: dict[str, str] = Field(default_factory=dict)


class PaginatedDocument(BaseModel):
    """Pages produced for one document plus its rendered metadata."""

    pages: list[Page] = Field(default_factory=list)
    metadata: str = ""


class PaginationResponse(BaseModel):
    """Response after PDF upload and pagination.

    Attributes:
        filename: Name of the uploaded file.
        source_pages: Number of pages in the uploaded PDF.
        page_count: Number of reader pages produced.
        pages: The reader pages in ascending page_number order.
        metadata: Rendered document metadata.
        success: Whether processing succeeded.
        error: Error message if processing failed.
    """

    filename: str
    source_pages: int
    page_count: int
    pages: list[Page]
    metadata: str
    success: bool
    error: str | None = None
