"""PDF upload endpoint for pagination.

Handles file upload, validation, extraction, cleaning and pagination.
"""

import logging

from fastapi import APIRouter, HTTPException, Query, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from bookpager.models.schemas import ExtractedDocument, PaginatedDocument, PaginationResponse
from bookpager.parsing.pdf_parser import ExtractionError, parse_pdf
from bookpager.pipeline import DocumentPipeline, get_pipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pages", tags=["pages"])


def _validate_file_extension(filename: str | None) -> str:
    """Validate that file has .pdf extension.

    Args:
        filename: The uploaded filename.

    Returns:
        The validated filename.

    Raises:
        HTTPException: 400 if extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    return filename


async def _read_and_validate_size(file: UploadFile, max_size: int) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.
        max_size: Largest accepted size in bytes.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > max_size:
        size_mb = len(content) / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)",
        )

    return content


def _resolve_pipeline(chunk_size: int | None, min_length: int | None) -> DocumentPipeline:
    """Return the shared pipeline, or a per-request one when overrides are given."""
    pipeline = get_pipeline()
    overrides = {
        key: value
        for key, value in (("chunk_size", chunk_size), ("min_length", min_length))
        if value is not None
    }
    if not overrides:
        return pipeline
    return DocumentPipeline(config=pipeline.config.model_copy(update=overrides))


def _extract_and_paginate(
    pipeline: DocumentPipeline, content: bytes
) -> tuple[ExtractedDocument, PaginatedDocument]:
    document = parse_pdf(content, max_file_size=pipeline.config.max_file_size)
    return document, pipeline.process_document(document)


@router.post("/pdf", response_model=PaginationResponse)
async def paginate_pdf(
    file: UploadFile,
    chunk_size: int | None = Query(None, ge=1, description="Characters per page"),
    min_length: int | None = Query(None, ge=0, description="Minimum page length"),
) -> PaginationResponse:
    """Upload a PDF and return its reader pages.

    Accepts a PDF file, validates it, extracts text content, strips viewer
    artifacts and cuts the text into numbered pages. Extraction runs in a
    worker thread so the event loop is not blocked.

    Args:
        file: The uploaded PDF file (multipart/form-data).
        chunk_size: Optional per-request chunk size override.
        min_length: Optional per-request minimum page length override.

    Returns:
        PaginationResponse with the pages and rendered metadata.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
        413: File exceeds the size limit.
        422: Invalid override values.
    """
    # Validate extension
    filename = _validate_file_extension(file.filename)

    pipeline = _resolve_pipeline(chunk_size, min_length)

    # Read and validate size
    content = await _read_and_validate_size(file, pipeline.config.max_file_size)

    try:
        document, result = await run_in_threadpool(_extract_and_paginate, pipeline, content)
    except ExtractionError as e:
        logger.warning(f"PDF extraction error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    logger.info(
        f"Paginated PDF: {filename} ({document.pages} source pages, {len(result.pages)} pages)"
    )

    return PaginationResponse(
        filename=filename,
        source_pages=document.pages,
        page_count=len(result.pages),
        pages=result.pages,
        metadata=result.metadata,
        success=True,
    )
