"""Fixed-size pagination of cleaned document text.

Text is cut into consecutive chunks of ``chunk_size`` characters (code
points, never bytes), each chunk becomes a page numbered by its position,
and pages whose trimmed text is shorter than ``min_length`` are dropped
without renumbering the rest.
"""

import logging

from bookpager.models.schemas import Page

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1500
DEFAULT_MIN_LENGTH = 50


def chunk_text(text: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """Split text into consecutive, non-overlapping character slices.

    Every slice holds exactly ``chunk_size`` characters except the last,
    which holds the remainder. Joining the slices gives back ``text``.

    Raises:
        ValueError: If chunk_size is not positive.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [text[i : i + chunk_size] for i in range(0, len(text), chunk_size)]


def paginate(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    min_length: int = DEFAULT_MIN_LENGTH,
    start_page: int = 1,
) -> list[Page]:
    """Cut text into numbered pages.

    Args:
        text: Cleaned document text.
        chunk_size: Characters per chunk.
        min_length: Minimum trimmed length for a page to be kept.
        start_page: Number given to the first chunk.

    Returns:
        Surviving pages in ascending page_number order. Dropped chunks
        (too short, or blank after trimming) leave gaps in the numbering.

    Raises:
        ValueError: If chunk_size, min_length or start_page is out of range.
    """
    if min_length < 0:
        raise ValueError(f"min_length must be non-negative, got {min_length}")
    if start_page < 1:
        raise ValueError(f"start_page must be at least 1, got {start_page}")

    pages: list[Page] = []
    chunks = chunk_text(text, chunk_size)
    for offset, chunk in enumerate(chunks):
        content = chunk.strip()
        # Whitespace-only chunks never become pages, even with min_length=0.
        if not content or len(content) < min_length:
            continue
        pages.append(Page(page_number=start_page + offset, text_content=content))

    dropped = len(chunks) - len(pages)
    if dropped:
        logger.debug(f"Dropped {dropped} of {len(chunks)} chunks shorter than {min_length}")
    return pages
