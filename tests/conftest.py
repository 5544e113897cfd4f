"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - pdf_factory: Builds small text PDFs in memory
    - sample_pdf_bytes: Two-page PDF with viewer artifacts and metadata
    - sample_pdf_path: The sample PDF written to a temporary file
    - async_client: HTTPX client for API testing

PDFs are generated on the fly so the suite needs no binary fixtures.
"""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from bookpager.api import app

PdfFactory = Callable[..., bytes]

SAMPLE_PAGES = [
    [
        "Fit Page Full Screen Alice was beginning to get very tired of sitting by her sister",
        "on the bank, and of having nothing to do: once or twice she had peeped",
        "into the book her sister was reading, but it had no pictures in it.",
    ],
    [
        "DOWN THE 12 So she was considering in her own mind, as well as she could,",
        "whether the pleasure of making a daisy-chain would be worth the trouble",
        "of getting up and picking the daisies. www.bookvirtual.com",
    ],
]


def _escape(line: str) -> str:
    return line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(
    pages: list[list[str]],
    title: str | None = None,
    author: str | None = None,
) -> bytes:
    """Build a minimal PDF with one Helvetica text line per list entry.

    Args:
        pages: Lines of text for each page. An empty list gives a blank page.
        title: Optional /Title metadata.
        author: Optional /Author metadata.

    Returns:
        PDF file bytes with a valid cross-reference table.
    """
    objects: dict[int, bytes] = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        3: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
    }
    kids: list[int] = []
    next_id = 4
    for lines in pages:
        page_id, content_id = next_id, next_id + 1
        next_id += 2
        kids.append(page_id)

        ops = ["BT", "/F1 12 Tf", "14 TL", "72 720 Td"]
        ops.extend(f"({_escape(line)}) Tj T*" for line in lines)
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")

        objects[page_id] = (
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Resources << /Font << /F1 3 0 R >> >> "
            + f"/Contents {content_id} 0 R >>".encode()
        )
        objects[content_id] = (
            f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream"
        )

    kid_refs = " ".join(f"{kid} 0 R" for kid in kids)
    objects[2] = f"<< /Type /Pages /Kids [{kid_refs}] /Count {len(kids)} >>".encode()

    info_id = None
    if title or author:
        info_id = next_id
        entries = []
        if title:
            entries.append(f"/Title ({_escape(title)})")
        if author:
            entries.append(f"/Author ({_escape(author)})")
        objects[info_id] = f"<< {' '.join(entries)} >>".encode()

    out = bytearray(b"%PDF-1.4\n")
    offsets: dict[int, int] = {}
    for obj_id in sorted(objects):
        offsets[obj_id] = len(out)
        out += f"{obj_id} 0 obj\n".encode() + objects[obj_id] + b"\nendobj\n"

    xref_pos = len(out)
    size = max(objects) + 1
    out += f"xref\n0 {size}\n".encode()
    out += b"0000000000 65535 f \n"
    for obj_id in range(1, size):
        out += f"{offsets[obj_id]:010d} 00000 n \n".encode()

    trailer = f"<< /Size {size} /Root 1 0 R"
    if info_id is not None:
        trailer += f" /Info {info_id} 0 R"
    trailer += " >>"
    out += f"trailer\n{trailer}\nstartxref\n{xref_pos}\n%%EOF\n".encode()
    return bytes(out)


@pytest.fixture
def pdf_factory() -> PdfFactory:
    """Return the in-memory PDF builder."""
    return build_pdf


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Return a two-page PDF carrying viewer artifacts and metadata."""
    return build_pdf(SAMPLE_PAGES, title="Alice's Adventures in Wonderland", author="Lewis Carroll")


@pytest.fixture
def sample_pdf_path(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    """Write the sample PDF to a temporary file.

    Returns:
        Path to sample.pdf.
    """
    path = tmp_path / "sample.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
