"""bookpager - PDF to reader-ready pages.

Turns an interactive-edition PDF into fixed-size, numbered pages for a
reading application backend, using pypdf for extraction, Pydantic for
records and configuration, and FastAPI for the upload surface.

Components:
    - parsing: PDF text and metadata extraction
    - cleaning: removal of viewer interface artifacts
    - pagination: fixed-size chunking and page numbering
    - pipeline: extraction, cleaning and pagination in sequence
    - api: HTTP upload endpoint
    - models: page and response schemas
"""

__version__ = "0.1.0"
