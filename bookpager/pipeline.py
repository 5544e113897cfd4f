"""Extraction, cleaning and pagination in one synchronous pass.

The pipeline holds configuration and collaborators only; every call works
on its own input and leaves nothing behind, so one instance can serve
concurrent callers from different threads.
"""

import json
import logging
from pathlib import Path

from bookpager.cleaning.artifact_cleaner import ArtifactCleaner
from bookpager.config import PipelineConfig, get_pipeline_config
from bookpager.models.schemas import ExtractedDocument, Page, PaginatedDocument
from bookpager.pagination.splitters import (
    MarkerSectionSplitter,
    SectionSplitter,
    WholeDocumentSplitter,
    paginate_sections,
)
from bookpager.parsing.extractor import Extractor, PdfExtractor

logger = logging.getLogger(__name__)


def render_metadata(metadata: dict[str, str]) -> str:
    """Render extraction metadata as a JSON object string."""
    return json.dumps(metadata, sort_keys=True, ensure_ascii=False)


class DocumentPipeline:
    """Turns a document into reader pages.

    Wraps the extraction collaborator, the artifact cleaner and the
    paginator behind one call. Extraction failures propagate unchanged as
    ExtractionError; the cleaning and pagination stages cannot fail on
    string input.
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        extractor: Extractor | None = None,
        splitter: SectionSplitter | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Optional pipeline configuration.
                    Loads from environment if not provided.
            extractor: Document extractor. Defaults to pypdf.
            splitter: Section splitting strategy. Defaults to the legacy
                      marker split when config.legacy_split is set, and to
                      whole-document pagination otherwise.
        """
        self._config = config or get_pipeline_config()
        self._extractor = extractor or PdfExtractor(max_file_size=self._config.max_file_size)
        self._splitter = splitter or self._create_splitter()
        self._cleaner = ArtifactCleaner(self._config.artifact_rules)

    @property
    def config(self) -> PipelineConfig:
        return self._config

    def _create_splitter(self) -> SectionSplitter:
        if self._config.legacy_split:
            return MarkerSectionSplitter(chunk_size=self._config.chunk_size)
        return WholeDocumentSplitter()

    def paginate_text(self, raw_text: str) -> list[Page]:
        """Clean raw extracted text and cut it into pages."""
        cleaned = self._cleaner.clean(raw_text)
        return paginate_sections(
            self._splitter.split(cleaned),
            chunk_size=self._config.chunk_size,
            min_length=self._config.min_length,
        )

    def process_document(self, document: ExtractedDocument) -> PaginatedDocument:
        """Paginate an already extracted document."""
        pages = self.paginate_text(document.text)
        logger.info(
            f"Produced {len(pages)} pages from {len(document.text)} characters "
            f"({document.pages} source pages)"
        )
        return PaginatedDocument(pages=pages, metadata=render_metadata(document.metadata))

    def process(self, path: str | Path) -> PaginatedDocument:
        """Extract the document at ``path`` and paginate it.

        Raises:
            ExtractionError: If extraction fails.
        """
        return self.process_document(self._extractor.extract(path))


def extract_pages(
    path: str | Path, config: PipelineConfig | None = None
) -> tuple[list[Page], str]:
    """Extract and paginate a PDF.

    Args:
        path: Path to the PDF file.
        config: Optional configuration. Uses the shared pipeline if omitted.

    Returns:
        The pages and the rendered metadata.

    Raises:
        ExtractionError: If extraction fails.
    """
    pipeline = DocumentPipeline(config=config) if config is not None else get_pipeline()
    result = pipeline.process(path)
    return result.pages, result.metadata


# Module-level singleton instance
_pipeline: DocumentPipeline | None = None


def get_pipeline() -> DocumentPipeline:
    """Get or create the shared pipeline built from environment configuration."""
    global _pipeline
    if _pipeline is None:
        _pipeline = DocumentPipeline()
    return _pipeline
