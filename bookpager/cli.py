"""Command line pagination of a PDF file.

Usage: bookpager <pdf_path> [--chunk-size N] [--min-length N] [--legacy-split]

Prints a JSON object with the pages and rendered metadata to stdout. On
failure prints a JSON error object to stderr and exits with status 1.
Logs go to stderr so stdout stays machine-readable.
"""

import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

from bookpager.config import PipelineConfig
from bookpager.parsing.pdf_parser import ExtractionError
from bookpager.pipeline import DocumentPipeline

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookpager",
        description="Extract, clean and paginate a PDF into reader pages.",
    )
    parser.add_argument("pdf_path", help="Path to the PDF file")
    parser.add_argument("--chunk-size", type=int, help="Characters per page")
    parser.add_argument("--min-length", type=int, help="Minimum trimmed page length")
    parser.add_argument(
        "--legacy-split",
        action="store_true",
        help="Paginate front matter from page 1 and pin the first chapter to page 8",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    return parser


def _fail(message: str) -> int:
    print(json.dumps({"success": False, "error": message}), file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv.

    Returns:
        Process exit status.
    """
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    args = _build_parser().parse_args(argv)

    overrides: dict[str, object] = {}
    if args.chunk_size is not None:
        overrides["chunk_size"] = args.chunk_size
    if args.min_length is not None:
        overrides["min_length"] = args.min_length
    if args.legacy_split:
        overrides["legacy_split"] = True

    try:
        config = PipelineConfig(**overrides)
    except ValidationError as e:
        return _fail(f"Invalid configuration: {e}")

    try:
        result = DocumentPipeline(config=config).process(args.pdf_path)
    except ExtractionError as e:
        logger.error(f"Extraction failed for {args.pdf_path}: {e}")
        return _fail(str(e))

    output = {
        "success": True,
        "page_count": len(result.pages),
        "pages": [page.model_dump() for page in result.pages],
        "metadata": result.metadata,
    }
    print(json.dumps(output, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
