"""Unit tests for individual components in isolation.

Coverage:
    - cleaning/: Artifact rules and whitespace normalization
    - pagination/: Chunking, filtering and section splitting
    - parsing/: PDF validation and text extraction
    - config, pipeline and cli modules

Uses stubs in place of the extractor when only text handling is under test.
"""
