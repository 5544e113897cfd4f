"""Test package for bookpager.

Unit tests cover isolated logic and integration tests cover the HTTP
workflow end to end.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end workflow tests

PDFs are generated in memory by conftest.build_pdf. No mocks in integration
tests. Leverages pytest with pytest-check for soft assertions.
"""
