"""Integration tests for components working together as a system.

No mocks for core functionality - tests real HTTP requests against the
FastAPI app with generated PDF uploads.
"""
