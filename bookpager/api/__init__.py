"""FastAPI endpoints for bookpager.

Endpoints:
    - GET /health: Service health status
    - POST /pages/pdf: Upload a PDF and receive its reader pages
"""

from bookpager.api.app import app, create_app

__all__ = ["app", "create_app"]
