"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookpager import __version__
from bookpager.api.routes import router as pages_router
from bookpager.pipeline import get_pipeline

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Builds the shared pipeline on startup so configuration errors surface
    before the first request.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    logger.info("Starting bookpager API...")
    config = get_pipeline().config
    logger.info(
        f"Pagination: chunk_size={config.chunk_size}, min_length={config.min_length}, "
        f"legacy_split={config.legacy_split}"
    )
    yield
    # Shutdown
    logger.info("Shutting down bookpager API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="bookpager API",
        description=(
            "Turns interactive-edition PDF books into reader pages. Extracts text, "
            "strips viewer interface artifacts and cuts the result into fixed-size, "
            "numbered pages ready for storage or display."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(pages_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "bookpager"}

    return application


app = create_app()
