"""FastAPI application factory and configuration.

Hosts the NiceGUI scanner page and exposes a health check.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from car_scanner.scanner.config import get_scanner_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    config = get_scanner_config()
    logger.info(f"Starting Car Scanner with model {config.model_name}...")
    if not config.has_api_key:
        logger.warning("GEMINI_API_KEY is not set; scans will fail until it is configured")
    yield
    # Shutdown
    logger.info("Shutting down Car Scanner...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Car Scanner",
        description=(
            "Identify a car's make, model, color and year from a photograph "
            "using a multimodal AI model."
        ),
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "car-scanner"}

    return application


app = create_app()
