"""Main application entry point.

Runs FastAPI (port 8000) with the NiceGUI scanner page mounted at ``/``.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server."""
    import uvicorn
    from nicegui import ui

    from car_scanner.api.app import create_app
    from car_scanner.ui.scan_page import scan_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="Car Scanner",
        favicon="🚗",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "car-scanner-secret"),
    )

    logger.info("Starting Car Scanner on http://localhost:8000")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
