"""FastAPI host for the car scanner.

Serves the NiceGUI page mounted by ``car_scanner.main``.

Endpoints:
    - GET /health: Service health status
"""

from car_scanner.api.app import app, create_app

__all__ = ["app", "create_app"]
