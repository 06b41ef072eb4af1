"""Vision model integration for car identification.

Responsibilities:
    - Scanner configuration from environment (.env supported)
    - Inline image encoding for the model request
    - One structured-output request per scan through an Agno agent
    - Normalizing every failure into a single AnalysisError family

Keeps the network boundary in one place so the UI can be tested with a fake.
"""

from car_scanner.scanner.analyzer import (
    AnalysisError,
    CarAnalyzer,
    ConfigurationError,
    ResponseValidationError,
    TransportError,
    get_car_analyzer,
)
from car_scanner.scanner.config import ScannerConfig, get_scanner_config

__all__ = [
    "AnalysisError",
    "CarAnalyzer",
    "ConfigurationError",
    "ResponseValidationError",
    "ScannerConfig",
    "TransportError",
    "get_car_analyzer",
    "get_scanner_config",
]
