"""Scanner configuration with environment variable loading.

Pydantic-based configuration for the Gemini vision model.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class ScannerConfig(BaseModel):
    """Configuration for the car analyzer.

    A missing API key is allowed here; the analyzer reports it as a
    configuration error when a scan is attempted.

    Attributes:
        api_key: Gemini API key.
        model_name: Gemini model identifier.
        request_timeout: Seconds to wait for one analysis request.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", os.getenv("API_KEY", "")),
        validate_default=True,
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        description="Model to use",
    )
    request_timeout: float = Field(
        default_factory=lambda: os.getenv("SCAN_TIMEOUT", "60"),
        validate_default=True,
        gt=0.0,
        le=600.0,
        description="Timeout in seconds for a single analysis request",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace from the API key."""
        return v.strip()

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def get_scanner_config() -> ScannerConfig:
    """Create scanner configuration from environment.

    Returns:
        Configured ScannerConfig instance.
    """
    return ScannerConfig()
