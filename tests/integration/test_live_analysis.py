"""Integration tests against the real Gemini API.

Requirements:
    - GEMINI_API_KEY environment variable
    - Network access

Tests are skipped without a key.
"""

import os

import pytest

from car_scanner.models.schemas import AnalysisResult, ImageAsset
from car_scanner.scanner.analyzer import CarAnalyzer
from car_scanner.scanner.config import ScannerConfig
from car_scanner.ui.scan_state import ScanController, Success


def has_gemini_key() -> bool:
    """Check if Gemini API key is configured."""
    key = os.environ.get("GEMINI_API_KEY", "")
    return bool(key and not key.isspace())


requires_api_key = pytest.mark.skipif(
    not has_gemini_key(),
    reason="GEMINI_API_KEY not set - skipping Gemini integration test",
)


@requires_api_key
@pytest.mark.requires_api_key
class TestLiveAnalysis:
    """Live scans of an image with no car in it."""

    async def test_blank_image_returns_complete_result(self, png_bytes: bytes) -> None:
        """A 1x1 pixel cannot be identified, but the reply is still complete."""
        analyzer = CarAnalyzer(ScannerConfig())
        asset = ImageAsset.from_upload("pixel.png", "image/png", png_bytes)

        result = await analyzer.analyze(asset)

        assert isinstance(result, AnalysisResult)
        for _, value in result.display_fields():
            assert value

    async def test_controller_reaches_success(self, png_bytes: bytes) -> None:
        controller = ScanController(CarAnalyzer(ScannerConfig()))
        controller.select_image(ImageAsset.from_upload("pixel.png", "image/png", png_bytes))

        state = await controller.scan()

        assert isinstance(state, Success)
