"""Pytest fixtures and shared test configuration.

Fixtures:
    - png_bytes: A valid 1x1 PNG image
    - make_asset: Factory for ImageAsset instances
    - fake_analyzer: Substitutable request adapter for controller tests
    - async_client: HTTPX client for API testing
"""

import asyncio
import base64
from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from car_scanner.api import app
from car_scanner.models.schemas import AnalysisResult, ImageAsset

PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


class FakeAnalyzer:
    """In-memory analyzer returning a canned result or raising an error.

    When ``gate`` is set, ``analyze`` waits for it before answering so tests
    can act while a scan is in flight.
    """

    def __init__(
        self,
        result: AnalysisResult | None = None,
        error: Exception | None = None,
    ) -> None:
        self.result = result
        self.error = error
        self.calls: list[ImageAsset] = []
        self.gate: asyncio.Event | None = None

    async def analyze(self, asset: ImageAsset) -> AnalysisResult:
        self.calls.append(asset)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


@pytest.fixture
def png_bytes() -> bytes:
    """Return a valid 1x1 PNG image."""
    return PNG_1X1


@pytest.fixture
def make_asset(png_bytes: bytes) -> Callable[[str], ImageAsset]:
    """Return a factory creating a fresh asset per call.

    Returns:
        Callable taking a filename and returning a new ImageAsset.
    """

    def _make(filename: str = "car.jpg") -> ImageAsset:
        mime_type = "image/png" if filename.endswith(".png") else "image/jpeg"
        return ImageAsset(data=png_bytes, mime_type=mime_type, filename=filename)

    return _make


@pytest.fixture
def camry() -> AnalysisResult:
    return AnalysisResult(make="Toyota", model="Camry", color="Blue", year="2021")


@pytest.fixture
def fake_analyzer(camry: AnalysisResult) -> FakeAnalyzer:
    """Analyzer that identifies every image as a 2021 blue Toyota Camry."""
    return FakeAnalyzer(result=camry)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
