"""Car identification through an Agno agent backed by Gemini.

The analyzer is the only component that talks to the network. One call to
:meth:`CarAnalyzer.analyze` sends one image with a fixed instruction and the
``AnalysisResult`` output schema, and returns either a complete result or
raises an :class:`AnalysisError`.

Request policy: no retries, one overall timeout per request
(``ScannerConfig.request_timeout``). A failed scan is retried only when the
user asks for it.
"""

import asyncio
import logging

from agno.agent import Agent
from agno.media import Image
from agno.models.google import Gemini
from agno.run.base import RunStatus
from pydantic import ValidationError

from car_scanner.models.schemas import AnalysisResult, ImageAsset
from car_scanner.scanner.config import ScannerConfig, get_scanner_config

logger = logging.getLogger(__name__)

ANALYSIS_PROMPT = (
    "Analyze the provided image of a car. Even if only a part of the car is "
    "visible, identify its make, model, color, and estimated year of "
    "manufacture. If any information cannot be determined, state it as "
    "'Unknown'. Provide the response in the specified JSON format."
)

MISSING_KEY_MESSAGE = "API_KEY is not configured."
ANALYSIS_FAILED_MESSAGE = (
    "Failed to analyze image. The AI model could not process the request."
)


class AnalysisError(Exception):
    """Raised when an image could not be analyzed.

    The message is safe to show to the user.
    """

    pass


class ConfigurationError(AnalysisError):
    """Raised when no API key is configured."""

    pass


class TransportError(AnalysisError):
    """Raised when the model request fails or times out."""

    pass


class ResponseValidationError(AnalysisError):
    """Raised when the model reply does not match the output schema."""

    pass


def build_image_part(asset: ImageAsset) -> Image:
    """Wrap an asset as an inline image for the model request."""
    return Image(content=asset.data, mime_type=asset.mime_type, format=asset.format)


def parse_response(content: object) -> AnalysisResult:
    """Validate the model reply against the output schema.

    Args:
        content: Reply content, either an already parsed AnalysisResult or
            raw JSON text.

    Returns:
        The validated AnalysisResult.

    Raises:
        ResponseValidationError: If the reply is empty or malformed.
    """
    if isinstance(content, AnalysisResult):
        return content

    if not isinstance(content, str) or not content.strip():
        raise ResponseValidationError(ANALYSIS_FAILED_MESSAGE)

    try:
        return AnalysisResult.model_validate_json(content.strip())
    except ValidationError as e:
        logger.warning(f"Model reply did not match schema: {e}")
        raise ResponseValidationError(ANALYSIS_FAILED_MESSAGE) from e


class CarAnalyzer:
    """Request adapter between the UI and the Gemini vision model.

    The Agno agent is created on the first configured call and reused
    afterwards. Nothing is created while the API key is missing.
    """

    def __init__(self, config: ScannerConfig | None = None) -> None:
        """Initialize the analyzer.

        Args:
            config: Optional scanner configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_scanner_config()
        self._agent: Agent | None = None

    @property
    def is_configured(self) -> bool:
        return self._config.has_api_key

    def _create_agent(self) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Agent with a Gemini model constrained to the AnalysisResult schema.
        """
        model = Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key,
        )

        return Agent(
            model=model,
            description="An automotive expert that identifies cars from photographs.",
            instructions=[
                "Identify the car even when only part of it is visible.",
                "Use 'Unknown' for any value that cannot be determined.",
            ],
            output_schema=AnalysisResult,
            telemetry=False,
        )

    def _get_agent(self) -> Agent:
        if self._agent is None:
            self._agent = self._create_agent()
        return self._agent

    async def analyze(self, asset: ImageAsset) -> AnalysisResult:
        """Identify the car shown in an image.

        Args:
            asset: The uploaded image.

        Returns:
            AnalysisResult with all four fields populated.

        Raises:
            ConfigurationError: If no API key is configured.
            TransportError: If the request fails or times out.
            ResponseValidationError: If the reply does not match the schema.
        """
        if not self.is_configured:
            logger.error("Cannot analyze image: API key is not configured")
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        agent = self._get_agent()
        image = build_image_part(asset)

        logger.info(f"Analyzing {asset!r} with {self._config.model_name}")
        try:
            response = await asyncio.wait_for(
                agent.arun(ANALYSIS_PROMPT, images=[image]),
                timeout=self._config.request_timeout,
            )
        except TimeoutError as e:
            logger.error(
                f"Analysis timed out after {self._config.request_timeout}s: {asset!r}"
            )
            raise TransportError(ANALYSIS_FAILED_MESSAGE) from e
        except Exception as e:
            logger.error(f"Error analyzing car image with Gemini API: {e}")
            raise TransportError(ANALYSIS_FAILED_MESSAGE) from e

        # Agno reports model and network failures on the run instead of raising
        if response.status == RunStatus.error:
            logger.error(f"Gemini request failed for {asset!r}: {response.content}")
            raise TransportError(ANALYSIS_FAILED_MESSAGE)

        result = parse_response(response.content)
        logger.info(
            f"Identified {result.make} {result.model} ({result.color}, {result.year})"
        )
        return result


# Module-level singleton instance
_car_analyzer: CarAnalyzer | None = None


def get_car_analyzer() -> CarAnalyzer:
    """Get or create the global car analyzer.

    Returns:
        The CarAnalyzer instance.
    """
    global _car_analyzer
    if _car_analyzer is None:
        _car_analyzer = CarAnalyzer()
    return _car_analyzer
