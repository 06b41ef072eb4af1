"""Data types shared by the scanner and the UI.

Models:
    - ImageAsset: Uploaded image bytes with MIME type and preview handle
    - AnalysisResult: Make, model, color and year returned by the model
"""

from car_scanner.models.schemas import (
    MAX_IMAGE_SIZE,
    UNKNOWN,
    AnalysisResult,
    ImageAsset,
    InvalidImageError,
)

__all__ = [
    "MAX_IMAGE_SIZE",
    "UNKNOWN",
    "AnalysisResult",
    "ImageAsset",
    "InvalidImageError",
]
