import base64
import mimetypes

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNKNOWN = "Unknown"

# Gemini rejects inline payloads above 20MB
MAX_IMAGE_SIZE = 20 * 1024 * 1024


class InvalidImageError(ValueError):
    """Raised when an uploaded file cannot be used as a scan image."""

    pass


class AnalysisResult(BaseModel):
    """Identification of a car returned by the vision model.

    Attributes:
        make: Manufacturer or brand.
        model: Specific model name.
        color: Primary body color.
        year: Estimated year of manufacture.
    """

    model_config = ConfigDict(frozen=True)

    make: str = Field(..., description="The make or brand of the car (e.g., Toyota, Ford).")
    model: str = Field(..., description="The specific model of the car (e.g., Camry, Mustang).")
    color: str = Field(..., description="The primary color of the car.")
    year: str = Field(..., description="The estimated year of manufacture (e.g., 2021).")

    @field_validator("make", "model", "color", "year")
    @classmethod
    def blank_to_unknown(cls, v: str) -> str:
        """Strip whitespace and report blank values as Unknown."""
        v = v.strip()
        return v or UNKNOWN

    def display_fields(self) -> list[tuple[str, str]]:
        """Return (label, value) pairs in display order."""
        return [
            ("Make", self.make),
            ("Model", self.model),
            ("Color", self.color),
            ("Year", self.year),
        ]


class ImageAsset:
    """An uploaded image held in memory for the duration of one scan.

    The preview handle is a ``data:`` URL created on demand and dropped
    again by :meth:`release`.
    """

    def __init__(self, data: bytes, mime_type: str, filename: str = "") -> None:
        self.data = data
        self.mime_type = mime_type
        self.filename = filename
        self.preview_url: str | None = None
        self.released = False

    @classmethod
    def from_upload(
        cls,
        filename: str | None,
        content_type: str | None,
        data: bytes,
    ) -> "ImageAsset":
        """Validate an uploaded file and wrap it as an asset.

        Args:
            filename: Original file name from the browser.
            content_type: MIME type reported by the browser, may be empty.
            data: Raw file content.

        Returns:
            The validated ImageAsset.

        Raises:
            InvalidImageError: If the file is empty, too large or not an image.
        """
        filename = filename or ""
        mime_type = content_type or mimetypes.guess_type(filename)[0] or ""

        if not mime_type.startswith("image/"):
            raise InvalidImageError("Only image files are accepted")

        if not data:
            raise InvalidImageError("Empty file provided")

        if len(data) > MAX_IMAGE_SIZE:
            size_mb = len(data) / (1024 * 1024)
            raise InvalidImageError(
                f"File size ({size_mb:.1f}MB) exceeds maximum allowed (20MB)"
            )

        return cls(data=data, mime_type=mime_type, filename=filename)

    @property
    def format(self) -> str:
        """Image format derived from the MIME subtype (``jpeg``, ``png``...)."""
        return self.mime_type.split("/", 1)[-1]

    def data_url(self) -> str:
        """Encode the image as a base64 ``data:`` URL."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    def open_preview(self) -> str:
        if self.preview_url is None:
            self.preview_url = self.data_url()
            self.released = False
        return self.preview_url

    def release(self) -> None:
        self.preview_url = None
        self.released = True

    def __repr__(self) -> str:
        return (
            f"ImageAsset(filename={self.filename!r}, mime_type={self.mime_type!r}, "
            f"size={len(self.data)})"
        )
