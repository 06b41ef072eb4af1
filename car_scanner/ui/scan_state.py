"""Scan state machine driving the scanner page.

The controller owns the single live ScanState and is the only writer of it.
Pages render whatever state the controller reports and forward user actions
to it; they keep no state of their own.

Transitions:
    Idle --select_image--> Ready
    Ready/Failed --scan--> Loading --> Success | Failed
    any --reset--> Idle
    any --select_image--> Ready (new asset)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from car_scanner.models.schemas import AnalysisResult, ImageAsset
from car_scanner.scanner.analyzer import AnalysisError

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class ScanPhase(str, Enum):
    """Phase of the scan workflow."""

    IDLE = "idle"
    READY = "ready"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class Idle:
    """No image selected."""

    phase = ScanPhase.IDLE
    asset = None


@dataclass(frozen=True)
class Ready:
    """Image selected and waiting for a scan."""

    asset: ImageAsset
    phase = ScanPhase.READY


@dataclass(frozen=True)
class Loading:
    """Scan in flight for the image."""

    asset: ImageAsset
    phase = ScanPhase.LOADING


@dataclass(frozen=True)
class Success:
    """Scan finished with an identification."""

    asset: ImageAsset
    result: AnalysisResult
    phase = ScanPhase.SUCCESS


@dataclass(frozen=True)
class Failed:
    """Scan failed; message is shown to the user."""

    asset: ImageAsset
    message: str
    phase = ScanPhase.FAILED


ScanState = Idle | Ready | Loading | Success | Failed


class Analyzer(Protocol):
    """Anything that can turn an image into an AnalysisResult."""

    async def analyze(self, asset: ImageAsset) -> AnalysisResult: ...


class InvalidTransitionError(RuntimeError):
    """Raised when an action is not allowed in the current state."""

    pass


class ScanController:
    """Sequences select, scan and reset actions for one page.

    Args:
        analyzer: Request adapter used for scans.
    """

    def __init__(self, analyzer: Analyzer) -> None:
        self._analyzer = analyzer
        self._state: ScanState = Idle()
        self._listeners: list[Callable[[ScanState], None]] = []

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def can_scan(self) -> bool:
        """Whether the scan action is available (Ready, or Failed for a retry)."""
        return isinstance(self._state, Ready | Failed)

    @property
    def can_reset(self) -> bool:
        return not isinstance(self._state, Idle)

    def subscribe(self, callback: Callable[[ScanState], None]) -> None:
        """Register a callback invoked with every new state."""
        self._listeners.append(callback)

    def _set_state(self, state: ScanState) -> None:
        logger.debug(f"Scan state {self._state.phase.value} -> {state.phase.value}")
        self._state = state
        for callback in self._listeners:
            callback(state)

    def _release_current(self) -> None:
        if self._state.asset is not None:
            self._state.asset.release()

    def select_image(self, asset: ImageAsset) -> ScanState:
        """Start over with a newly selected image.

        Any previous asset, result or error is discarded.
        """
        self._release_current()
        asset.open_preview()
        self._set_state(Ready(asset))
        return self._state

    def reset(self) -> ScanState:
        """Discard the current image and return to Idle."""
        self._release_current()
        self._set_state(Idle())
        return self._state

    async def scan(self) -> ScanState:
        """Analyze the current image.

        Returns:
            The state after the scan completed. If the user reset or picked
            another image meanwhile, the outcome is discarded and the newer
            state is returned unchanged.

        Raises:
            InvalidTransitionError: If no image is ready to scan.
        """
        if not self.can_scan:
            raise InvalidTransitionError(
                f"Cannot scan while {self._state.phase.value}"
            )

        asset = self._state.asset
        loading = Loading(asset)
        self._set_state(loading)

        try:
            result = await self._analyzer.analyze(asset)
            outcome: ScanState = Success(asset, result)
        except AnalysisError as e:
            outcome = Failed(asset, str(e) or UNKNOWN_ERROR_MESSAGE)
        except Exception:
            logger.exception(f"Unexpected error while scanning {asset!r}")
            outcome = Failed(asset, UNKNOWN_ERROR_MESSAGE)

        if self._state is not loading or self._state.asset is not asset:
            logger.debug(f"Discarding stale {outcome.phase.value} for {asset!r}")
            return self._state

        self._set_state(outcome)
        return self._state
