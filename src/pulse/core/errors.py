"""
Error types raised by the pulse client.

Every single-item operation wraps the errors it surfaces with the name of
the stage that was being attempted, so callers can tell a failed broadcast
from a failed status check.
"""

from typing import Dict, Optional


class PulseError(Exception):
    """Base class for all client errors."""

    # Leads the message built by in_stage
    stage_verb = "request"

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.stage = stage
        self.cause = cause

    def in_stage(self, stage: str) -> "PulseError":
        """
        Wrap this error with the operation that was being attempted.

        Args:
            stage: Operation name, e.g. "broadcast_asset"

        Returns:
            A new error of the same kind whose cause is this error
        """
        wrapped = type(self)(f"{self.stage_verb} failed {stage}: {self}", stage=stage, cause=self)
        self._copy_details(wrapped)
        return wrapped

    def _copy_details(self, other: "PulseError") -> None:
        """Hook for subclasses carrying extra attributes."""
        pass


class ValidationError(PulseError):
    """Raised when an asset fails validation. No request is sent."""

    stage_verb = "validate"

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        cause: Optional[BaseException] = None,
        fields: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message, stage=stage, cause=cause)
        self.fields = dict(fields or {})

    def _copy_details(self, other: PulseError) -> None:
        other.fields = dict(self.fields)


class TransportError(PulseError):
    """
    Raised on network failure or when the service answers with HTTP >= 400.

    Attributes:
        status_code: HTTP status of the failed response, None for network errors
    """

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, stage=stage, cause=cause)
        self.status_code = status_code

    def _copy_details(self, other: PulseError) -> None:
        other.status_code = self.status_code


class DecodeError(PulseError):
    """Raised when a response body cannot be parsed into the expected shape."""
    pass


class MonitorTimeoutError(PulseError):
    """Raised when a status monitor exceeds its deadline."""
    pass
