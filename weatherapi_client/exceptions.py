"""Internal exceptions for the WeatherAPI client.

None of these escape the public client operations: they are raised by the
transport and decode layers and converted into invalid results by the client.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error logging."""

    WEATHER_CLIENT_ERROR = "WEATHER_CLIENT_ERROR"
    WEATHER_TRANSPORT_ERROR = "WEATHER_TRANSPORT_ERROR"
    WEATHER_API_ERROR = "WEATHER_API_ERROR"
    WEATHER_DECODE_ERROR = "WEATHER_DECODE_ERROR"


STATUS_DESCRIPTIONS: dict[int, str] = {
    400: "Error 400 - Bad Request. Possible query error?",
    401: "Error 401 - Unauthorized. Possible API key error?",
    403: "Error 403 - Forbidden. Possible API key error?",
    404: "Error 404 - Not Found.",
}


def describe_status(status_code: int | None) -> str:
    """Get a diagnostic description for an HTTP status code.

    Args:
        status_code: HTTP status code, or None when no response was received

    Returns:
        Human-readable description used in log messages
    """
    if status_code is None:
        return "Error - No response received."
    return STATUS_DESCRIPTIONS.get(status_code, f"Error {status_code}")


class WeatherClientException(Exception):
    """Base exception for WeatherAPI client errors.

    All internal exceptions inherit from this class so the client can
    convert them to invalid results at a single boundary.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_CLIENT_ERROR,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize client exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code, if a response was received
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class WeatherTransportException(WeatherClientException):
    """Network-level failure (connection error, timeout)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_TRANSPORT_ERROR,
            status_code=None,
            details=details,
        )


class WeatherAPIException(WeatherClientException):
    """WeatherAPI answered with a non-success status code."""

    def __init__(self, message: str, status_code: int, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_API_ERROR,
            status_code=status_code,
            details=details,
        )

    @property
    def description(self) -> str:
        """Diagnostic description for the status code."""
        return describe_status(self.status_code)


class WeatherDecodeException(WeatherClientException):
    """Response body was malformed or did not match the expected schema."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_DECODE_ERROR,
            status_code=None,
            details=details,
        )
