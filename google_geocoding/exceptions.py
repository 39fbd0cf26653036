"""
Google Geocoding API Exceptions

This module contains the exception hierarchy raised by the geocoding client.
Nothing here is retried or swallowed: every error reaches the caller.
"""

import logging
from typing import Any, Dict, Optional

from .enums import StatusCode

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Base exception class for all geocoding errors, dood!

    Attributes:
        message: Human-readable error message
        code: Service status or HTTP code (if available)
        response: Raw decoded reply (if available)
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response
        logger.debug(f"{type(self).__name__}: {message} (code: {code})")

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} (code: {self.code})"
        return self.message


class ValidationError(GeocodingError, ValueError):
    """Raised when a value is outside of its legal domain.

    This occurs when:
    - latitude is outside [-90, 90] or longitude is outside [-180, 180]
    - a geocode query has neither an address nor component filters
    """

    def __init__(self, message: str, code: Optional[str] = None, response: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code, response)


class TransportError(GeocodingError):
    """Raised when the request never produced a usable HTTP reply.

    This includes connection timeouts, DNS resolution failures, TLS errors
    and non-200 HTTP statuses. The underlying httpx exception (if any)
    is kept as ``__cause__``.
    """

    def __init__(
        self,
        message: str = "Network error occurred.",
        code: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
        httpStatus: Optional[int] = None,
    ) -> None:
        super().__init__(message, code, response)
        self.httpStatus = httpStatus


class DecodeError(GeocodingError):
    """Raised when the reply body is not JSON or does not look like a geocoding reply."""

    def __init__(self, message: str, code: Optional[str] = None, response: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code, response)


class ServiceStatusError(GeocodingError):
    """Raised when the service answers with a non-success status.

    Attributes:
        status: Status reported by the service (StatusCode or the raw string if unknown)
        errorMessage: The service's ``error_message`` field, if present
    """

    def __init__(
        self,
        status: "StatusCode | str",
        errorMessage: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        if isinstance(status, StatusCode):
            message = errorMessage or status.description
        else:
            message = errorMessage or f"Unexpected status {status}"
        super().__init__(message, str(status), response)
        self.status = status
        self.errorMessage = errorMessage


class OverQueryLimitError(ServiceStatusError):
    """Raised when the request quota (per second or per day) is exhausted."""


class RequestDeniedError(ServiceStatusError):
    """Raised when the request was denied, usually because of a bad or missing API key."""


class InvalidRequestError(ServiceStatusError):
    """Raised when the query (address, components or latlng) is missing or malformed."""


class UnknownServiceError(ServiceStatusError):
    """Raised on a server side error or on a status this client does not know.

    The request may succeed if you try again.
    """


class ConfigurationError(GeocodingError):
    """Raised when configuration is missing, unreadable or invalid."""

    def __init__(self, message: str, code: Optional[str] = None, response: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code, response)


_STATUS_ERRORS: Dict[StatusCode, type[ServiceStatusError]] = {
    StatusCode.OVER_QUERY_LIMIT: OverQueryLimitError,
    StatusCode.OVER_DAILY_LIMIT: OverQueryLimitError,
    StatusCode.REQUEST_DENIED: RequestDeniedError,
    StatusCode.INVALID_REQUEST: InvalidRequestError,
    StatusCode.UNKNOWN_ERROR: UnknownServiceError,
}


def parseStatusError(status: str, responseData: Optional[Dict[str, Any]] = None) -> ServiceStatusError:
    """Map a non-success reply status to the appropriate exception.

    Args:
        status: ``status`` field of the reply
        responseData: Decoded JSON reply

    Returns:
        Exception instance to raise

    Example:
        >>> if data["status"] not in ("OK", "ZERO_RESULTS"):
        ...     raise parseStatusError(data["status"], data)
    """
    errorMessage = (responseData or {}).get("error_message")
    if not isinstance(errorMessage, str):
        errorMessage = None

    try:
        statusCode = StatusCode(status)
    except ValueError:
        return UnknownServiceError(status, errorMessage, responseData)

    errorClass = _STATUS_ERRORS.get(statusCode, ServiceStatusError)
    return errorClass(statusCode, errorMessage, responseData)
