"""
QWeather Failure Types

Canonical failure taxonomy for the SDK.
Every failure surfaced by a client call is an instance of one of these types.
"""

from __future__ import annotations

from .config import RETRYABLE_STATUS_CODES, get_status_description


class QWeatherError(Exception):
    """Base class for all SDK failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(QWeatherError):
    """
    The client was constructed with unusable credentials or settings.

    - Raised at construction time, never at call time.
    - A misconfigured client cannot issue a single request.
    """

    failure_category = "configuration_error"


class InvalidArgumentError(QWeatherError, ValueError):
    """
    A caller-supplied argument is outside what the endpoint accepts.

    Raised before the request is built, so no network call is made.
    """

    failure_category = "invalid_argument"


class TransportError(QWeatherError):
    """
    Communication with the API failed before a response was obtained.

    Connection, TLS, timeout and read failures land here. The underlying
    httpx exception is kept in ``cause``. Not retried by the SDK.
    """

    failure_category = "transport_error"


class DecodeError(QWeatherError):
    """
    The response body could not be decoded into the expected model.

    Covers non-JSON bodies and JSON that does not match the endpoint's
    response shape. ``body_snippet`` holds the start of the raw body.
    """

    failure_category = "decode_error"

    def __init__(
        self,
        message: str,
        *,
        body_snippet: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.body_snippet = body_snippet
        self.status_code = status_code


class ApiError(QWeatherError):
    """
    The API answered with a non-success status code.

    This is the normal path for invalid locations, exhausted quota,
    bad signatures and similar conditions. ``code`` is the QWeather
    status code as a string (e.g. ``"401"``).
    """

    failure_category = "api_error"

    def __init__(
        self,
        code: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        self.code = code
        self.message = message or get_status_description(code)
        self.status_code = status_code
        super().__init__(f"QWeather API error {code}: {self.message}")

    @property
    def retryable(self) -> bool:
        """Whether a later identical call may succeed."""
        return self.code in RETRYABLE_STATUS_CODES
