"""
Centralized configuration for the QWeather SDK.

All API hosts, status codes, and accepted parameter ranges in one place.
"""

from __future__ import annotations

# -----------------------------------------------------------------------------
# API Hosts
# -----------------------------------------------------------------------------

GEO_API_URL = "https://geoapi.qweather.com"

# Paid subscription tier
WEATHER_API_URL = "https://api.qweather.com"

# Free developer tier
WEATHER_DEV_API_URL = "https://devapi.qweather.com"

# -----------------------------------------------------------------------------
# HTTP Configuration
# -----------------------------------------------------------------------------

HTTP_ERROR_THRESHOLD = 400
HTTP_TIMEOUT_SECONDS = 30.0
API_KEY_HEADER = "X-QW-Api-Key"

# Longest slice of a raw body kept on a DecodeError
BODY_SNIPPET_LENGTH = 200

# -----------------------------------------------------------------------------
# Status Codes
# Reference: https://dev.qweather.com/docs/resource/status-code/
# -----------------------------------------------------------------------------

SUCCESS_CODE = "200"

STATUS_CODES: dict[str, str] = {
    "200": "Success",
    "204": "No data for the requested location",
    "400": "Invalid request parameters",
    "401": "Authentication failed",
    "402": "Quota exceeded or insufficient balance",
    "403": "Access denied",
    "404": "Requested data or location does not exist",
    "429": "Too many requests",
    "500": "Server error or timeout",
}

RETRYABLE_STATUS_CODES = frozenset({"429", "500"})


def get_status_description(code: str) -> str:
    """Get human-readable description of a QWeather status code."""
    return STATUS_CODES.get(code, f"Status code {code}")


# -----------------------------------------------------------------------------
# Accepted Ranges
# -----------------------------------------------------------------------------

WEATHER_DAILY_DAYS = (3, 7, 10, 15, 30)
WEATHER_HOURLY_HOURS = (24, 72, 168)
GRID_DAILY_DAYS = (3, 7)
GRID_HOURLY_HOURS = (24, 72)
INDICES_DAYS = (1, 3)

GEO_MAX_NUMBER = 20
POI_MAX_RADIUS = 50

UNITS = ("m", "i")

# -----------------------------------------------------------------------------
# SDK Metadata
# -----------------------------------------------------------------------------

SDK_NAME = "qweather-sdk"
SDK_VERSION = "0.4.0"
USER_AGENT = f"{SDK_NAME}/{SDK_VERSION}"
