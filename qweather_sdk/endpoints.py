"""
Endpoint definitions for the QWeather SDK.

This module contains:
- Core types: HttpMethod, ApiHost, Endpoint
- Aggregated endpoint registry imported from domain modules

Domain-specific endpoints and their response models are isolated in the
domains/ package. To add a new domain: create domains/newdomain.py and
import its endpoint list here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from .errors import InvalidArgumentError
from .models import QWeatherResponse

T = TypeVar("T", bound=QWeatherResponse)

_RESERVED_PATH_CHARS = ("/", "?", "#", "\\")


class HttpMethod(str, Enum):
    """HTTP methods used by the API. Every current endpoint is a read."""

    GET = "GET"


class ApiHost(str, Enum):
    """Which configured host an endpoint is served from."""

    WEATHER = "weather"
    GEO = "geo"
    SUBSCRIPTION = "subscription"


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """
    Definition of one API endpoint.

    - path: URL path, may contain {param} placeholders
    - response_model: pydantic model the success body is decoded into
    - host: which configured host serves the endpoint
    - path_params: placeholders that must be filled from path arguments
    - allowed_values: accepted values per path parameter, if restricted
    """

    name: str
    path: str
    response_model: type[T]
    host: ApiHost = ApiHost.WEATHER
    method: HttpMethod = HttpMethod.GET
    path_params: tuple[str, ...] = ()
    allowed_values: dict[str, tuple[Any, ...]] = field(default_factory=dict)

    def validate_arguments(self, path_args: dict[str, Any]) -> list[str]:
        """
        Validate path arguments against this endpoint's declaration.

        Returns list of validation errors. Empty list = valid.
        """
        errors: list[str] = []

        for arg in path_args:
            if arg not in self.path_params:
                errors.append(
                    f"Unknown path argument '{arg}' - endpoint '{self.name}' does not accept it"
                )

        for param in self.path_params:
            if param not in path_args:
                errors.append(f"Missing required path parameter: '{param}'")
                continue
            value = path_args[param]
            if not str(value).strip():
                errors.append(f"Path parameter '{param}' cannot be empty")
            elif isinstance(value, str) and (
                any(char in value for char in _RESERVED_PATH_CHARS) or value in (".", "..")
            ):
                errors.append(f"Path parameter '{param}' is not a single path segment: {value!r}")
            allowed = self.allowed_values.get(param)
            # Exact type match: True == 1 and 3.0 == 3 must not pass
            if allowed is not None and not any(
                type(value) is type(choice) and value == choice for choice in allowed
            ):
                errors.append(
                    f"Path parameter '{param}' must be one of {list(allowed)}, got {value!r}"
                )

        return errors

    def build_path(self, path_args: dict[str, Any] | None = None) -> str:
        """Substitute path arguments, raising InvalidArgumentError if invalid."""
        path_args = path_args or {}
        errors = self.validate_arguments(path_args)
        if errors:
            raise InvalidArgumentError(f"{self.name}: " + "; ".join(errors))

        path = self.path
        for param in self.path_params:
            path = path.replace(f"{{{param}}}", quote(str(path_args[param]), safe=""))
        return path


# -----------------------------------------------------------------------------
# Domain Endpoints (imported from isolated domain modules)
# -----------------------------------------------------------------------------

from .domains.air_quality import AIR_QUALITY_ENDPOINTS  # noqa: E402
from .domains.geo import GEO_ENDPOINTS  # noqa: E402
from .domains.grid_weather import GRID_WEATHER_ENDPOINTS  # noqa: E402
from .domains.indices import INDICES_ENDPOINTS  # noqa: E402
from .domains.tropical import TROPICAL_ENDPOINTS  # noqa: E402
from .domains.warning import WARNING_ENDPOINTS  # noqa: E402
from .domains.weather import WEATHER_ENDPOINTS  # noqa: E402


# -----------------------------------------------------------------------------
# Combined Endpoints
# -----------------------------------------------------------------------------

ALL_ENDPOINTS: dict[str, Endpoint[Any]] = {
    endpoint.name: endpoint
    for endpoint in (
        WEATHER_ENDPOINTS
        + GRID_WEATHER_ENDPOINTS
        + GEO_ENDPOINTS
        + WARNING_ENDPOINTS
        + INDICES_ENDPOINTS
        + AIR_QUALITY_ENDPOINTS
        + TROPICAL_ENDPOINTS
    )
}
