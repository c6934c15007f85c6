"""
QWeather API Client

Async client for the QWeather REST API. Every public method is a thin
mapping onto one Endpoint; all of them go through ``request_api``, which:

1. Builds the URL (tier-dependent host + path + query)
2. Attaches authentication (API key or per-request signature)
3. Issues exactly one HTTP call, with no retries
4. Decodes the JSON envelope and maps non-success codes to ApiError
5. Returns the endpoint's typed response model

Every call either returns a fully validated model or raises exactly one
of TransportError, DecodeError or ApiError.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from .auth import ClientConfig, authenticate
from .config import (
    BODY_SNIPPET_LENGTH,
    GEO_MAX_NUMBER,
    HTTP_ERROR_THRESHOLD,
    POI_MAX_RADIUS,
    SUCCESS_CODE,
    USER_AGENT,
)
from .domains.air_quality import (
    AIR_CURRENT,
    AIR_DAILY_FORECAST,
    AIR_HOURLY_FORECAST,
    AIR_STATION,
    AirCurrentResponse,
    AirDailyForecastResponse,
    AirHourlyForecastResponse,
    AirStationResponse,
)
from .domains.geo import (
    GEO_CITY_LOOKUP,
    GEO_CITY_TOP,
    GEO_POI_LOOKUP,
    GEO_POI_RANGE,
    CityLookupResponse,
    PoiResponse,
    TopCityResponse,
)
from .domains.grid_weather import (
    GRID_WEATHER_DAILY_FORECAST,
    GRID_WEATHER_HOURLY_FORECAST,
    GRID_WEATHER_NOW,
    GridWeatherDailyForecastResponse,
    GridWeatherHourlyForecastResponse,
    GridWeatherNowResponse,
)
from .domains.indices import INDICES_FORECAST, IndicesForecastResponse
from .domains.tropical import STORM_FORECAST, StormForecastResponse
from .domains.warning import (
    WEATHER_WARNING,
    WEATHER_WARNING_CITY_LIST,
    WeatherWarningCityListResponse,
    WeatherWarningResponse,
)
from .domains.weather import (
    MINUTELY_PRECIPITATION,
    WEATHER_DAILY_FORECAST,
    WEATHER_HOURLY_FORECAST,
    WEATHER_NOW,
    MinutelyPrecipitationResponse,
    WeatherDailyForecastResponse,
    WeatherHourlyForecastResponse,
    WeatherNowResponse,
)
from .endpoints import ApiHost, Endpoint, T
from .errors import ApiError, DecodeError, InvalidArgumentError, TransportError
from .models import V1ErrorDetail

logger = logging.getLogger(__name__)


def _check_range(name: str, value: int | float | None, low: int, high: int) -> None:
    if value is not None and not low <= value <= high:
        raise InvalidArgumentError(f"{name} must be between {low} and {high}, got {value!r}")


def _format_coordinate(value: float) -> str:
    """QWeather accepts at most two decimal places."""
    return f"{round(float(value), 2):g}"


class QWeatherClient:
    """
    Async QWeather API client.

    Holds an immutable ClientConfig and a reusable httpx.AsyncClient, so one
    instance can serve any number of concurrent calls. Use as an async
    context manager, or call ``close()`` when done.

    An ``http_client`` may be injected (custom transport, proxies, tests);
    the client does not close a transport it did not create.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config
        self._clock = clock
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def with_key(cls, key: str, **options: Any) -> QWeatherClient:
        """Client authenticating with a plain API key."""
        return cls(ClientConfig.with_key(key, **options))

    @classmethod
    def with_signature(cls, public_id: str, private_key: str, **options: Any) -> QWeatherClient:
        """Client signing each request with a public ID and private key."""
        return cls(ClientConfig.with_signature(public_id, private_key, **options))

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                headers={"User-Agent": USER_AGENT},
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Clean up HTTP client."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> QWeatherClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def api_host(self) -> str:
        """Weather host for the configured tier."""
        return self.config.weather_host

    # -------------------------------------------------------------------------
    # Request Pipeline
    # -------------------------------------------------------------------------

    async def request_api(
        self,
        endpoint: Endpoint[T],
        params: Mapping[str, Any] | None = None,
        path_args: dict[str, Any] | None = None,
    ) -> T:
        """
        Execute one API call and return the endpoint's typed response.

        Raises:
            InvalidArgumentError: path arguments rejected before any I/O
            TransportError: no response was obtained
            DecodeError: the body is not JSON or does not fit the model
            ApiError: the API returned a non-success code
        """
        url = self._host_for(endpoint) + endpoint.build_path(path_args)
        query = self._build_query(params)
        auth = authenticate(self.config.credentials, query, self._clock())

        logger.debug("request %s %s", endpoint.name, url)

        try:
            response = await self.client.request(
                method=endpoint.method.value,
                url=url,
                params=auth.params,
                headers=auth.headers or None,
            )
        except httpx.HTTPError as e:
            logger.debug("%s transport failure: %s", endpoint.name, e)
            raise TransportError(f"{endpoint.name}: {e!s}", cause=e) from e

        return self._decode_response(endpoint, response)

    def _host_for(self, endpoint: Endpoint[Any]) -> str:
        match endpoint.host:
            case ApiHost.GEO:
                return self.config.geo_api_host
            case ApiHost.SUBSCRIPTION:
                return self.config.subscription_host
            case _:
                return self.config.weather_host

    def _build_query(self, params: Mapping[str, Any] | None) -> dict[str, str]:
        """Merge config defaults with call parameters, dropping unset values."""
        query: dict[str, Any] = {"lang": self.config.lang, "unit": self.config.unit}
        query.update({name: value for name, value in (params or {}).items() if value is not None})
        return {name: str(value) for name, value in query.items() if value is not None}

    def _decode_response(self, endpoint: Endpoint[T], response: httpx.Response) -> T:
        """Map a received response to the typed model or one specific error."""
        status = response.status_code

        try:
            body = response.json()
        except ValueError as e:
            logger.debug("%s returned non-JSON body (HTTP %s)", endpoint.name, status)
            raise DecodeError(
                f"{endpoint.name}: response is not valid JSON: {e}",
                body_snippet=response.text[:BODY_SNIPPET_LENGTH],
                status_code=status,
                cause=e,
            ) from e

        if not isinstance(body, dict):
            raise DecodeError(
                f"{endpoint.name}: expected a JSON object, got {type(body).__name__}",
                body_snippet=response.text[:BODY_SNIPPET_LENGTH],
                status_code=status,
            )

        # v1 endpoints report failures as {"error": {...}}
        if isinstance(body.get("error"), dict):
            try:
                error = V1ErrorDetail.model_validate(body["error"])
            except ValidationError:
                error = V1ErrorDetail()
            message = " - ".join(part for part in (error.title, error.detail) if part)
            code = str(error.status or status)
            logger.debug("%s failed with code %s", endpoint.name, code)
            raise ApiError(code, message or None, status_code=status)

        code = body.get("code")
        if code is not None and str(code) != SUCCESS_CODE:
            logger.debug("%s failed with code %s", endpoint.name, code)
            raise ApiError(str(code), status_code=status)

        if code is None and status >= HTTP_ERROR_THRESHOLD:
            raise ApiError(str(status), status_code=status)

        try:
            return endpoint.response_model.model_validate(body)
        except ValidationError as e:
            logger.debug(
                "%s response did not match %s", endpoint.name, endpoint.response_model.__name__
            )
            raise DecodeError(
                f"{endpoint.name}: unexpected response shape: {e}",
                body_snippet=response.text[:BODY_SNIPPET_LENGTH],
                status_code=status,
                cause=e,
            ) from e

    # -------------------------------------------------------------------------
    # City Weather
    # -------------------------------------------------------------------------

    async def weather_now(
        self, location: str, *, lang: str | None = None, unit: str | None = None
    ) -> WeatherNowResponse:
        """
        Real-time weather.

        ``location`` is a LocationID (from the GeoAPI) or a ``lon,lat`` pair,
        e.g. ``101010100`` or ``116.41,39.92``.
        """
        return await self.request_api(
            WEATHER_NOW, {"location": location, "lang": lang, "unit": unit}
        )

    async def weather_daily_forecast(
        self,
        location: str,
        days: int = 3,
        *,
        lang: str | None = None,
        unit: str | None = None,
    ) -> WeatherDailyForecastResponse:
        """Daily forecast for 3, 7, 10, 15 or 30 days."""
        return await self.request_api(
            WEATHER_DAILY_FORECAST,
            {"location": location, "lang": lang, "unit": unit},
            {"days": days},
        )

    async def weather_hourly_forecast(
        self,
        location: str,
        hours: int = 24,
        *,
        lang: str | None = None,
        unit: str | None = None,
    ) -> WeatherHourlyForecastResponse:
        """Hourly forecast for 24, 72 or 168 hours."""
        return await self.request_api(
            WEATHER_HOURLY_FORECAST,
            {"location": location, "lang": lang, "unit": unit},
            {"hours": hours},
        )

    async def minutely_precipitation(
        self, location: str, *, lang: str | None = None
    ) -> MinutelyPrecipitationResponse:
        """Precipitation for the next two hours in 5 minute steps (China only)."""
        return await self.request_api(MINUTELY_PRECIPITATION, {"location": location, "lang": lang})

    # -------------------------------------------------------------------------
    # Grid Weather
    # -------------------------------------------------------------------------

    async def grid_weather_now(
        self, location: str, *, lang: str | None = None, unit: str | None = None
    ) -> GridWeatherNowResponse:
        return await self.request_api(
            GRID_WEATHER_NOW, {"location": location, "lang": lang, "unit": unit}
        )

    async def grid_weather_daily_forecast(
        self,
        location: str,
        days: int = 3,
        *,
        lang: str | None = None,
        unit: str | None = None,
    ) -> GridWeatherDailyForecastResponse:
        return await self.request_api(
            GRID_WEATHER_DAILY_FORECAST,
            {"location": location, "lang": lang, "unit": unit},
            {"days": days},
        )

    async def grid_weather_hourly_forecast(
        self,
        location: str,
        hours: int = 24,
        *,
        lang: str | None = None,
        unit: str | None = None,
    ) -> GridWeatherHourlyForecastResponse:
        return await self.request_api(
            GRID_WEATHER_HOURLY_FORECAST,
            {"location": location, "lang": lang, "unit": unit},
            {"hours": hours},
        )

    # -------------------------------------------------------------------------
    # Warnings & Indices
    # -------------------------------------------------------------------------

    async def weather_warning(
        self, location: str, *, lang: str | None = None
    ) -> WeatherWarningResponse:
        """Active official weather warnings for a location."""
        return await self.request_api(WEATHER_WARNING, {"location": location, "lang": lang})

    async def weather_warning_city_list(self, range: str = "cn") -> WeatherWarningCityListResponse:
        """LocationIDs of cities with an active warning, for an ISO 3166 country code."""
        return await self.request_api(WEATHER_WARNING_CITY_LIST, {"range": range})

    async def indices_forecast(
        self,
        location: str,
        type_: str | int = 0,
        days: int = 1,
        *,
        lang: str | None = None,
    ) -> IndicesForecastResponse:
        """
        Weather lifestyle indices for 1 or 3 days.

        ``type_`` is one index ID, several joined with commas (``"1,2"``),
        or ``0`` for every index.
        """
        return await self.request_api(
            INDICES_FORECAST,
            {"location": location, "type": type_, "lang": lang},
            {"days": days},
        )

    # -------------------------------------------------------------------------
    # GeoAPI
    # -------------------------------------------------------------------------

    async def geo_city_lookup(
        self,
        location: str,
        *,
        adm: str | None = None,
        range: str | None = None,
        number: int | None = None,
        lang: str | None = None,
    ) -> CityLookupResponse:
        """
        City search by name (fuzzy), coordinates, LocationID or Adcode.

        ``adm`` narrows by superior administrative division, ``range`` by
        ISO 3166 country code; ``number`` is 1-20 (API default 10).
        """
        _check_range("number", number, 1, GEO_MAX_NUMBER)
        return await self.request_api(
            GEO_CITY_LOOKUP,
            {"location": location, "adm": adm, "range": range, "number": number, "lang": lang},
        )

    async def geo_city_top(
        self,
        *,
        range: str | None = None,
        number: int | None = None,
        lang: str | None = None,
    ) -> TopCityResponse:
        """Popular cities, optionally limited to one country."""
        _check_range("number", number, 1, GEO_MAX_NUMBER)
        return await self.request_api(
            GEO_CITY_TOP, {"range": range, "number": number, "lang": lang}
        )

    async def geo_poi_lookup(
        self,
        location: str,
        type_: str,
        *,
        city: str | None = None,
        number: int | None = None,
        lang: str | None = None,
    ) -> PoiResponse:
        """POI search by keyword. ``type_`` is ``scenic``, ``CSTA`` or ``TSTA``."""
        _check_range("number", number, 1, GEO_MAX_NUMBER)
        return await self.request_api(
            GEO_POI_LOOKUP,
            {"location": location, "type": type_, "city": city, "number": number, "lang": lang},
        )

    async def geo_poi_range(
        self,
        location: str,
        type_: str,
        *,
        radius: float | None = None,
        number: int | None = None,
        lang: str | None = None,
    ) -> PoiResponse:
        """All POIs of a type within ``radius`` km (1-50, API default 5) of a coordinate."""
        _check_range("radius", radius, 1, POI_MAX_RADIUS)
        _check_range("number", number, 1, GEO_MAX_NUMBER)
        return await self.request_api(
            GEO_POI_RANGE,
            {"location": location, "type": type_, "radius": radius, "number": number, "lang": lang},
        )

    # -------------------------------------------------------------------------
    # Air Quality (v1)
    # -------------------------------------------------------------------------

    def _coordinates(self, latitude: float, longitude: float) -> dict[str, str]:
        _check_range("latitude", latitude, -90, 90)
        _check_range("longitude", longitude, -180, 180)
        return {
            "latitude": _format_coordinate(latitude),
            "longitude": _format_coordinate(longitude),
        }

    async def air_current(
        self, latitude: float, longitude: float, *, lang: str | None = None
    ) -> AirCurrentResponse:
        """Current AQI, pollutant concentrations and health advice at 1x1 km."""
        return await self.request_api(
            AIR_CURRENT, {"lang": lang}, self._coordinates(latitude, longitude)
        )

    async def air_hourly_forecast(
        self, latitude: float, longitude: float, *, lang: str | None = None
    ) -> AirHourlyForecastResponse:
        """Air quality for the next 24 hours."""
        return await self.request_api(
            AIR_HOURLY_FORECAST, {"lang": lang}, self._coordinates(latitude, longitude)
        )

    async def air_daily_forecast(
        self, latitude: float, longitude: float, *, lang: str | None = None
    ) -> AirDailyForecastResponse:
        """Air quality for the next 3 days."""
        return await self.request_api(
            AIR_DAILY_FORECAST, {"lang": lang}, self._coordinates(latitude, longitude)
        )

    async def air_station(self, location_id: str, *, lang: str | None = None) -> AirStationResponse:
        """Pollutant readings from one monitoring station, e.g. ``P58911``."""
        return await self.request_api(AIR_STATION, {"lang": lang}, {"location_id": location_id})

    # -------------------------------------------------------------------------
    # Tropical Cyclone
    # -------------------------------------------------------------------------

    async def storm_forecast(self, storm_id: str) -> StormForecastResponse:
        """Track forecast for one storm, e.g. ``NP2018``. Subscription host only."""
        return await self.request_api(STORM_FORECAST, {"stormid": storm_id})
