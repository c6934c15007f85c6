"""QWeather API client SDK."""

from .auth import (
    ApiKeyCredentials,
    AuthMaterial,
    ClientConfig,
    Credentials,
    SignatureCredentials,
    authenticate,
    sign_params,
)
from .config import (
    GEO_API_URL,
    HTTP_TIMEOUT_SECONDS,
    SDK_VERSION,
    STATUS_CODES,
    SUCCESS_CODE,
    WEATHER_API_URL,
    WEATHER_DEV_API_URL,
    get_status_description,
)
from .errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    QWeatherError,
    TransportError,
)
from .models import GeoResponse, QWeatherResponse, Refer, V1Response, V7Response
from .endpoints import ALL_ENDPOINTS, ApiHost, Endpoint, HttpMethod
from .client import QWeatherClient
from .domains.air_quality import (
    AirCurrentResponse,
    AirDailyForecastResponse,
    AirHourlyForecastResponse,
    AirStationResponse,
)
from .domains.geo import CityLookupResponse, Location, PoiResponse, TopCityResponse
from .domains.grid_weather import (
    GridWeatherDailyForecastResponse,
    GridWeatherHourlyForecastResponse,
    GridWeatherNowResponse,
)
from .domains.indices import IndicesForecastResponse
from .domains.tropical import StormForecastResponse
from .domains.warning import WeatherWarningCityListResponse, WeatherWarningResponse
from .domains.weather import (
    MinutelyPrecipitationResponse,
    WeatherDailyForecastResponse,
    WeatherHourlyForecastResponse,
    WeatherNowResponse,
)

__version__ = SDK_VERSION

__all__ = [
    # Client
    "QWeatherClient",
    # Auth
    "ClientConfig",
    "ApiKeyCredentials",
    "SignatureCredentials",
    "Credentials",
    "AuthMaterial",
    "authenticate",
    "sign_params",
    # Errors
    "QWeatherError",
    "ConfigurationError",
    "InvalidArgumentError",
    "TransportError",
    "DecodeError",
    "ApiError",
    # Config
    "GEO_API_URL",
    "WEATHER_API_URL",
    "WEATHER_DEV_API_URL",
    "HTTP_TIMEOUT_SECONDS",
    "SUCCESS_CODE",
    "STATUS_CODES",
    "get_status_description",
    # Endpoints
    "Endpoint",
    "ApiHost",
    "HttpMethod",
    "ALL_ENDPOINTS",
    # Models - envelope
    "QWeatherResponse",
    "V7Response",
    "V1Response",
    "GeoResponse",
    "Refer",
    # Models - responses
    "WeatherNowResponse",
    "WeatherDailyForecastResponse",
    "WeatherHourlyForecastResponse",
    "MinutelyPrecipitationResponse",
    "GridWeatherNowResponse",
    "GridWeatherDailyForecastResponse",
    "GridWeatherHourlyForecastResponse",
    "WeatherWarningResponse",
    "WeatherWarningCityListResponse",
    "IndicesForecastResponse",
    "CityLookupResponse",
    "TopCityResponse",
    "PoiResponse",
    "Location",
    "AirCurrentResponse",
    "AirHourlyForecastResponse",
    "AirDailyForecastResponse",
    "AirStationResponse",
    "StormForecastResponse",
]
