"""
Air Quality Domain (v1)

Current, hourly and daily air quality for coordinates, plus raw pollutant
readings from monitoring stations.
https://dev.qweather.com/docs/api/air-quality/

The v1 responses carry a ``metadata`` block instead of the v7 ``code`` /
``updateTime`` fields. Coordinates are path segments, not query parameters.
"""

from __future__ import annotations

from ..endpoints import Endpoint
from ..models import OptionalStr, QWeatherDateTime, QWeatherModel, V1Response


class RGBA(QWeatherModel):
    red: int
    green: int
    blue: int
    alpha: float


class PrimaryPollutant(QWeatherModel):
    code: str
    name: str
    full_name: str


class HealthAdvice(QWeatherModel):
    general_population: OptionalStr = None
    sensitive_population: OptionalStr = None


class Health(QWeatherModel):
    effect: OptionalStr = None
    advice: HealthAdvice | None = None


class AirQualityIndex(QWeatherModel):
    """One AQI under a given standard (e.g. ``us-epa``, ``qaqi``)."""

    code: str
    name: str
    aqi: float
    aqi_display: str
    level: OptionalStr = None
    category: OptionalStr = None
    color: RGBA
    primary_pollutant: PrimaryPollutant | None = None
    health: Health | None = None


class Concentration(QWeatherModel):
    value: float
    unit: str


class SubIndex(QWeatherModel):
    code: str
    aqi: float
    aqi_display: str


class Pollutant(QWeatherModel):
    code: str
    name: str
    full_name: str
    concentration: Concentration
    sub_indexes: list[SubIndex] | None = None


class Station(QWeatherModel):
    id: str
    name: str


class HourlyAirQuality(QWeatherModel):
    forecast_time: QWeatherDateTime
    indexes: list[AirQualityIndex]
    pollutants: list[Pollutant] | None = None


class DailyAirQuality(QWeatherModel):
    forecast_start_time: QWeatherDateTime
    forecast_end_time: QWeatherDateTime
    indexes: list[AirQualityIndex]
    pollutants: list[Pollutant] | None = None


class AirCurrentResponse(V1Response):
    indexes: list[AirQualityIndex]
    pollutants: list[Pollutant] | None = None
    stations: list[Station] | None = None


class AirHourlyForecastResponse(V1Response):
    hours: list[HourlyAirQuality]


class AirDailyForecastResponse(V1Response):
    days: list[DailyAirQuality]


class AirStationResponse(V1Response):
    pollutants: list[Pollutant]


AIR_CURRENT = Endpoint(
    name="air_current",
    path="/airquality/v1/current/{latitude}/{longitude}",
    response_model=AirCurrentResponse,
    path_params=("latitude", "longitude"),
)

AIR_HOURLY_FORECAST = Endpoint(
    name="air_hourly_forecast",
    path="/airquality/v1/hourly/{latitude}/{longitude}",
    response_model=AirHourlyForecastResponse,
    path_params=("latitude", "longitude"),
)

AIR_DAILY_FORECAST = Endpoint(
    name="air_daily_forecast",
    path="/airquality/v1/daily/{latitude}/{longitude}",
    response_model=AirDailyForecastResponse,
    path_params=("latitude", "longitude"),
)

AIR_STATION = Endpoint(
    name="air_station",
    path="/airquality/v1/station/{location_id}",
    response_model=AirStationResponse,
    path_params=("location_id",),
)

AIR_QUALITY_ENDPOINTS: list[Endpoint] = [
    AIR_CURRENT,
    AIR_HOURLY_FORECAST,
    AIR_DAILY_FORECAST,
    AIR_STATION,
]
