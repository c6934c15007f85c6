"""
City Weather Domain

Endpoints for QWeather city weather.
https://dev.qweather.com/docs/api/weather/

This domain provides:
- Real-time weather
- 3-30 day daily forecasts
- 24-168 hour hourly forecasts
- Minutely precipitation (next 2 hours, 5 minute steps)
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from ..config import WEATHER_DAILY_DAYS, WEATHER_HOURLY_HOURS
from ..endpoints import Endpoint
from ..models import (
    OptionalFloat,
    OptionalStr,
    QWeatherDateTime,
    QWeatherModel,
    V7Response,
)


# -----------------------------------------------------------------------------
# Payload Models
# -----------------------------------------------------------------------------


class WeatherNow(QWeatherModel):
    """Observed conditions."""

    obs_time: QWeatherDateTime
    temp: float
    feels_like: float
    icon: str
    text: str
    wind360: float
    wind_dir: str
    wind_scale: str
    wind_speed: float
    humidity: float
    precip: float
    pressure: float
    vis: float
    cloud: OptionalFloat = None
    dew: OptionalFloat = None


class DailyForecast(QWeatherModel):
    """One day of a daily forecast. Sun and moon times may be empty at high latitudes."""

    fx_date: date
    sunrise: OptionalStr = None
    sunset: OptionalStr = None
    moonrise: OptionalStr = None
    moonset: OptionalStr = None
    moon_phase: str
    moon_phase_icon: str
    temp_max: float
    temp_min: float
    icon_day: str
    text_day: str
    icon_night: str
    text_night: str
    wind360_day: float
    wind_dir_day: str
    wind_scale_day: str
    wind_speed_day: float
    wind360_night: float
    wind_dir_night: str
    wind_scale_night: str
    wind_speed_night: float
    humidity: float
    precip: float
    pressure: float
    vis: float
    cloud: OptionalFloat = None
    uv_index: float


class HourlyForecast(QWeatherModel):
    fx_time: QWeatherDateTime
    temp: float
    icon: str
    text: str
    wind360: float
    wind_dir: str
    wind_scale: str
    wind_speed: float
    humidity: float
    pop: OptionalFloat = None
    precip: float
    pressure: float
    cloud: OptionalFloat = None
    dew: OptionalFloat = None


class Minutely(QWeatherModel):
    fx_time: QWeatherDateTime
    precip: float
    # rain or snow
    type_: str = Field(alias="type")


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------


class WeatherNowResponse(V7Response):
    now: WeatherNow


class WeatherDailyForecastResponse(V7Response):
    daily: list[DailyForecast]


class WeatherHourlyForecastResponse(V7Response):
    hourly: list[HourlyForecast]


class MinutelyPrecipitationResponse(V7Response):
    summary: str
    minutely: list[Minutely]


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------

WEATHER_NOW = Endpoint(
    name="weather_now",
    path="/v7/weather/now",
    response_model=WeatherNowResponse,
)

WEATHER_DAILY_FORECAST = Endpoint(
    name="weather_daily_forecast",
    path="/v7/weather/{days}d",
    response_model=WeatherDailyForecastResponse,
    path_params=("days",),
    allowed_values={"days": WEATHER_DAILY_DAYS},
)

WEATHER_HOURLY_FORECAST = Endpoint(
    name="weather_hourly_forecast",
    path="/v7/weather/{hours}h",
    response_model=WeatherHourlyForecastResponse,
    path_params=("hours",),
    allowed_values={"hours": WEATHER_HOURLY_HOURS},
)

MINUTELY_PRECIPITATION = Endpoint(
    name="minutely_precipitation",
    path="/v7/minutely/5m",
    response_model=MinutelyPrecipitationResponse,
)

WEATHER_ENDPOINTS: list[Endpoint] = [
    WEATHER_NOW,
    WEATHER_DAILY_FORECAST,
    WEATHER_HOURLY_FORECAST,
    MINUTELY_PRECIPITATION,
]
