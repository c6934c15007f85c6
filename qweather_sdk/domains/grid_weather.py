"""
Grid Weather Domain

High resolution (3-5 km) weather for arbitrary coordinates.
https://dev.qweather.com/docs/api/grid-weather/
"""

from __future__ import annotations

from datetime import date

from ..config import GRID_DAILY_DAYS, GRID_HOURLY_HOURS
from ..endpoints import Endpoint
from ..models import OptionalFloat, QWeatherDateTime, QWeatherModel, V7Response


class GridWeatherNow(QWeatherModel):
    obs_time: QWeatherDateTime
    temp: float
    icon: str
    text: str
    wind360: float
    wind_dir: str
    wind_scale: str
    wind_speed: float
    humidity: float
    precip: float
    pressure: float
    cloud: OptionalFloat = None
    dew: OptionalFloat = None


class GridDailyForecast(QWeatherModel):
    fx_date: date
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


class GridHourlyForecast(QWeatherModel):
    fx_time: QWeatherDateTime
    temp: float
    icon: str
    text: str
    wind360: float
    wind_dir: str
    wind_scale: str
    wind_speed: float
    humidity: float
    precip: float
    pressure: float
    cloud: OptionalFloat = None
    dew: OptionalFloat = None


class GridWeatherNowResponse(V7Response):
    now: GridWeatherNow


class GridWeatherDailyForecastResponse(V7Response):
    daily: list[GridDailyForecast]


class GridWeatherHourlyForecastResponse(V7Response):
    hourly: list[GridHourlyForecast]


GRID_WEATHER_NOW = Endpoint(
    name="grid_weather_now",
    path="/v7/grid-weather/now",
    response_model=GridWeatherNowResponse,
)

GRID_WEATHER_DAILY_FORECAST = Endpoint(
    name="grid_weather_daily_forecast",
    path="/v7/grid-weather/{days}d",
    response_model=GridWeatherDailyForecastResponse,
    path_params=("days",),
    allowed_values={"days": GRID_DAILY_DAYS},
)

GRID_WEATHER_HOURLY_FORECAST = Endpoint(
    name="grid_weather_hourly_forecast",
    path="/v7/grid-weather/{hours}h",
    response_model=GridWeatherHourlyForecastResponse,
    path_params=("hours",),
    allowed_values={"hours": GRID_HOURLY_HOURS},
)

GRID_WEATHER_ENDPOINTS: list[Endpoint] = [
    GRID_WEATHER_NOW,
    GRID_WEATHER_DAILY_FORECAST,
    GRID_WEATHER_HOURLY_FORECAST,
]
