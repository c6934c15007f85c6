"""
Tropical Cyclone Domain

Storm track forecasts. Only offered on the paid subscription host.
https://dev.qweather.com/docs/api/tropical-cyclone/
"""

from __future__ import annotations

from pydantic import Field

from ..endpoints import ApiHost, Endpoint
from ..models import OptionalFloat, OptionalStr, QWeatherDateTime, QWeatherModel, V7Response


class StormForecast(QWeatherModel):
    fx_time: QWeatherDateTime
    lat: float
    lon: float
    type_: str = Field(alias="type")
    pressure: float
    wind_speed: float
    move_speed: OptionalFloat = None
    move_dir: OptionalStr = None
    move360: OptionalFloat = None


class StormForecastResponse(V7Response):
    forecast: list[StormForecast]


STORM_FORECAST = Endpoint(
    name="storm_forecast",
    path="/v7/tropical/storm-forecast",
    response_model=StormForecastResponse,
    host=ApiHost.SUBSCRIPTION,
)

TROPICAL_ENDPOINTS: list[Endpoint] = [STORM_FORECAST]
