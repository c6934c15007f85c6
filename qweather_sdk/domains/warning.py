"""
Weather Warning Domain

Official severe weather warnings and the list of cities currently under one.
https://dev.qweather.com/docs/api/warning/
"""

from __future__ import annotations

from pydantic import Field

from ..endpoints import Endpoint
from ..models import OptionalDateTime, OptionalStr, QWeatherDateTime, QWeatherModel, V7Response


class WeatherWarning(QWeatherModel):
    id: str
    sender: OptionalStr = None
    pub_time: QWeatherDateTime
    title: str
    start_time: OptionalDateTime = None
    end_time: OptionalDateTime = None
    status: str
    level: OptionalStr = None
    severity: OptionalStr = None
    severity_color: OptionalStr = None
    type_: str = Field(alias="type")
    type_name: str
    urgency: OptionalStr = None
    certainty: OptionalStr = None
    text: str
    related: OptionalStr = None


class WarningLocation(QWeatherModel):
    location_id: str


class WeatherWarningResponse(V7Response):
    warning: list[WeatherWarning]


class WeatherWarningCityListResponse(V7Response):
    warning_loc_list: list[WarningLocation]


WEATHER_WARNING = Endpoint(
    name="weather_warning",
    path="/v7/warning/now",
    response_model=WeatherWarningResponse,
)

WEATHER_WARNING_CITY_LIST = Endpoint(
    name="weather_warning_city_list",
    path="/v7/warning/list",
    response_model=WeatherWarningCityListResponse,
)

WARNING_ENDPOINTS: list[Endpoint] = [WEATHER_WARNING, WEATHER_WARNING_CITY_LIST]
