"""
Weather Indices Domain

Lifestyle indices (sport, car wash, UV, dressing, ...) for 1 or 3 days.
https://dev.qweather.com/docs/api/indices/
"""

from __future__ import annotations

import datetime

from pydantic import Field

from ..config import INDICES_DAYS
from ..endpoints import Endpoint
from ..models import OptionalStr, QWeatherModel, V7Response


class DailyIndex(QWeatherModel):
    date: datetime.date
    type_: int = Field(alias="type")
    name: str
    level: int
    category: str
    text: OptionalStr = None


class IndicesForecastResponse(V7Response):
    daily: list[DailyIndex]


INDICES_FORECAST = Endpoint(
    name="indices_forecast",
    path="/v7/indices/{days}d",
    response_model=IndicesForecastResponse,
    path_params=("days",),
    allowed_values={"days": INDICES_DAYS},
)

INDICES_ENDPOINTS: list[Endpoint] = [INDICES_FORECAST]
