"""
Shared test fixtures for QWeather SDK tests.

Provides a recording fake transport, client factories, and sample payloads
taken from the QWeather documentation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from qweather_sdk.auth import ClientConfig
from qweather_sdk.client import QWeatherClient


FIXED_TIMESTAMP = 1700000000.0


# -----------------------------------------------------------------------------
# Fake HTTP Transport
# -----------------------------------------------------------------------------


class FakeTransport(httpx.AsyncBaseTransport):
    """
    Transport that returns predefined responses and records every request.

    Responses map URL paths to (status_code, body). A dict or list body is
    sent as JSON; a str body is sent verbatim. Passing ``error`` makes every
    request raise that exception instead.
    """

    def __init__(
        self,
        responses: dict[str, tuple[int, Any]] | None = None,
        *,
        error: Exception | None = None,
    ):
        self.responses = responses or {}
        self.error = error
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.error is not None:
            raise self.error

        path = request.url.path
        if path not in self.responses:
            return httpx.Response(404, json={"code": "404"})

        status, body = self.responses[path]
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


ClientFactory = Callable[..., tuple[QWeatherClient, FakeTransport]]


@pytest.fixture
def key_config() -> ClientConfig:
    return ClientConfig.with_key("test-key")


@pytest.fixture
def signature_config() -> ClientConfig:
    return ClientConfig.with_signature("HE1234", "abcdef")


@pytest.fixture
def make_client(key_config: ClientConfig) -> ClientFactory:
    """Build a client wired to a FakeTransport."""

    def factory(
        responses: dict[str, tuple[int, Any]] | None = None,
        *,
        config: ClientConfig | None = None,
        error: Exception | None = None,
    ) -> tuple[QWeatherClient, FakeTransport]:
        transport = FakeTransport(responses, error=error)
        client = QWeatherClient(
            config or key_config,
            http_client=httpx.AsyncClient(transport=transport),
            clock=lambda: FIXED_TIMESTAMP,
        )
        return client, transport

    return factory


# -----------------------------------------------------------------------------
# Sample Payloads
# -----------------------------------------------------------------------------


REFER = {"sources": ["QWeather"], "license": ["QWeather Developers License"]}

WEATHER_NOW_DATA = {
    "code": "200",
    "updateTime": "2020-06-30T22:00+08:00",
    "fxLink": "http://hfx.link/2ax1",
    "now": {
        "obsTime": "2020-06-30T21:40+08:00",
        "temp": "24",
        "feelsLike": "26",
        "icon": "101",
        "text": "多云",
        "wind360": "123",
        "windDir": "东南风",
        "windScale": "1",
        "windSpeed": "3",
        "humidity": "72",
        "precip": "0.0",
        "pressure": "1003",
        "vis": "16",
        "cloud": "10",
        "dew": "21",
    },
    "refer": {"sources": ["QWeather", "NMC", "ECMWF"], "license": ["QWeather Developers License"]},
}

WEATHER_DAILY_DATA = {
    "code": "200",
    "updateTime": "2021-11-15T16:35+08:00",
    "fxLink": "http://hfx.link/2ax1",
    "daily": [
        {
            "fxDate": "2021-11-15",
            "sunrise": "06:58",
            "sunset": "16:59",
            "moonrise": "15:16",
            "moonset": "03:40",
            "moonPhase": "盈凸月",
            "moonPhaseIcon": "803",
            "tempMax": "12",
            "tempMin": "-1",
            "iconDay": "101",
            "textDay": "多云",
            "iconNight": "150",
            "textNight": "晴",
            "wind360Day": "45",
            "windDirDay": "东北风",
            "windScaleDay": "1-2",
            "windSpeedDay": "3",
            "wind360Night": "0",
            "windDirNight": "北风",
            "windScaleNight": "1-2",
            "windSpeedNight": "3",
            "humidity": "65",
            "precip": "0.0",
            "pressure": "1020",
            "vis": "25",
            "cloud": "4",
            "uvIndex": "3",
        }
    ],
    "refer": REFER,
}

WEATHER_WARNING_DATA = {
    "code": "200",
    "updateTime": "2023-04-03T14:20+08:00",
    "fxLink": "https://www.qweather.com/severe-weather/shanghai-101020100.html",
    "warning": [
        {
            "id": "10102010020230403103000500681616",
            "sender": "上海中心气象台",
            "pubTime": "2023-04-03T10:30+08:00",
            "title": "上海中心气象台发布大风蓝色预警[Ⅳ级/一般]",
            "startTime": "2023-04-03T10:30+08:00",
            "endTime": "",
            "status": "active",
            "level": "",
            "severity": "Minor",
            "severityColor": "Blue",
            "type": "1006",
            "typeName": "大风",
            "urgency": "",
            "certainty": "",
            "text": "受江淮气旋影响，预计明天傍晚以前本市大部地区将出现6级阵风7-8级的东南大风。",
            "related": "",
        }
    ],
    "refer": {"sources": ["12379"], "license": ["QWeather Developers License"]},
}

INDICES_DATA = {
    "code": "200",
    "updateTime": "2021-12-16T18:35+08:00",
    "fxLink": "http://hfx.link/2ax2",
    "daily": [
        {
            "date": "2021-12-16",
            "type": "1",
            "name": "运动指数",
            "level": "3",
            "category": "较不宜",
            "text": "天气较好，但考虑天气寒冷，风力较强，推荐您进行室内运动。",
        },
        {
            "date": "2021-12-16",
            "type": "2",
            "name": "洗车指数",
            "level": "3",
            "category": "较不宜",
            "text": "较不宜洗车，未来一天无雨，风力较大。",
        },
    ],
    "refer": REFER,
}

CITY_LOOKUP_DATA = {
    "code": "200",
    "location": [
        {
            "name": "北京",
            "id": "101010100",
            "lat": "39.90499",
            "lon": "116.40529",
            "adm2": "北京",
            "adm1": "北京市",
            "country": "中国",
            "tz": "Asia/Shanghai",
            "utcOffset": "+08:00",
            "isDst": "0",
            "type": "city",
            "rank": "10",
            "fxLink": "https://www.qweather.com/weather/beijing-101010100.html",
        }
    ],
    "refer": REFER,
}

AIR_CURRENT_DATA = {
    "metadata": {"tag": "d75a323239766b831889e8020cba5aca9b90fca5080a1175c3487fd8acb06e84"},
    "indexes": [
        {
            "code": "us-epa",
            "name": "AQI (US)",
            "aqi": 46,
            "aqiDisplay": "46",
            "level": "1",
            "category": "Good",
            "color": {"red": 0, "green": 228, "blue": 0, "alpha": 1},
            "primaryPollutant": {
                "code": "pm2p5",
                "name": "PM 2.5",
                "fullName": "Fine particulate matter (<2.5µm)",
            },
            "health": {
                "effect": "No health effects.",
                "advice": {
                    "generalPopulation": "Everyone can continue their outdoor activities normally.",
                    "sensitivePopulation": "Everyone can continue their outdoor activities normally.",
                },
            },
        }
    ],
    "pollutants": [
        {
            "code": "pm2p5",
            "name": "PM 2.5",
            "fullName": "Fine particulate matter (<2.5µm)",
            "concentration": {"value": 11.0, "unit": "μg/m3"},
            "subIndexes": [{"code": "us-epa", "aqi": 46, "aqiDisplay": "46"}],
        }
    ],
    "stations": [{"id": "P51762", "name": "North Holywood"}],
}

AIR_STATION_DATA = {
    "metadata": {
        "tag": "f5306fd35a92320f12995584ac41178d299e0431fc6568387fd0b00dd2b581a0",
        "sources": ["中国环境监测总站 (CNEMC)。"],
    },
    "pollutants": [
        {
            "code": "pm2p5",
            "name": "PM 2.5",
            "fullName": "颗粒物（粒径小于等于2.5µm）",
            "concentration": {"unit": "μg/m3", "value": 12.0},
        },
        {
            "code": "co",
            "name": "CO",
            "fullName": "一氧化碳",
            "concentration": {"unit": "mg/m3", "value": 0.4},
        },
    ],
}

STORM_FORECAST_DATA = {
    "code": "200",
    "updateTime": "2021-07-27T03:00+00:00",
    "fxLink": "https://www.qweather.com",
    "forecast": [
        {
            "fxTime": "2021-07-27T20:00+08:00",
            "lat": "31.7",
            "lon": "118.4",
            "type": "TS",
            "pressure": "990",
            "windSpeed": "18",
            "moveSpeed": "",
            "moveDir": "",
            "move360": "",
        },
        {
            "fxTime": "2021-07-28T08:00+08:00",
            "lat": "32.5",
            "lon": "117.4",
            "type": "TD",
            "pressure": "992",
            "windSpeed": "15",
            "moveSpeed": "12",
            "moveDir": "NNW",
            "move360": "337",
        },
    ],
    "refer": {"sources": ["NMC"], "license": ["QWeather Developers License"]},
}

GRID_NOW_DATA = {
    "code": "200",
    "updateTime": "2021-12-16T18:25+08:00",
    "fxLink": "https://www.qweather.com",
    "now": {
        "obsTime": "2021-12-16T10:00+00:00",
        "temp": "-1",
        "icon": "150",
        "text": "晴",
        "wind360": "287",
        "windDir": "西北风",
        "windScale": "2",
        "windSpeed": "10",
        "humidity": "27",
        "precip": "0.0",
        "pressure": "1021",
        "cloud": "",
        "dew": "-17",
    },
    "refer": REFER,
}
