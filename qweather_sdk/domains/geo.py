"""
GeoAPI Domain

City and point-of-interest lookup, served from the GeoAPI host.
https://dev.qweather.com/docs/api/geoapi/

Location IDs returned here feed every weather endpoint.
"""

from __future__ import annotations

from pydantic import Field

from ..endpoints import ApiHost, Endpoint
from ..models import GeoResponse, OptionalStr, QWeatherModel


class Location(QWeatherModel):
    """A city or POI."""

    name: str
    id: str
    lat: float
    lon: float
    adm2: OptionalStr = None
    adm1: OptionalStr = None
    country: OptionalStr = None
    tz: OptionalStr = None
    utc_offset: OptionalStr = None
    is_dst: bool = False
    type_: str = Field(alias="type")
    rank: int
    fx_link: OptionalStr = None


class CityLookupResponse(GeoResponse):
    location: list[Location]


class TopCityResponse(GeoResponse):
    top_city_list: list[Location]


class PoiResponse(GeoResponse):
    poi: list[Location]


GEO_CITY_LOOKUP = Endpoint(
    name="geo_city_lookup",
    path="/v2/city/lookup",
    response_model=CityLookupResponse,
    host=ApiHost.GEO,
)

GEO_CITY_TOP = Endpoint(
    name="geo_city_top",
    path="/v2/city/top",
    response_model=TopCityResponse,
    host=ApiHost.GEO,
)

GEO_POI_LOOKUP = Endpoint(
    name="geo_poi_lookup",
    path="/v2/poi/lookup",
    response_model=PoiResponse,
    host=ApiHost.GEO,
)

GEO_POI_RANGE = Endpoint(
    name="geo_poi_range",
    path="/v2/poi/range",
    response_model=PoiResponse,
    host=ApiHost.GEO,
)

GEO_ENDPOINTS: list[Endpoint] = [
    GEO_CITY_LOOKUP,
    GEO_CITY_TOP,
    GEO_POI_LOOKUP,
    GEO_POI_RANGE,
]
