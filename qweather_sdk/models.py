"""
QWeather Response Models

Pydantic schemas for the response envelope shared by every endpoint.
Endpoint-specific payload models live in the domains/ package.

QWeather encodes most numbers as strings and uses empty strings for
missing values, so the field types below coerce both.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .config import SUCCESS_CODE


# -----------------------------------------------------------------------------
# Field Types
# -----------------------------------------------------------------------------


def _empty_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _parse_datetime(value: Any) -> Any:
    """Parse QWeather timestamps such as ``2021-12-16T18:35+08:00``."""
    if isinstance(value, str):
        value = value.strip()
        return datetime.fromisoformat(value) if value else None
    return value


OptionalFloat = Annotated[float | None, BeforeValidator(_empty_to_none)]
OptionalInt = Annotated[int | None, BeforeValidator(_empty_to_none)]
OptionalStr = Annotated[str | None, BeforeValidator(_empty_to_none)]

QWeatherDateTime = Annotated[datetime, BeforeValidator(_parse_datetime)]
OptionalDateTime = Annotated[datetime | None, BeforeValidator(_parse_datetime)]


class QWeatherModel(BaseModel):
    """Base for all response models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# -----------------------------------------------------------------------------
# Envelope
# -----------------------------------------------------------------------------


class Refer(QWeatherModel):
    """Data sources and license statements. Either list may be empty."""

    sources: list[str] = Field(default_factory=list)
    license: list[str] = Field(default_factory=list)


class QWeatherResponse(QWeatherModel):
    """
    Envelope shared by every endpoint.

    ``code`` is absent on the v1 air-quality endpoints; its absence counts
    as success.
    """

    code: str | None = None

    @property
    def is_success(self) -> bool:
        return self.code is None or self.code == SUCCESS_CODE


class V7Response(QWeatherResponse):
    """Envelope of the v7 weather endpoints, carrying refresh metadata."""

    update_time: QWeatherDateTime
    fx_link: OptionalStr = None
    refer: Refer = Field(default_factory=Refer)


class GeoResponse(QWeatherResponse):
    """Envelope of the v2 GeoAPI endpoints (no refresh metadata)."""

    refer: Refer = Field(default_factory=Refer)


class MetaData(QWeatherModel):
    """Metadata of the v1 air-quality endpoints."""

    tag: str
    sources: list[str] | None = None


class V1Response(QWeatherResponse):
    """Envelope of the v1 air-quality endpoints."""

    metadata: MetaData


class V1ErrorDetail(QWeatherModel):
    """Error object returned by v1 endpoints in place of a payload."""

    status: int | None = None
    type: str | None = None
    title: str | None = None
    detail: str | None = None
    invalid_params: list[str] | None = None
