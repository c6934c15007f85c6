"""
Credentials and Request Signing

Two authentication modes are supported, modelled as a tagged union:

- ApiKeyCredentials: a static API key, sent as the ``key`` query parameter
  or the ``X-QW-Api-Key`` header.
- SignatureCredentials: a public ID plus private key. Each request carries
  ``publicid``, a unix timestamp ``t`` and an MD5 ``sign`` computed over the
  sorted request parameters. The private key itself never leaves the process.

Reference: https://dev.qweather.com/docs/resource/signature-auth/
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from dataclasses import dataclass, field

from .config import (
    API_KEY_HEADER,
    GEO_API_URL,
    HTTP_TIMEOUT_SECONDS,
    UNITS,
    WEATHER_API_URL,
    WEATHER_DEV_API_URL,
)
from .errors import ConfigurationError

# Parameters that never take part in the signature
_UNSIGNED_PARAMS = frozenset({"sign", "key"})


# -----------------------------------------------------------------------------
# Credentials
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ApiKeyCredentials:
    """Plain API key authentication."""

    key: str = field(repr=False)
    in_header: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key.strip():
            raise ConfigurationError("API key must be a non-empty string")


@dataclass(frozen=True)
class SignatureCredentials:
    """Public ID + private key, used to sign every request."""

    public_id: str
    private_key: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.public_id, str) or not self.public_id.strip():
            raise ConfigurationError("Public ID must be a non-empty string")
        if not isinstance(self.private_key, str) or not self.private_key.strip():
            raise ConfigurationError("Private key must be a non-empty string")


Credentials = ApiKeyCredentials | SignatureCredentials


@dataclass(frozen=True)
class AuthMaterial:
    """Query parameters and headers to send with one request."""

    params: dict[str, str]
    headers: dict[str, str]


def sign_params(params: Mapping[str, str], private_key: str) -> str:
    """
    Compute the QWeather request signature.

    Parameters named ``sign`` or ``key`` and parameters with empty values are
    excluded. The rest are sorted by name, joined as ``k=v`` pairs with ``&``,
    the private key is appended, and the lowercase hex MD5 is returned.
    """
    canonical = "&".join(
        f"{name}={value}"
        for name, value in sorted(params.items())
        if name.lower() not in _UNSIGNED_PARAMS and value != ""
    )
    return hashlib.md5((canonical + private_key).encode("utf-8")).hexdigest()


def authenticate(
    credentials: Credentials,
    params: Mapping[str, str],
    timestamp: float,
) -> AuthMaterial:
    """
    Produce the authentication material for a request.

    Pure: the same credentials, params and timestamp always give the same
    result. ``params`` is not modified.
    """
    match credentials:
        case ApiKeyCredentials(key=key, in_header=True):
            return AuthMaterial(params=dict(params), headers={API_KEY_HEADER: key})

        case ApiKeyCredentials(key=key):
            return AuthMaterial(params={**params, "key": key}, headers={})

        case SignatureCredentials(public_id=public_id, private_key=private_key):
            signed = {**params, "publicid": public_id, "t": str(int(timestamp))}
            signed["sign"] = sign_params(signed, private_key)
            return AuthMaterial(params=signed, headers={})

        case _:
            raise ConfigurationError(
                f"Unsupported credentials type: {type(credentials).__name__}"
            )


# -----------------------------------------------------------------------------
# Client Configuration
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable client configuration.

    Shared read-only by every request a client issues. Use the
    ``with_key`` / ``with_signature`` constructors rather than building
    credentials by hand.
    """

    credentials: Credentials
    subscription: bool = False
    api_host: str | None = None
    geo_host: str | None = None
    lang: str | None = None
    unit: str | None = None
    timeout: float = HTTP_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not isinstance(self.credentials, (ApiKeyCredentials, SignatureCredentials)):
            raise ConfigurationError(
                "credentials must be ApiKeyCredentials or SignatureCredentials"
            )
        for name in ("api_host", "geo_host"):
            host = getattr(self, name)
            if host is not None and not host.startswith(("https://", "http://")):
                raise ConfigurationError(f"{name} must be an http(s) URL, got {host!r}")
        if self.unit is not None and self.unit not in UNITS:
            raise ConfigurationError(f"unit must be one of {UNITS}, got {self.unit!r}")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ConfigurationError(f"timeout must be a number, got {self.timeout!r}")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @classmethod
    def with_key(cls, key: str, *, in_header: bool = False, **options) -> ClientConfig:
        """Configuration authenticating with a plain API key."""
        return cls(credentials=ApiKeyCredentials(key, in_header=in_header), **options)

    @classmethod
    def with_signature(cls, public_id: str, private_key: str, **options) -> ClientConfig:
        """Configuration signing each request with a public ID and private key."""
        return cls(credentials=SignatureCredentials(public_id, private_key), **options)

    @property
    def weather_host(self) -> str:
        """Weather host for the configured tier."""
        if self.api_host:
            return self.api_host.rstrip("/")
        return WEATHER_API_URL if self.subscription else WEATHER_DEV_API_URL

    @property
    def subscription_host(self) -> str:
        """Host for endpoints only offered on the paid tier."""
        return (self.api_host or WEATHER_API_URL).rstrip("/")

    @property
    def geo_api_host(self) -> str:
        return (self.geo_host or GEO_API_URL).rstrip("/")
