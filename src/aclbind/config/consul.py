"""Consul HTTP API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig

CONSUL_DEFAULT_ADDRESS = "http://127.0.0.1:8500"
CONSUL_DEFAULT_TIMEOUT_SECONDS = 10.0
CONSUL_TOKEN_HEADER = "X-Consul-Token"


@dataclass(frozen=True)
class ConsulConfig:
    """Holds the connection settings for the Consul HTTP API."""

    address: str
    resilience: ResilienceConfig
    token: str | None = None


def normalize_address(address: str) -> str:
    """Return ``address`` with a scheme and without a trailing slash."""

    value = address.strip()
    if not value:
        raise ConfigurationError("Consul address must not be blank")
    if "://" not in value:
        value = f"http://{value}"
    return value.rstrip("/")


def _parse_timeout(raw: str | None) -> float:
    if raw is None:
        return CONSUL_DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid CONSUL_HTTP_TIMEOUT: {raw}") from exc
    if timeout <= 0:
        raise ConfigurationError("CONSUL_HTTP_TIMEOUT must be positive")
    return timeout


def get_consul_config(
    *,
    address: str | None = None,
    token: str | None = None,
    resilience: ResilienceConfig | None = None,
) -> ConsulConfig:
    """Build the Consul configuration; explicit arguments win over the environment."""

    effective_address = normalize_address(
        address or optional_env_var("CONSUL_HTTP_ADDR", CONSUL_DEFAULT_ADDRESS) or ""
    )
    effective_token = token or optional_env_var("CONSUL_HTTP_TOKEN")
    timeout = _parse_timeout(optional_env_var("CONSUL_HTTP_TIMEOUT"))

    headers = {CONSUL_TOKEN_HEADER: effective_token} if effective_token else None
    return ConsulConfig(
        address=effective_address,
        token=effective_token,
        resilience=resilience
        or ResilienceConfig(
            name="consul",
            base_url=effective_address,
            timeout_seconds=timeout,
            ratelimit=RateLimit(max_calls=20, per_seconds=1.0),
            default_headers=headers,
        ),
    )
