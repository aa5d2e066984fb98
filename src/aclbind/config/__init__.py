"""Application configuration helpers."""

from __future__ import annotations

from .consul import (
    CONSUL_DEFAULT_ADDRESS,
    CONSUL_TOKEN_HEADER,
    ConsulConfig,
    get_consul_config,
    normalize_address,
)
from .env import optional_env_var
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging

__all__ = [
    "CONSUL_DEFAULT_ADDRESS",
    "CONSUL_TOKEN_HEADER",
    "ConfigurationError",
    "ConsulConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_consul_config",
    "normalize_address",
    "optional_env_var",
]
