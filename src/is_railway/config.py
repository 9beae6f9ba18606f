"""
Railway-aware configuration views.

``get_railway_config()`` summarises one environment scan as a settings object,
so callers don't have to interpret ``RailwayDetection`` themselves.

``options_from_env()`` builds ``PostgresConfigOptions`` from prefixed
environment variables, one per field:

    IS_RAILWAY_REJECT_UNAUTHORIZED=true
    IS_RAILWAY_CA=...
    IS_RAILWAY_FORCE_SSL=1
    IS_RAILWAY_ENABLE_LOGGING=false

Values are coerced by pydantic; unset variables keep the model defaults.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field
from typing import Any

from is_railway.config_schema import PostgresConfigOptions
from is_railway.env import get_railway_detection
from is_railway.exceptions import InvalidArgumentError
from is_railway.types import Environ, EnvironmentName

_DEFAULT_ENV_PREFIX = "IS_RAILWAY_"


@dataclass(frozen=True)
class RailwaySSLConfig:
    """SSL expectations for Railway services."""

    enabled: bool = False
    reject_unauthorized: bool = False
    validate_certificate: bool = False


@dataclass(frozen=True)
class RailwayConfig:
    """Consolidated view of a Railway detection."""

    is_railway: bool = False
    ssl: RailwaySSLConfig = field(default_factory=RailwaySSLConfig)
    environment: EnvironmentName = "local"
    detected_services: tuple[str, ...] = ()
    hosts: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        """Return the config as nested plain dicts and lists."""
        data = asdict(self)
        data["detected_services"] = list(self.detected_services)
        data["hosts"] = list(self.hosts)
        return data


def get_railway_config(env: Environ | None = None) -> RailwayConfig:
    """Detect Railway and return the matching settings."""
    detection = get_railway_detection(env)
    return RailwayConfig(
        is_railway=detection.is_railway,
        ssl=RailwaySSLConfig(enabled=detection.is_railway),
        environment="railway" if detection.is_railway else "local",
        detected_services=detection.detected_vars,
        hosts=detection.railway_hosts,
    )


def options_from_env(env: Environ | None = None, prefix: str = _DEFAULT_ENV_PREFIX) -> PostgresConfigOptions:
    """
    Build ``PostgresConfigOptions`` from prefixed environment variables.

    Args:
        env: Environment mapping. Defaults to ``os.environ``.
        prefix: Variable prefix; field names are upper-cased after it.

    Raises:
        InvalidArgumentError: If ``prefix`` is empty.
        pydantic.ValidationError: If a value can't be coerced to its field type.
    """
    if not prefix:
        raise InvalidArgumentError("Environment prefix is required")
    env = os.environ if env is None else env

    values: dict[str, str] = {}
    for name in PostgresConfigOptions.model_fields:
        env_key = prefix + name.upper()
        if env_key in env:
            values[name] = env[env_key]
    return PostgresConfigOptions.model_validate(values)
