"""
PostgreSQL connection configuration for Railway and local development.

On Railway, Postgres is reached over the private network with a self-signed
certificate, so certificate verification has to be off. Locally there is
usually no SSL at all, so ``sslmode=disable`` is appended unless the caller
already chose an sslmode or asked to keep SSL.

Usage:
    from is_railway import get_postgres_config

    config = get_postgres_config(os.environ["DATABASE_URL"])
    conn = await asyncpg.connect(config.connection_string, ssl=config.ssl_context())
"""

from __future__ import annotations

import ssl
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from is_railway.config_schema import PostgresConfigOptions
from is_railway.env import is_railway
from is_railway.exceptions import InvalidArgumentError
from is_railway.logging import LogSink, default_sink
from is_railway.types import Environ

OVERRIDE_WARNING = "Railway detected: Overriding rejectUnauthorized=true to false for Railway compatibility"
SSL_DISABLED_INFO = "Local environment detected: Added sslmode=disable for optimal PostgreSQL performance"


@dataclass(frozen=True)
class SSLSettings:
    """SSL options to hand to the PostgreSQL driver."""

    reject_unauthorized: bool = False
    ca: str | None = None


@dataclass(frozen=True)
class PostgresConfig:
    """Connection string and SSL settings, possibly adjusted for the environment."""

    connection_string: str
    ssl: SSLSettings = field(default_factory=SSLSettings)
    modified: bool = False

    def ssl_context(self) -> ssl.SSLContext:
        """Build an ``ssl.SSLContext`` matching these settings (for asyncpg and friends)."""
        context = ssl.create_default_context(cadata=self.ssl.ca) if self.ssl.ca else ssl.create_default_context()
        if not self.ssl.reject_unauthorized:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context


def _resolve_options(options: PostgresConfigOptions | Mapping[str, Any] | None) -> PostgresConfigOptions:
    if options is None:
        return PostgresConfigOptions()
    if isinstance(options, PostgresConfigOptions):
        return options
    return PostgresConfigOptions.model_validate(dict(options))


def get_postgres_config(
    connection_string: str | None,
    options: PostgresConfigOptions | Mapping[str, Any] | None = None,
    *,
    env: Environ | None = None,
    log: LogSink | None = None,
) -> PostgresConfig:
    """
    Adjust a PostgreSQL connection string and SSL settings for the current environment.

    Args:
        connection_string: Original connection URL. Required.
        options: A :class:`PostgresConfigOptions` or a dict of its fields.
        env: Environment mapping used for Railway detection. Defaults to ``os.environ``.
        log: Sink for configuration events. Defaults to loguru.

    Returns:
        A :class:`PostgresConfig`; ``modified`` is True when the string or the
        SSL settings were changed.

    Raises:
        InvalidArgumentError: If ``connection_string`` is empty or None.
    """
    if not connection_string:
        raise InvalidArgumentError("Connection string is required")

    opts = _resolve_options(options)
    log = default_sink if log is None else log

    if is_railway(env):
        if opts.reject_unauthorized and opts.enable_logging:
            log.warn(
                OVERRIDE_WARNING,
                {
                    "reason": "Railway uses self-signed certificates that require rejectUnauthorized=false",
                    "originalValue": True,
                    "newValue": False,
                },
            )
        return PostgresConfig(
            connection_string=connection_string,
            ssl=SSLSettings(reject_unauthorized=False, ca=opts.ca),
            modified=True,
        )

    ssl_settings = SSLSettings(reject_unauthorized=opts.reject_unauthorized, ca=opts.ca)
    if opts.force_ssl or "sslmode=" in connection_string:
        return PostgresConfig(connection_string=connection_string, ssl=ssl_settings)

    separator = "&" if "?" in connection_string else "?"
    if opts.enable_logging:
        log.info(
            SSL_DISABLED_INFO,
            {
                "environment": "local",
                "optimization": "sslmode=disable",
                "reason": "Better performance for local development",
            },
        )
    return PostgresConfig(
        connection_string=f"{connection_string}{separator}sslmode=disable",
        ssl=ssl_settings,
        modified=True,
    )
