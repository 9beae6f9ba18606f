"""
is-railway - Railway environment detection and PostgreSQL configuration.

Detects Railway deployments from their ``railway.internal`` service hostnames
and adjusts PostgreSQL connection settings to match:
- env: detection (is_railway, is_railway_host, get_railway_detection)
- postgres: connection string / SSL configuration (get_postgres_config)
- config: aggregated settings and env-driven options
- logging: loguru-backed log sinks
"""

from is_railway.config import RailwayConfig, RailwaySSLConfig, get_railway_config, options_from_env
from is_railway.config_schema import PostgresConfigOptions
from is_railway.env import (
    RAILWAY_ENV_VARS,
    RAILWAY_INTERNAL_SUFFIX,
    RailwayDetection,
    get_railway_detection,
    is_railway,
    is_railway_host,
)
from is_railway.exceptions import InvalidArgumentError, IsRailwayError
from is_railway.logging import LoguruSink, LogSink, NullSink, setup_logging
from is_railway.postgres import PostgresConfig, SSLSettings, get_postgres_config

__version__ = "0.1.0"

__all__ = [
    "RAILWAY_ENV_VARS",
    "RAILWAY_INTERNAL_SUFFIX",
    "InvalidArgumentError",
    "IsRailwayError",
    "LogSink",
    "LoguruSink",
    "NullSink",
    "PostgresConfig",
    "PostgresConfigOptions",
    "RailwayConfig",
    "RailwayDetection",
    "RailwaySSLConfig",
    "SSLSettings",
    "__version__",
    "get_postgres_config",
    "get_railway_config",
    "get_railway_detection",
    "is_railway",
    "is_railway_host",
    "options_from_env",
    "setup_logging",
]
