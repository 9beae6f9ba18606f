"""
Railway environment detection.

Railway exposes its private network through hostnames ending in
``railway.internal``. Services linked to a Railway database get URL variables
(DATABASE_URL, REDIS_URL, ...) pointing at those hosts, so inspecting them is
enough to tell a Railway deployment from a local machine.

Every function takes an optional ``env`` mapping. When omitted, ``os.environ``
is read at call time; nothing is ever written back.

Usage:
    from is_railway import is_railway, get_railway_detection

    if is_railway():
        ...

    detection = get_railway_detection({"REDIS_URL": "redis://redis.railway.internal:6379"})
    detection.detected_vars   # ("REDIS_URL",)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlsplit

from is_railway.types import Environ

RAILWAY_INTERNAL_SUFFIX = "railway.internal"

# Checked in this order; detection results follow it.
RAILWAY_ENV_VARS: tuple[str, ...] = (
    "DATABASE_URL",
    "POSTGRES_URL",
    "POSTGRESQL_URL",
    "REDIS_URL",
    "PLATFORM_REDIS_URL",
    "WEBHOOK_REDIS_URL",
    "MONGODB_URL",
    "MYSQL_URL",
)


@dataclass(frozen=True)
class RailwayDetection:
    """Which environment variables pointed at Railway's private network."""

    is_railway: bool = False
    detected_vars: tuple[str, ...] = ()
    railway_hosts: tuple[str, ...] = ()


def _hostname(url: str | None) -> str | None:
    """Return the lower-cased hostname of ``url``, or None if it does not parse as one."""
    if not url or not url.strip():
        return None
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
        # Raises for a non-numeric or out-of-range port.
        parts.port
    except ValueError:
        return None
    if not parts.scheme or not hostname or any(c.isspace() for c in hostname):
        return None
    return hostname.lower()


def _railway_hostname(url: str | None) -> str | None:
    """Return the hostname of ``url`` if it is on Railway's private network, else None."""
    hostname = _hostname(url)
    if hostname is not None and RAILWAY_INTERNAL_SUFFIX in hostname:
        return hostname
    return None


def is_railway_host(url: str | None) -> bool:
    """Check if a URL points at a ``railway.internal`` host. Never raises."""
    return _railway_hostname(url) is not None


def _railway_host_for(env: Environ, var: str) -> str | None:
    """Return the Railway hostname held by ``var``, or None if it isn't one."""
    return _railway_hostname(env.get(var))


def is_railway(env: Environ | None = None) -> bool:
    """Check if the environment is a Railway deployment. Stops at the first match."""
    env = os.environ if env is None else env
    return any(_railway_host_for(env, var) is not None for var in RAILWAY_ENV_VARS)


def get_railway_detection(env: Environ | None = None) -> RailwayDetection:
    """
    Scan every known URL variable and report which ones point at Railway.

    Args:
        env: Environment mapping. Defaults to ``os.environ``.

    Returns:
        A :class:`RailwayDetection` with matching variable names in
        ``RAILWAY_ENV_VARS`` order and their distinct hostnames in order of
        first occurrence.
    """
    env = os.environ if env is None else env
    detected_vars: list[str] = []
    railway_hosts: list[str] = []

    for var in RAILWAY_ENV_VARS:
        hostname = _railway_host_for(env, var)
        if hostname is None:
            continue
        detected_vars.append(var)
        if hostname not in railway_hosts:
            railway_hosts.append(hostname)

    return RailwayDetection(
        is_railway=bool(detected_vars),
        detected_vars=tuple(detected_vars),
        railway_hosts=tuple(railway_hosts),
    )
