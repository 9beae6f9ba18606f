"""Pydantic model for PostgreSQL configuration options.

``get_postgres_config`` accepts either an instance of
``PostgresConfigOptions`` or a plain dict of the same fields; dicts are
validated through this model, so typos and wrongly typed values fail early
with a ``pydantic.ValidationError``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PostgresConfigOptions(BaseModel):
    """Caller overrides for :func:`is_railway.postgres.get_postgres_config`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    reject_unauthorized: bool = False
    """Reject untrusted server certificates. Always forced off on Railway."""

    ca: str | None = None
    """PEM-encoded CA certificate to trust."""

    force_ssl: bool = False
    """Keep SSL on for local connections (skip adding ``sslmode=disable``)."""

    enable_logging: bool = True
    """Report configuration changes to the log sink."""
