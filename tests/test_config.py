"""Tests for is_railway.config."""

import pytest
from pydantic import ValidationError

from is_railway.config import RailwayConfig, RailwaySSLConfig, get_railway_config, options_from_env
from is_railway.config_schema import PostgresConfigOptions
from is_railway.exceptions import InvalidArgumentError

RAILWAY_POSTGRES = "postgres://u:p@postgres.railway.internal:5432/db"


class TestGetRailwayConfig:
    def test_railway(self):
        config = get_railway_config({"POSTGRES_URL": RAILWAY_POSTGRES})
        assert config.is_railway is True
        assert config.environment == "railway"
        assert config.ssl == RailwaySSLConfig(enabled=True, reject_unauthorized=False, validate_certificate=False)
        assert config.detected_services == ("POSTGRES_URL",)
        assert config.hosts == ("postgres.railway.internal",)

    def test_local(self):
        config = get_railway_config({})
        assert config == RailwayConfig()
        assert config.environment == "local"
        assert config.ssl.enabled is False
        assert config.ssl.reject_unauthorized is False
        assert config.detected_services == ()

    def test_multiple_services(self):
        env = {
            "DATABASE_URL": RAILWAY_POSTGRES,
            "REDIS_URL": "redis://redis.railway.internal:6379",
        }
        config = get_railway_config(env)
        assert config.detected_services == ("DATABASE_URL", "REDIS_URL")
        assert config.hosts == ("postgres.railway.internal", "redis.railway.internal")

    def test_reads_os_environ_by_default(self, clean_env):
        clean_env.setenv("REDIS_URL", "redis://redis.railway.internal:6379")
        assert get_railway_config().environment == "railway"

    def test_as_dict(self):
        data = get_railway_config({"POSTGRES_URL": RAILWAY_POSTGRES}).as_dict()
        assert data == {
            "is_railway": True,
            "ssl": {"enabled": True, "reject_unauthorized": False, "validate_certificate": False},
            "environment": "railway",
            "detected_services": ["POSTGRES_URL"],
            "hosts": ["postgres.railway.internal"],
        }


class TestOptionsFromEnv:
    def test_defaults_when_unset(self):
        assert options_from_env({}) == PostgresConfigOptions()

    def test_reads_prefixed_vars(self):
        env = {
            "IS_RAILWAY_REJECT_UNAUTHORIZED": "true",
            "IS_RAILWAY_CA": "custom-ca",
            "IS_RAILWAY_FORCE_SSL": "1",
            "IS_RAILWAY_ENABLE_LOGGING": "no",
        }
        assert options_from_env(env) == PostgresConfigOptions(
            reject_unauthorized=True, ca="custom-ca", force_ssl=True, enable_logging=False
        )

    def test_custom_prefix(self):
        env = {"MYAPP_FORCE_SSL": "yes", "IS_RAILWAY_ENABLE_LOGGING": "false"}
        options = options_from_env(env, prefix="MYAPP_")
        assert options.force_ssl is True
        assert options.enable_logging is True

    def test_invalid_value(self):
        with pytest.raises(ValidationError):
            options_from_env({"IS_RAILWAY_FORCE_SSL": "sometimes"})

    def test_empty_prefix(self):
        with pytest.raises(InvalidArgumentError):
            options_from_env({}, prefix="")

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("IS_RAILWAY_FORCE_SSL", "true")
        assert options_from_env().force_ssl is True
