"""Shared test fixtures for is_railway."""

import pytest

from is_railway.env import RAILWAY_ENV_VARS


class RecordingSink:
    """LogSink that keeps every event for assertions."""

    def __init__(self):
        self.warnings: list[tuple[str, dict]] = []
        self.infos: list[tuple[str, dict]] = []

    def warn(self, message, details):
        self.warnings.append((message, dict(details)))

    def info(self, message, details):
        self.infos.append((message, dict(details)))


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every Railway URL variable from os.environ."""
    for var in RAILWAY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
