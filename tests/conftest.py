"""Shared fixtures for wxtoken tests."""

import pytest

from wxtoken import create_app
from wxtoken.src.config import Config
from wxtoken.src.errors import TransportError
from wxtoken.src.services.refresher import CredentialRefresher


class AppConfig(Config):
    DEBUG = False
    WXTOKEN_APPID = "wx-test-app"
    WXTOKEN_APPSECRET = "s3cret"


class ScriptedFetcher:
    """Fetcher double returning (or raising) scripted results and recording params."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def fetch(self, *params):
        self.calls.append(params)
        result = self.results.pop(0) if self.results else TransportError("no scripted result left")
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def refresher():
    r = CredentialRefresher(ScriptedFetcher(), ScriptedFetcher(), retry_interval=0)
    yield r
    r.stop()


@pytest.fixture
def app(refresher):
    return create_app(AppConfig, refresher)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def scripted():
    """Factory for scripted fetcher doubles."""
    return ScriptedFetcher
