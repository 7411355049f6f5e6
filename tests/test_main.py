"""Tests for the process entry point and packaging."""

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from setuptools import find_namespace_packages

import wxtoken.__main__ as entry
from wxtoken.src.config import Config


ROOT = Path(__file__).resolve().parent.parent


class TestMain:
    @pytest.fixture
    def events(self, monkeypatch):
        events = SimpleNamespace(order=[], refresher=MagicMock(), app=MagicMock())
        refresher, app = events.refresher, events.app

        def fake_create_app(config, injected):
            events.order.append("create_app")
            assert injected is refresher
            return app

        monkeypatch.setattr(entry, "CredentialRefresher", lambda: refresher)
        monkeypatch.setattr(entry, "create_app", fake_create_app)
        monkeypatch.setattr(entry.logging, "warning", lambda *a, **k: events.order.append("warning"))
        monkeypatch.setattr(Config, "WXTOKEN_ADDR", "127.0.0.1:8080")
        return events

    def test_missing_credentials_warned_after_logging_is_configured(self, events, monkeypatch):
        monkeypatch.setattr(Config, "WXTOKEN_APPID", "")
        monkeypatch.setattr(Config, "WXTOKEN_APPSECRET", "")

        entry.main()

        assert events.order == ["create_app", "warning"]

    def test_runs_app_and_stops_refresher(self, events, monkeypatch):
        monkeypatch.setattr(Config, "WXTOKEN_APPID", "wx-app")
        monkeypatch.setattr(Config, "WXTOKEN_APPSECRET", "secret")

        entry.main()

        assert events.order == ["create_app"]
        events.app.run.assert_called_once_with(host="127.0.0.1", port=8080, debug=False, threaded=True)
        events.refresher.start.assert_called_once_with()
        events.refresher.stop.assert_called_once_with()


class TestPackaging:
    def test_pyproject_discovers_namespace_subpackages(self):
        tomllib = pytest.importorskip("tomllib")
        with open(ROOT / "pyproject.toml", "rb") as fh:
            find = tomllib.load(fh)["tool"]["setuptools"]["packages"]["find"]

        assert find["namespaces"] is True
        packages = find_namespace_packages(where=str(ROOT), include=find["include"])
        for name in ("wxtoken", "wxtoken.routes", "wxtoken.src", "wxtoken.src.services"):
            assert name in packages
