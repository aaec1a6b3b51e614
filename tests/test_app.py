"""
Tests for application startup, health and shutdown.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from conftest import FakeTransport

import clinic_bot.main as main_module
from clinic_bot.application.exceptions import AuthFailure, ConfigError
from clinic_bot.wiring import dependencies


def test_health_and_transport_closed_on_shutdown(monkeypatch, directory):
    transport = FakeTransport()
    monkeypatch.setattr(main_module, "get_clinic_directory", lambda: directory)
    monkeypatch.setattr(main_module, "get_chat_transport", lambda: transport)

    with TestClient(main_module.app) as client:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}
        assert transport.closed is False

    assert transport.closed is True


def test_config_error_aborts_startup(monkeypatch):
    def broken():
        raise ConfigError("missing clinic_name")

    monkeypatch.setattr(main_module, "get_clinic_directory", broken)

    with pytest.raises(ConfigError):
        with TestClient(main_module.app):
            pass


def test_auth_failure_aborts_startup(monkeypatch, directory):
    class Unpaired(FakeTransport):
        async def ensure_ready(self) -> None:
            raise AuthFailure("session FAILED")

    monkeypatch.setattr(main_module, "get_clinic_directory", lambda: directory)
    monkeypatch.setattr(main_module, "get_chat_transport", lambda: Unpaired())

    with pytest.raises(AuthFailure):
        with TestClient(main_module.app):
            pass


def test_conversation_engine_is_built_once(monkeypatch, directory):
    monkeypatch.setattr(dependencies, "get_clinic_directory", lambda: directory)
    dependencies.get_conversation_engine.cache_clear()
    try:
        engine = dependencies.get_conversation_engine()

        assert dependencies.get_conversation_engine() is engine
        assert engine._directory is directory
    finally:
        dependencies.get_conversation_engine.cache_clear()
