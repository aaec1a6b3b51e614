"""
Tests for the WAHA webhook endpoint and event parsing.
"""

from __future__ import annotations

import hashlib
import hmac
import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

import clinic_bot.api.webhooks as webhooks_module
from clinic_bot.application.dto.webhook_event import WahaWebhookEventDTO
from clinic_bot.core.config import settings
from clinic_bot.domain.entities.message import InboundMessage
from clinic_bot.infrastructure.whatsapp.webhook_verify import verify_hmac_signature


class RecordingUseCase:
    def __init__(self) -> None:
        self.messages: list[InboundMessage] = []

    async def handle(self, message: InboundMessage) -> None:
        self.messages.append(message)


def _event(body: str = "1", chat_id: str = "5493410000000@c.us", **payload) -> dict:
    return {
        "event": "message",
        "session": "default",
        "payload": {"id": "wamid.1", "from": chat_id, "body": body, "fromMe": False, **payload},
    }


@pytest.fixture
def use_case(monkeypatch):
    recorder = RecordingUseCase()
    monkeypatch.setattr(webhooks_module, "get_handle_incoming_message_use_case", lambda: recorder)
    monkeypatch.setattr(settings, "WAHA_WEBHOOK_HMAC_KEY", None)
    monkeypatch.setattr(settings, "ENV", "dev")
    return recorder


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(webhooks_module.router)
    return TestClient(app)


def test_message_event_is_dispatched(client, use_case):
    resp = client.post("/webhooks/whatsapp", json=_event("2"))

    assert resp.status_code == 200
    assert use_case.messages == [InboundMessage(chat_id="5493410000000@c.us", body="2", id="wamid.1")]


def test_other_events_are_acknowledged_and_ignored(client, use_case):
    resp = client.post("/webhooks/whatsapp", json={"event": "session.status", "payload": {"status": "WORKING"}})

    assert resp.status_code == 200
    assert use_case.messages == []


def test_unparseable_body_is_bad_request(client, use_case):
    resp = client.post("/webhooks/whatsapp", content=b"{nope", headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert use_case.messages == []


def test_signed_webhook(client, use_case, monkeypatch):
    monkeypatch.setattr(settings, "WAHA_WEBHOOK_HMAC_KEY", "secret")
    monkeypatch.setattr(settings, "ENV", "prod")
    body = json.dumps(_event()).encode("utf-8")
    good = hmac.new(b"secret", body, hashlib.sha512).hexdigest()

    ok = client.post("/webhooks/whatsapp", content=body, headers={"X-Webhook-Hmac": good})
    bad = client.post("/webhooks/whatsapp", content=body, headers={"X-Webhook-Hmac": "0" * 128})
    missing = client.post("/webhooks/whatsapp", content=body)

    assert ok.status_code == 200
    assert bad.status_code == 403
    assert missing.status_code == 403
    assert len(use_case.messages) == 1


def test_verify_accepts_missing_header_in_dev_only():
    assert verify_hmac_signature(b"{}", None, "secret", "dev") is True
    assert verify_hmac_signature(b"{}", None, "secret", "prod") is False
    assert verify_hmac_signature(b"{}", None, None, "prod") is True


def test_extract_marks_status_and_own_messages():
    status = WahaWebhookEventDTO.model_validate(_event(chat_id="status@broadcast")).extract_message()
    own = WahaWebhookEventDTO.model_validate(_event(fromMe=True)).extract_message()
    group = WahaWebhookEventDTO.model_validate(_event(chat_id="1203630000@g.us")).extract_message()

    assert status.is_status
    assert own.from_me
    assert group.is_group
    assert group.user_id == "1203630000"


def test_extract_without_sender_or_body():
    assert WahaWebhookEventDTO.model_validate({"event": "message", "payload": {"body": "1"}}).extract_message() is None

    media_only = WahaWebhookEventDTO.model_validate(
        {"event": "message", "payload": {"from": "549@c.us", "body": None}}
    ).extract_message()
    assert media_only.body == ""
    assert media_only.id is None
