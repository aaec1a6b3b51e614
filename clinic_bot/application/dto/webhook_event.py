from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from clinic_bot.domain.entities.message import STATUS_BROADCAST, InboundMessage


class WahaWebhookEventDTO(BaseModel):
    event: str | None = None
    session: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)

    def extract_message(self) -> InboundMessage | None:
        if self.event != "message":
            return None

        payload = self.payload or {}
        chat_id = payload.get("from")
        if not chat_id:
            return None

        message_id = payload.get("id")
        return InboundMessage(
            chat_id=str(chat_id),
            body=str(payload.get("body") or ""),
            id=str(message_id) if message_id else None,
            is_status=str(chat_id) == STATUS_BROADCAST,
            from_me=bool(payload.get("fromMe", False)),
        )
