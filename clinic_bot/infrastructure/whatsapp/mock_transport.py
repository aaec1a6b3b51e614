from __future__ import annotations

import logging

from clinic_bot.application.ports.chat_transport import ChatTransportPort


class MockChatTransport(ChatTransportPort):
    """Logs instead of talking to WhatsApp. Keeps what was sent for inspection."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []
        self._logger = logging.getLogger(__name__)

    async def send_text(self, chat_id: str, text: str) -> None:
        self.sent.append((chat_id, text))
        self._logger.info("Mock send to WhatsApp", extra={"chat_id": chat_id, "reply_text": text})

    async def start_typing(self, chat_id: str) -> None:
        self._logger.debug("Mock typing on", extra={"chat_id": chat_id})

    async def stop_typing(self, chat_id: str) -> None:
        self._logger.debug("Mock typing off", extra={"chat_id": chat_id})

    async def ensure_ready(self) -> None:
        self._logger.info("Using MockChatTransport, nothing to connect")

    async def close(self) -> None:
        return None
