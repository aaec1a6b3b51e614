from __future__ import annotations

import logging

from clinic_bot.application.ports.chat_transport import ChatTransportPort


class SendReplyUseCase:
    def __init__(self, transport: ChatTransportPort, auto_reply_enabled: bool = True) -> None:
        self._transport = transport
        self._auto_reply_enabled = auto_reply_enabled
        self._logger = logging.getLogger(__name__)

    async def execute(self, chat_id: str, text: str) -> bool:
        """Send a reply. Returns True if actually sent, False if skipped."""
        if not self._auto_reply_enabled:
            self._logger.info("WOULD_SEND_REPLY", extra={"chat_id": chat_id, "reply_text": text})
            self._logger.info("AUTO_REPLY_ENABLED=false -> skipping send")
            return False
        await self._transport.send_text(chat_id=chat_id, text=text)
        return True
