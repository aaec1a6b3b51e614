from __future__ import annotations

import asyncio
import logging
import random

from clinic_bot.application.exceptions import TransportError
from clinic_bot.application.ports.chat_transport import ChatTransportPort
from clinic_bot.application.ports.session_store import SessionStorePort
from clinic_bot.application.use_cases.conversation_engine import ConversationEngine, EngineResult
from clinic_bot.application.use_cases.reply_renderer import APOLOGY_TEXT
from clinic_bot.application.use_cases.send_reply import SendReplyUseCase
from clinic_bot.application.utils.user_locks import UserLocks
from clinic_bot.domain.entities.message import InboundMessage


class HandleIncomingMessageUseCase:
    def __init__(
        self,
        store: SessionStorePort,
        engine: ConversationEngine,
        transport: ChatTransportPort,
        send_reply: SendReplyUseCase,
        think_delay_min_seconds: float,
        think_delay_max_seconds: float,
    ) -> None:
        if think_delay_min_seconds < 0 or think_delay_max_seconds < think_delay_min_seconds:
            raise ValueError("Think delay bounds must satisfy 0 <= min <= max.")
        self._store = store
        self._engine = engine
        self._transport = transport
        self._send_reply = send_reply
        self._think_delay = (think_delay_min_seconds, think_delay_max_seconds)
        self._locks = UserLocks()
        self._logger = logging.getLogger(__name__)

    async def handle(self, message: InboundMessage) -> None:
        if message.is_status or message.is_group or message.from_me:
            self._logger.debug("Ignoring non-user message", extra={"chat_id": message.chat_id})
            return

        if message.id:
            if self._store.has_processed(message.id):
                self._logger.info("Duplicate message ignored", extra={"message_id": message.id})
                return
            self._store.mark_processed(message.id)

        async with self._locks.hold(message.user_id):
            await self._process(message)

    async def _process(self, message: InboundMessage) -> None:
        session = self._store.get_or_create(message.user_id)
        self._logger.info(
            "Message received",
            extra={"chat_id": message.chat_id, "state": _state_name(session.state), "message_id": message.id},
        )

        try:
            result = self._engine.handle(session, message.body)
            if not result.replies:
                return

            await self._think(message.chat_id)
            for reply in result.replies:
                await self._send_reply.execute(message.chat_id, reply)
        except TransportError as e:
            self._logger.error(
                "Failed to send reply, state not committed",
                extra={"chat_id": message.chat_id, "reason": str(e)},
            )
            await self._apologize(message.chat_id)
            return
        except Exception:
            self._logger.exception("Error processing message", extra={"chat_id": message.chat_id})
            await self._apologize(message.chat_id)
            return

        self._commit(result)

    def _commit(self, result: EngineResult) -> None:
        self._store.save(result.session)
        self._logger.info(
            "Session state updated",
            extra={"user_id": result.session.user_id, "next_state": _state_name(result.session.state)},
        )

    async def _think(self, chat_id: str) -> None:
        """Pause like a human would before answering, with the typing indicator on."""
        await self._presence(self._transport.start_typing, chat_id)
        try:
            await asyncio.sleep(random.uniform(*self._think_delay))
        finally:
            await self._presence(self._transport.stop_typing, chat_id)

    async def _presence(self, update, chat_id: str) -> None:
        try:
            await update(chat_id)
        except TransportError as e:
            self._logger.warning("Typing indicator failed", extra={"chat_id": chat_id, "reason": str(e)})

    async def _apologize(self, chat_id: str) -> None:
        try:
            await self._send_reply.execute(chat_id, APOLOGY_TEXT)
        except Exception:
            self._logger.exception("Failed to send error message", extra={"chat_id": chat_id})


def _state_name(state: object) -> str:
    return str(getattr(state, "value", state))
