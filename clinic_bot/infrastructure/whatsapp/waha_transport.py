from __future__ import annotations

import logging

import httpx

from clinic_bot.application.exceptions import AuthFailure, TransportError
from clinic_bot.application.ports.chat_transport import ChatTransportPort
from clinic_bot.infrastructure.whatsapp.waha_client import WahaClient


SESSION_READY = "WORKING"
SESSION_NEEDS_QR = "SCAN_QR_CODE"
SESSION_FAILED = "FAILED"


class WahaTransport(ChatTransportPort):
    def __init__(self, client: WahaClient) -> None:
        self._client = client
        self._logger = logging.getLogger(__name__)

    async def send_text(self, chat_id: str, text: str) -> None:
        try:
            await self._client.send_text(chat_id=chat_id, text=text)
        except httpx.HTTPError as e:
            raise TransportError(f"Error sending text message to {chat_id}: {e}") from e
        self._logger.info("Reply sent", extra={"chat_id": chat_id})

    async def start_typing(self, chat_id: str) -> None:
        try:
            await self._client.start_typing(chat_id)
        except httpx.HTTPError as e:
            raise TransportError(f"Error starting typing state for {chat_id}: {e}") from e

    async def stop_typing(self, chat_id: str) -> None:
        try:
            await self._client.stop_typing(chat_id)
        except httpx.HTTPError as e:
            raise TransportError(f"Error clearing typing state for {chat_id}: {e}") from e

    async def ensure_ready(self) -> None:
        session = self._client.session
        try:
            resp = await self._client.start_session()
            if resp.status_code == 401:
                raise AuthFailure("WAHA rejected the API key (401). Check WAHA_API_KEY.")
            if resp.status_code == 422:
                self._logger.warning("WAHA session '%s' already started", session)
            elif resp.status_code >= 400:
                resp.raise_for_status()

            info = await self._client.get_session()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 401:
                raise AuthFailure("WAHA rejected the API key (401). Check WAHA_API_KEY.") from e
            raise TransportError(f"Cannot start WAHA session '{session}': {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Cannot reach WAHA: {e}") from e

        status = str(info.get("status") or "")
        if status == SESSION_FAILED:
            raise AuthFailure(f"WhatsApp session '{session}' failed to authenticate; pair it again.")
        if status == SESSION_NEEDS_QR:
            self._logger.warning("WhatsApp session '%s' waiting for QR pairing, scan it in WAHA", session)
        else:
            self._logger.info("WhatsApp session '%s' status: %s", session, status)

    async def close(self) -> None:
        await self._client.aclose()
