from __future__ import annotations

import logging
from typing import Any

import httpx


class WahaClient:
    """Thin async client for the WAHA (WhatsApp HTTP API) REST endpoints."""

    def __init__(
        self,
        api_url: str,
        api_key: str | None,
        session: str = "default",
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._session = session
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["X-Api-Key"] = api_key
        self._client = http_client or httpx.AsyncClient(base_url=api_url.rstrip("/"), timeout=10.0)
        self._client.headers.update(headers)
        self._logger = logging.getLogger(__name__)

    @property
    def session(self) -> str:
        return self._session

    async def send_text(self, chat_id: str, text: str) -> None:
        await self._post("/api/sendText", {"chatId": chat_id, "text": text, "session": self._session})

    async def start_typing(self, chat_id: str) -> None:
        await self._post("/api/startTyping", {"chatId": chat_id, "session": self._session})

    async def stop_typing(self, chat_id: str) -> None:
        await self._post("/api/stopTyping", {"chatId": chat_id, "session": self._session})

    async def start_session(self) -> httpx.Response:
        """POST /api/sessions/{session}/start. The caller interprets the status code."""
        return await self._client.post(f"/api/sessions/{self._session}/start")

    async def get_session(self) -> dict[str, Any]:
        resp = await self._client.get(f"/api/sessions/{self._session}")
        resp.raise_for_status()
        return resp.json()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, path: str, payload: dict[str, Any]) -> None:
        resp = await self._client.post(path, json=payload)
        if resp.status_code >= 400:
            self._logger.error(
                "WAHA request failed",
                extra={
                    "path": path,
                    "status": resp.status_code,
                    "error_message": resp.text,
                    "chat_id": payload.get("chatId"),
                },
            )
            resp.raise_for_status()
