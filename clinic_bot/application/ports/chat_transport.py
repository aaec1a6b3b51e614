from abc import ABC, abstractmethod


class ChatTransportPort(ABC):
    @abstractmethod
    async def send_text(self, chat_id: str, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def start_typing(self, chat_id: str) -> None:
        """Show the "typing..." indicator. Best-effort."""
        raise NotImplementedError

    @abstractmethod
    async def stop_typing(self, chat_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def ensure_ready(self) -> None:
        """
        Make sure the transport is connected and authenticated.
        Raises AuthFailure when the WhatsApp session cannot be used.
        """
        raise NotImplementedError

    @abstractmethod
    async def close(self) -> None:
        raise NotImplementedError
