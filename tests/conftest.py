"""
Pytest configuration and fixtures.
"""

import pytest

from clinic_bot.application.exceptions import TransportError
from clinic_bot.application.ports.chat_transport import ChatTransportPort
from clinic_bot.application.use_cases.conversation_engine import ConversationEngine
from clinic_bot.domain.entities.clinic_directory import ClinicDirectory
from clinic_bot.domain.entities.professional import Professional
from clinic_bot.infrastructure.store.memory_store import MemorySessionStore


class FakeTransport(ChatTransportPort):
    """Records every call. ``fail_on_send`` makes the n-th send (1-based) raise."""

    def __init__(self, fail_on_send: int | None = None, fail_typing: bool = False) -> None:
        self.sent: list[tuple[str, str]] = []
        self.events: list[tuple[str, str]] = []
        self.send_attempts = 0
        self.fail_on_send = fail_on_send
        self.fail_typing = fail_typing
        self.closed = False

    async def send_text(self, chat_id: str, text: str) -> None:
        self.send_attempts += 1
        if self.fail_on_send is not None and self.send_attempts == self.fail_on_send:
            raise TransportError("boom")
        self.sent.append((chat_id, text))
        self.events.append(("send", chat_id))

    async def start_typing(self, chat_id: str) -> None:
        if self.fail_typing:
            raise TransportError("typing unavailable")
        self.events.append(("typing_on", chat_id))

    async def stop_typing(self, chat_id: str) -> None:
        if self.fail_typing:
            raise TransportError("typing unavailable")
        self.events.append(("typing_off", chat_id))

    async def ensure_ready(self) -> None:
        return None

    async def close(self) -> None:
        self.closed = True

    def texts(self) -> list[str]:
        return [text for _, text in self.sent]


@pytest.fixture
def directory():
    """Clinic with two professionals and three specialties."""
    return ClinicDirectory(
        clinic_name="Clínica San Roque",
        professionals=(
            Professional(name="Dr. Gómez", specialties=("Cardiología", "Clínica Médica")),
            Professional(name="Dra. Pérez", specialties=("Pediatría",)),
        ),
        specialties=("Cardiología", "Clínica Médica", "Pediatría"),
    )


@pytest.fixture
def engine(directory):
    return ConversationEngine(directory=directory)


@pytest.fixture
def store():
    return MemorySessionStore()


@pytest.fixture
def transport():
    return FakeTransport()
