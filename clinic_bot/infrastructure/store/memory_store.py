from __future__ import annotations

from collections import OrderedDict

from clinic_bot.application.ports.session_store import SessionStorePort
from clinic_bot.domain.entities.session import Session


class MemorySessionStore(SessionStorePort):
    def __init__(self, processed_limit: int = 1000) -> None:
        self._sessions: dict[str, Session] = {}
        self._processed: OrderedDict[str, None] = OrderedDict()
        self._processed_limit = processed_limit

    def get_or_create(self, user_id: str) -> Session:
        session = self._sessions.get(user_id)
        if session is None:
            session = Session(user_id=user_id)
            self._sessions[user_id] = session
        return session

    def save(self, session: Session) -> None:
        self._sessions[session.user_id] = session

    def has_processed(self, message_id: str) -> bool:
        return message_id in self._processed

    def mark_processed(self, message_id: str) -> None:
        self._processed[message_id] = None
        self._processed.move_to_end(message_id)
        while len(self._processed) > self._processed_limit:
            self._processed.popitem(last=False)

    def __len__(self) -> int:
        return len(self._sessions)
