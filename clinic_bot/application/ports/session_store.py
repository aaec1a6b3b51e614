from abc import ABC, abstractmethod

from clinic_bot.domain.entities.session import Session


class SessionStorePort(ABC):
    @abstractmethod
    def get_or_create(self, user_id: str) -> Session:
        raise NotImplementedError

    @abstractmethod
    def save(self, session: Session) -> None:
        raise NotImplementedError

    @abstractmethod
    def has_processed(self, message_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def mark_processed(self, message_id: str) -> None:
        raise NotImplementedError
