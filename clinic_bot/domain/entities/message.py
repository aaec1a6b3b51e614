from __future__ import annotations

from dataclasses import dataclass


GROUP_SUFFIX = "@g.us"
STATUS_BROADCAST = "status@broadcast"


@dataclass(frozen=True)
class InboundMessage:
    chat_id: str
    body: str
    id: str | None = None
    is_status: bool = False
    from_me: bool = False

    @property
    def user_id(self) -> str:
        return self.chat_id.split("@", 1)[0]

    @property
    def is_group(self) -> bool:
        return self.chat_id.endswith(GROUP_SUFFIX)
