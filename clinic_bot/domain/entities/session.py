from __future__ import annotations

from dataclasses import dataclass

from clinic_bot.domain.entities.conversation_state import ConversationState
from clinic_bot.domain.entities.selection import SelectionData


@dataclass(frozen=True)
class Session:
    user_id: str
    state: ConversationState = ConversationState.MAIN_MENU
    # Only set while state is AWAITING_CONFIRMATION
    data: SelectionData | None = None
